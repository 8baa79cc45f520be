"""Regex-based sentence and paragraph splitting with original offsets.

Paragraphs are separated by two or more newlines. Sentences end at ``.``,
``!`` or ``?`` followed by whitespace. Offsets always refer to the original
text; a paragraph break is booked as a 2-character separator when advancing
the search cursor.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SENTENCE_PATTERN = re.compile(r"(?<=[.!?])\s+")
PARAGRAPH_PATTERN = re.compile(r"\n{2,}")

# Width reserved for a paragraph break when advancing the search cursor.
_PARAGRAPH_GAP = 2


@dataclass(frozen=True)
class SentenceSpan:
    """A sentence (or paragraph) and its offsets in the original text."""

    text: str
    start: int
    end: int


def split_sentences(text: str) -> list[SentenceSpan]:
    """Split text into sentences, paragraph by paragraph.

    Args:
        text: Original document text.

    Returns:
        Sentence spans in increasing, non-overlapping order.
    """
    sentences: list[SentenceSpan] = []
    cursor = 0
    for paragraph in PARAGRAPH_PATTERN.split(text):
        trimmed = paragraph.strip()
        if not trimmed:
            cursor += len(paragraph) + _PARAGRAPH_GAP
            continue
        for fragment in SENTENCE_PATTERN.split(trimmed):
            start = text.find(fragment, cursor)
            end = start + len(fragment)
            sentences.append(SentenceSpan(text=fragment, start=start, end=end))
            cursor = end
        cursor += _PARAGRAPH_GAP

    if not sentences and text.strip():
        sentences.append(SentenceSpan(text=text.strip(), start=0, end=len(text)))
    return sentences


def split_paragraphs(text: str) -> list[SentenceSpan]:
    """Split text into paragraphs separated by blank lines."""
    paragraphs: list[SentenceSpan] = []
    cursor = 0
    for segment in PARAGRAPH_PATTERN.split(text):
        trimmed = segment.strip()
        if not trimmed:
            cursor += len(segment) + _PARAGRAPH_GAP
            continue
        start = text.find(trimmed, cursor)
        end = start + len(trimmed)
        paragraphs.append(SentenceSpan(text=trimmed, start=start, end=end))
        cursor = end + _PARAGRAPH_GAP

    if not paragraphs and text.strip():
        paragraphs.append(SentenceSpan(text=text.strip(), start=0, end=len(text)))
    return paragraphs


__all__ = ["SentenceSpan", "split_sentences", "split_paragraphs", "SENTENCE_PATTERN", "PARAGRAPH_PATTERN"]
