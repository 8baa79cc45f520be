"""Whitespace tokenizer with character offsets."""

from __future__ import annotations

import re
from dataclasses import dataclass

_TOKEN_PATTERN = re.compile(r"\S+")


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited unit of text.

    Attributes:
        value: Token text.
        start: Start character offset in the tokenized text.
        end: End character offset (exclusive).
    """

    value: str
    start: int
    end: int


def tokenize(text: str) -> list[Token]:
    """Split text on whitespace, keeping the offset range of each token."""
    return [
        Token(value=match.group(), start=match.start(), end=match.end())
        for match in _TOKEN_PATTERN.finditer(text)
    ]


def count_tokens(text: str) -> int:
    """Number of whitespace-delimited tokens in text."""
    return sum(1 for _ in _TOKEN_PATTERN.finditer(text))


def lowercase_tokens(text: str) -> list[str]:
    """Token values of the lowercased text (used by lexical detectors)."""
    return _TOKEN_PATTERN.findall(text.lower())


__all__ = ["Token", "tokenize", "count_tokens", "lowercase_tokens"]
