"""Overlapping sliding-window chunker aligned to sentence boundaries."""

from __future__ import annotations

from typing import Any, Sequence

from ...text.sentences import SentenceSpan, split_sentences
from ...text.tokenizer import tokenize
from ..base import BaseChunker, Chunk, ChunkParams


def expand_to_sentences(
    start: int,
    end: int,
    sentences: Sequence[SentenceSpan],
) -> tuple[int, int]:
    """Widen ``[start, end]`` to the sentences containing each endpoint."""
    expanded_start, expanded_end = start, end
    for sentence in sentences:
        if sentence.start <= start <= sentence.end:
            expanded_start = sentence.start
        if sentence.start <= end <= sentence.end:
            expanded_end = sentence.end
    return expanded_start, expanded_end


class SlidingWindowChunker(BaseChunker):
    """Token windows advanced by a fixed stride.

    Unlike the other strategies, windows overlap: each one starts ``stride``
    tokens after the previous. A window's text is its tokens; its span is
    widened to whole sentences.
    """

    name = "sliding"
    default_chunk_size = 400

    def __init__(self, params: ChunkParams | None = None, **kwargs: Any) -> None:
        super().__init__(params=params, **kwargs)
        if self.params.chunk_overlap is None:
            overlap = self.chunk_size // 4
        else:
            overlap = self.params.chunk_overlap
        self.stride = max(1, self.chunk_size - overlap)

    def chunk(
        self,
        text: str,
        metadata: dict[str, Any] | None = None,
    ) -> list[Chunk]:
        sentences = split_sentences(text)
        tokens = tokenize(text)
        if not sentences or not tokens:
            return []

        chunks: list[Chunk] = []
        for pos in range(0, len(tokens), self.stride):
            end_pos = min(len(tokens), pos + self.chunk_size)
            window = tokens[pos:end_pos]
            start, end = expand_to_sentences(window[0].start, window[-1].end, sentences)
            chunks.append(
                self._make_chunk(
                    " ".join(token.value for token in window),
                    start,
                    end,
                    metadata,
                )
            )
            if end_pos == len(tokens):
                break
        return chunks
