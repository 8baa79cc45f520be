"""Fixed-size token window chunker."""

from __future__ import annotations

from typing import Any

from ...text.tokenizer import tokenize
from ..base import BaseChunker, Chunk, ChunkParams


class FixedChunker(BaseChunker):
    """Fixed-size chunker with token overlap.

    Splits text into windows of ``chunk_size`` whitespace tokens. Consecutive
    windows share ``chunk_overlap`` tokens (default: a tenth of the size).

    Example:
        ```python
        chunker = FixedChunker(chunk_size=200, chunk_overlap=20)
        chunks = chunker.chunk("Long text here...")
        ```
    """

    name = "fixed"
    default_chunk_size = 500

    def __init__(self, params: ChunkParams | None = None, **kwargs: Any) -> None:
        super().__init__(params=params, **kwargs)
        if self.params.chunk_overlap is None:
            self.chunk_overlap = self.chunk_size // 10
        else:
            self.chunk_overlap = self.params.chunk_overlap
        if self.chunk_overlap < 0:
            raise ValueError(f"chunk_overlap must not be negative, got {self.chunk_overlap}")

    def chunk(
        self,
        text: str,
        metadata: dict[str, Any] | None = None,
    ) -> list[Chunk]:
        """Split text into fixed-size token windows.

        Args:
            text: Input text to chunk.
            metadata: Additional metadata for chunks.

        Returns:
            Chunks whose text is the window tokens joined by single spaces.
        """
        tokens = tokenize(text)
        if not tokens:
            return []

        chunks: list[Chunk] = []
        total_tokens = len(tokens)
        pos = 0

        while pos < total_tokens:
            end_pos = min(total_tokens, pos + self.chunk_size)
            window = tokens[pos:end_pos]
            chunks.append(
                self._make_chunk(
                    " ".join(token.value for token in window),
                    window[0].start,
                    window[-1].end,
                    metadata,
                    token_count=len(window),
                )
            )
            if end_pos >= total_tokens:
                break

            # Move position with overlap
            prev_pos = pos
            pos = max(0, end_pos - self.chunk_overlap)
            # Prevent infinite loop: ensure we always move forward
            if pos <= prev_pos:
                pos = end_pos

        return chunks
