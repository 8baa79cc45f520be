"""Hybrid chunker: paragraph structure first, semantic splitting inside long paragraphs."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Sequence

from ...embedding.base import BaseEmbedder
from ...text.sentences import split_paragraphs
from ...text.tokenizer import count_tokens
from ..base import BaseChunker, Chunk, ChunkParams
from ..boundaries.registry import BoundaryDetectorRegistry
from ..size_enforcement import OVERSIZE_FACTOR, merge_chunks
from .semantic import SemanticChunker

logger = logging.getLogger(__name__)


class HybridChunker(BaseChunker):
    """Paragraph-aware chunker.

    Short paragraphs (at most ``min_chunk_size`` tokens) are kept whole; long
    ones are handed to an inner ``SemanticChunker``. The resulting pieces are
    then balanced: neighbours are merged with a newline unless the merge would
    exceed ``max_chunk_size`` tokens.

    Config options:
        min_chunk_size: default ``chunk_size // 2``
        max_chunk_size: default ``1.5 * chunk_size``
    """

    name = "hybrid"
    default_chunk_size = 600

    def __init__(
        self,
        params: ChunkParams | None = None,
        embedder: BaseEmbedder | None = None,
        detectors: BoundaryDetectorRegistry | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(params=params, **kwargs)
        self.semantic = SemanticChunker(
            params=replace(self.params, chunk_size=self.chunk_size),
            embedder=embedder,
            detectors=detectors,
            **self.config,
        )
        self.min_chunk_size = self.params.min_chunk_size or self.chunk_size // 2
        self.max_chunk_size = self.params.max_chunk_size or self.chunk_size * OVERSIZE_FACTOR

    def chunk(
        self,
        text: str,
        metadata: dict[str, Any] | None = None,
    ) -> list[Chunk]:
        pieces: list[Chunk] = []
        for paragraph in split_paragraphs(text):
            if count_tokens(paragraph.text) <= self.min_chunk_size:
                pieces.append(
                    self._make_chunk(paragraph.text, paragraph.start, paragraph.end, metadata)
                )
                continue

            for inner in self.semantic.chunk(paragraph.text, metadata):
                pieces.append(
                    replace(
                        inner,
                        start=paragraph.start + inner.start,
                        end=paragraph.start + inner.end,
                        metadata={**inner.metadata, "chunker": self.name},
                    )
                )

        balanced = self._balance(pieces)
        logger.debug("hybrid: %d pieces balanced into %d chunks", len(pieces), len(balanced))
        return balanced

    def _balance(self, pieces: Sequence[Chunk]) -> list[Chunk]:
        balanced: list[Chunk] = []
        pending: Chunk | None = None
        for piece in pieces:
            if pending is None:
                pending = piece
                continue
            combined = count_tokens(f"{pending.text}\n{piece.text}")
            if combined < self.min_chunk_size:
                pending = merge_chunks(pending, piece, separator="\n")
            elif combined > self.max_chunk_size:
                balanced.append(pending)
                pending = piece
            else:
                pending = merge_chunks(pending, piece, separator="\n")
        if pending is not None:
            balanced.append(pending)
        return balanced
