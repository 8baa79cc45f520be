"""Semantic chunker: sentence similarity signal plus pluggable boundary detection."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Sequence

from ...embedding.adapters.lexical import LexicalHashEmbedder
from ...embedding.base import BaseEmbedder, as_matrix
from ...errors import ConfigurationError
from ...text.sentences import SentenceSpan, split_sentences
from ...utils.smoothing import moving_average
from ...utils.vector_math import pairwise_cosine
from ..base import PARAM_FIELDS, BaseChunker, Chunk, ChunkParams
from ..boundaries.base import BoundaryConfig, BoundaryContext
from ..boundaries.registry import BoundaryDetectorRegistry, create_default_detector_registry
from ..size_enforcement import enforce_chunk_size

logger = logging.getLogger(__name__)

# BoundaryConfig fields that are not also ChunkParams fields.
DETECTOR_FIELDS = frozenset(f.name for f in fields(BoundaryConfig)) - PARAM_FIELDS


class SemanticChunker(BaseChunker):
    """Split text where the meaning shifts between sentences.

    Pipeline per call:
    1. Split into sentences (one sentence: returned as-is, nothing embedded).
    2. Embed all sentences in one batch; cosine similarity of neighbours,
       smoothed with a moving average.
    3. Run the configured boundary detector.
    4. Join the sentences of each segment into a chunk.
    5. Enforce the chunk size (split oversized, merge small neighbours).

    Without an embedder, a ``LexicalHashEmbedder`` is used so the chunker
    works offline.

    Example:
        ```python
        chunker = SemanticChunker(
            chunk_size=300,
            thresholding="lexical-cohesion",
            embedder=get_embedder("tei", endpoint_url="http://tei:80"),
        )
        chunks = chunker.chunk(document)
        ```
    """

    name = "semantic"
    default_chunk_size = 600

    def __init__(
        self,
        params: ChunkParams | None = None,
        embedder: BaseEmbedder | None = None,
        detectors: BoundaryDetectorRegistry | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize SemanticChunker.

        Args:
            params: ChunkParams configuration.
            embedder: Sentence embedder (default: LexicalHashEmbedder).
            detectors: Detector registry used to resolve ``params.thresholding``.
            **kwargs: ChunkParams overrides and detector parameters
                (block_size, contrast_window, max_segments, ...).

        Raises:
            ConfigurationError: If the thresholding strategy is unknown or
                ``percentile`` is outside [0, 100].
        """
        detector_overrides = {key: kwargs.pop(key) for key in list(kwargs) if key in DETECTOR_FIELDS}
        super().__init__(params=params, **kwargs)
        if not 0 <= self.params.percentile <= 100:
            raise ConfigurationError(f"percentile must be within [0, 100], got {self.params.percentile}")

        self.embedder = embedder if embedder is not None else LexicalHashEmbedder()
        self.detectors = detectors if detectors is not None else create_default_detector_registry()
        self.detector = self.detectors.resolve(self.params.thresholding)
        self.boundary_config = replace(
            BoundaryConfig(
                z_score_k=self.params.z_score_k,
                percentile=self.params.percentile,
                gradient_threshold=self.params.gradient_threshold,
            ),
            **detector_overrides,
        )

    def chunk(
        self,
        text: str,
        metadata: dict[str, Any] | None = None,
    ) -> list[Chunk]:
        sentences = split_sentences(text)
        if not sentences:
            return []
        if len(sentences) == 1:
            only = sentences[0]
            return [self._make_chunk(only.text, only.start, only.end, metadata, strategy=self.detector.name)]

        texts = [sentence.text for sentence in sentences]
        embeddings = as_matrix(self.embedder.embed_batch(texts), len(texts))
        similarities = moving_average(pairwise_cosine(embeddings), self.params.smoothing_window)

        context = BoundaryContext(
            text=text,
            sentences=sentences,
            similarities=similarities,
            embeddings=embeddings,
        )
        boundaries = self.detector.boundaries(context, self.boundary_config)
        segments = self._materialize(sentences, boundaries, metadata)
        chunks = enforce_chunk_size(segments, self.chunk_size)

        logger.debug(
            "semantic[%s]: %d sentences, %d boundaries, %d chunks",
            self.detector.name,
            len(sentences),
            len(boundaries),
            len(chunks),
        )
        return chunks

    def _materialize(
        self,
        sentences: Sequence[SentenceSpan],
        boundaries: Sequence[int],
        metadata: dict[str, Any] | None,
    ) -> list[Chunk]:
        chunks: list[Chunk] = []
        first = 0
        for boundary in [*boundaries, len(sentences) - 1]:
            if boundary < first:
                continue
            run = sentences[first : boundary + 1]
            chunks.append(
                self._make_chunk(
                    " ".join(sentence.text for sentence in run),
                    run[0].start,
                    run[-1].end,
                    metadata,
                    strategy=self.detector.name,
                )
            )
            first = boundary + 1
        return chunks
