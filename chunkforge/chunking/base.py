"""Base classes for text chunking."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields, replace
from typing import Any, Sequence
from uuid import uuid4

from ..utils.batching import concurrent_map

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChunkParams:
    """Parameters for chunking configuration.

    Resolved once when a chunker is constructed and never mutated afterwards.

    Attributes:
        chunk_size: Target token budget per chunk (None: strategy default).
        chunk_overlap: Tokens shared by consecutive windows (None: strategy default).
        min_chunk_size: Hybrid balancing lower bound (None: chunk_size // 2).
        max_chunk_size: Hybrid balancing upper bound (None: 1.5 * chunk_size).
        thresholding: Boundary detection strategy for semantic chunking.
        smoothing_window: Moving-average window over adjacent similarities.
        percentile: Percentile used by the percentile strategy.
        gradient_threshold: Minimum similarity drop for the gradient strategy.
        z_score_k: Standard deviations below the mean for the z-score strategy.
        topic_count: Number of topic clusters (None: round(sqrt(n)), at least 2).
        max_concurrent_embeddings: Worker limit for batch chunking.
    """

    chunk_size: int | None = None
    chunk_overlap: int | None = None
    min_chunk_size: int | None = None
    max_chunk_size: int | None = None
    thresholding: str = "statistical-zscore"
    smoothing_window: int = 3
    percentile: float = 10.0
    gradient_threshold: float = 0.15
    z_score_k: float = 1.0
    topic_count: int | None = None
    max_concurrent_embeddings: int = 4


PARAM_FIELDS = frozenset(f.name for f in fields(ChunkParams))


def _new_chunk_id() -> str:
    return str(uuid4())


@dataclass
class Chunk:
    """A contiguous segment of the source text.

    Attributes:
        text: The chunk text content.
        start: Start character offset in the original document.
        end: End character offset in the original document.
        id: Unique ID for this chunk.
        metadata: Additional metadata (``chunker`` name, topic ``cluster``, ...).
    """

    text: str
    start: int
    end: int
    id: str = field(default_factory=_new_chunk_id)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        preview = self.text[:50] + "..." if len(self.text) > 50 else self.text
        return (
            f"Chunk(id={self.id!r}, "
            f"offset={self.start}-{self.end}, "
            f"text={preview!r})"
        )


class BaseChunker(ABC):
    """Base class for all text chunking methods.

    Each chunking method should:
    1. Inherit from this class
    2. Implement the chunk() method
    3. Be registered in a ``ChunkerRegistry``

    Example:
        ```python
        class MyChunker(BaseChunker):
            name = "mine"

            def chunk(self, text, metadata=None):
                return [self._make_chunk(text, 0, len(text), metadata)]

        registry.register("mine", MyChunker)
        ```
    """

    name: str = "base"
    default_chunk_size: int = 500

    def __init__(self, params: ChunkParams | None = None, **kwargs: Any) -> None:
        """Initialize chunker with parameters.

        Args:
            params: ChunkParams instance with chunking configuration.
            **kwargs: Additional parameters (ChunkParams field names override params).
        """
        if params is None:
            params = ChunkParams()

        overrides = {key: kwargs.pop(key) for key in list(kwargs) if key in PARAM_FIELDS}
        self.params = replace(params, **overrides)
        self.config = kwargs

        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    @property
    def chunk_size(self) -> int:
        return self.params.chunk_size or self.default_chunk_size

    @abstractmethod
    def chunk(
        self,
        text: str,
        metadata: dict[str, Any] | None = None,
    ) -> list[Chunk]:
        """Split text into chunks.

        Args:
            text: Input text to chunk.
            metadata: Additional metadata to include in each chunk.

        Returns:
            Chunks in document order.
        """
        raise NotImplementedError

    def chunk_batch(
        self,
        texts: Sequence[str],
        metadata_list: Sequence[dict[str, Any]] | None = None,
        max_workers: int | None = None,
    ) -> list[list[Chunk]]:
        """Chunk multiple documents with a bounded worker pool.

        Args:
            texts: Documents to chunk.
            metadata_list: Optional metadata for each document.
            max_workers: Worker limit (default: params.max_concurrent_embeddings).

        Returns:
            List of chunk lists (one per input document, in input order).
        """
        if metadata_list is None:
            metadata_list = [{}] * len(texts)
        if len(metadata_list) != len(texts):
            raise ValueError("metadata_list must have one entry per text")

        workers = max_workers or self.params.max_concurrent_embeddings
        pairs = list(zip(texts, metadata_list))
        return concurrent_map(pairs, workers, lambda pair: self.chunk(pair[0], metadata=pair[1]))

    def _make_chunk(
        self,
        text: str,
        start: int,
        end: int,
        metadata: dict[str, Any] | None = None,
        **extra: Any,
    ) -> Chunk:
        chunk_metadata = {**(metadata or {}), "chunker": self.name, **extra}
        return Chunk(text=text, start=start, end=end, metadata=chunk_metadata)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(params={self.params})"


__all__ = ["BaseChunker", "Chunk", "ChunkParams", "PARAM_FIELDS"]
