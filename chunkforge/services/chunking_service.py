"""Chunking service: settings-driven embedder and chunker wiring."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..chunking.base import BaseChunker, Chunk
from ..chunking.registry import ChunkerRegistry, create_default_registry
from ..config.settings import ChunkingSettings, chunking_settings
from ..embedding.base import BaseEmbedder
from ..embedding.registry import EmbedderRegistry, create_default_embedder_registry
from ..utils.batching import concurrent_map

logger = logging.getLogger(__name__)

# Built-in chunkers that embed sentences.
EMBEDDING_CHUNKERS = frozenset({"semantic", "hybrid", "topic"})


def embedder_options(settings: ChunkingSettings) -> dict[str, Any]:
    """Translate embedding settings into constructor options for the configured method."""
    method = settings.embedding_method
    if method == "tei":
        options = {
            "endpoint_url": settings.embedding_endpoint,
            "timeout": settings.embedding_timeout,
            "batch_size": settings.embedding_batch_size,
        }
    elif method == "openai":
        options = {
            "api_key": settings.embedding_api_key,
            "model": settings.embedding_model,
            "endpoint": settings.embedding_endpoint,
            "timeout": settings.embedding_timeout,
            "batch_size": settings.embedding_batch_size,
        }
    elif method == "huggingface":
        options = {
            "api_key": settings.embedding_api_key,
            "model": settings.embedding_model,
            "endpoint": settings.embedding_endpoint,
            "timeout": settings.embedding_timeout,
        }
    elif method == "sentence_transformer":
        options = {"model_name": settings.embedding_model}
    else:
        options = {}
    return {key: value for key, value in options.items() if value is not None}


class ChunkingService:
    """Chunk documents with the chunker and embedder named in settings.

    Example:
        ```python
        service = ChunkingService(chunker_type="hybrid")
        chunks = service.chunk(document, metadata={"source": "manual.pdf"})
        ```
    """

    def __init__(
        self,
        settings: Optional[ChunkingSettings] = None,
        *,
        chunker_type: Optional[str] = None,
        embedder: Optional[BaseEmbedder] = None,
        chunker_registry: Optional[ChunkerRegistry] = None,
        embedder_registry: Optional[EmbedderRegistry] = None,
        **chunker_kwargs: Any,
    ) -> None:
        self.settings = settings or chunking_settings
        self.chunker_type = chunker_type or self.settings.chunker_type
        self.chunker_registry = chunker_registry or create_default_registry()
        self.embedder_registry = embedder_registry or create_default_embedder_registry()

        if embedder is None and self.chunker_type in EMBEDDING_CHUNKERS:
            embedder = self.embedder_registry.get(
                self.settings.embedding_method,
                **embedder_options(self.settings),
            )
        self.embedder = embedder

        self.chunker: BaseChunker = self.chunker_registry.create(
            self.chunker_type,
            params=self.settings.to_chunk_params(),
            embedder=self.embedder,
            **chunker_kwargs,
        )
        logger.info(
            "Chunking service ready: chunker=%s embedder=%s",
            self.chunker_type,
            type(self.embedder).__name__ if self.embedder is not None else None,
        )

    def chunk(self, text: str, metadata: Optional[dict[str, Any]] = None) -> list[Chunk]:
        """Chunk a single document."""
        return self.chunker.chunk(text, metadata=metadata)

    def chunk_batch(
        self,
        texts: Sequence[str],
        metadata_list: Optional[Sequence[dict[str, Any]]] = None,
    ) -> list[list[Chunk]]:
        """Chunk documents concurrently, at most ``max_concurrent_embeddings`` at a time.

        Results are in input order. The first failure propagates.
        """
        if metadata_list is None:
            metadata_list = [{}] * len(texts)
        if len(metadata_list) != len(texts):
            raise ValueError("metadata_list must have one entry per text")

        pairs = list(zip(texts, metadata_list))
        return concurrent_map(
            pairs,
            self.settings.max_concurrent_embeddings,
            lambda pair: self.chunk(pair[0], metadata=pair[1]),
        )


__all__ = ["ChunkingService", "EMBEDDING_CHUNKERS", "embedder_options"]
