"""Chunking settings using Pydantic Settings.

Configuration is loaded from:
1. Environment variables (highest priority)
2. .env file
3. Default values (lowest priority)
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..chunking.base import ChunkParams


class ChunkingSettings(BaseSettings):
    """Chunking pipeline settings.

    All settings can be overridden via environment variables with prefix CHUNKFORGE_
    Example: CHUNKFORGE_THRESHOLDING=lexical-cohesion
    """
    model_config = SettingsConfigDict(
        env_prefix="CHUNKFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunker
    chunker_type: str = Field(
        default="semantic",
        description="Chunker name (fixed, recursive, semantic, hybrid, topic, sliding)"
    )
    chunk_size: int | None = Field(
        default=None,
        description="Target tokens per chunk (unset: chunker default)"
    )
    chunk_overlap: int | None = Field(
        default=None,
        description="Tokens shared by consecutive windows (fixed/sliding)"
    )
    min_chunk_size: int | None = Field(
        default=None,
        description="Hybrid balancing lower bound in tokens"
    )
    max_chunk_size: int | None = Field(
        default=None,
        description="Hybrid balancing upper bound in tokens"
    )

    # Boundary detection
    thresholding: str = Field(
        default="statistical-zscore",
        description="Boundary detection strategy for semantic chunking"
    )
    smoothing_window: int = Field(
        default=3,
        description="Moving-average window over sentence similarities"
    )
    percentile: float = Field(
        default=10.0,
        description="Percentile for the statistical-percentile strategy"
    )
    gradient_threshold: float = Field(
        default=0.15,
        description="Minimum similarity drop for the gradient strategy"
    )
    z_score_k: float = Field(
        default=1.0,
        description="Standard deviations below the mean for the z-score strategy"
    )
    topic_count: int | None = Field(
        default=None,
        description="Number of topic clusters (unset: round(sqrt(n)), at least 2)"
    )
    max_concurrent_embeddings: int = Field(
        default=4,
        description="Worker limit when chunking documents in batch"
    )

    # Embedding
    embedding_method: str = Field(
        default="lexical",
        description="Embedder name (lexical, tei, openai, huggingface, sentence_transformer, local)"
    )
    embedding_endpoint: str | None = Field(
        default=None,
        description="Embedding service URL (TEI base URL or full embeddings URL)"
    )
    embedding_model: str | None = Field(
        default=None,
        description="Embedding model name"
    )
    embedding_api_key: str | None = Field(
        default=None,
        description="API key for hosted embedding services"
    )
    embedding_timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )
    embedding_batch_size: int = Field(
        default=32,
        description="Texts per embedding request"
    )

    log_level: str = Field(
        default="info",
        description="Logging level"
    )

    def to_chunk_params(self) -> ChunkParams:
        """Convert to the frozen ChunkParams used by chunkers."""
        return ChunkParams(
            chunk_size=self.chunk_size,
            chunk_overlap=self.chunk_overlap,
            min_chunk_size=self.min_chunk_size,
            max_chunk_size=self.max_chunk_size,
            thresholding=self.thresholding,
            smoothing_window=self.smoothing_window,
            percentile=self.percentile,
            gradient_threshold=self.gradient_threshold,
            z_score_k=self.z_score_k,
            topic_count=self.topic_count,
            max_concurrent_embeddings=self.max_concurrent_embeddings,
        )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts and entrypoints."""
    level_name = (level or chunking_settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# Global settings instance
chunking_settings = ChunkingSettings()


__all__ = [
    "ChunkingSettings",
    "chunking_settings",
    "configure_logging",
]
