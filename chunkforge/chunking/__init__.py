"""Chunking strategies, boundary detection and the chunker registry."""

from .base import BaseChunker, Chunk, ChunkParams
from .boundaries import BoundaryConfig, BoundaryDetectorRegistry, ThresholdingStrategy
from .engines import (
    FixedChunker,
    HybridChunker,
    RecursiveChunker,
    SemanticChunker,
    SlidingWindowChunker,
    TopicChunker,
)
from .registry import ChunkerRegistry, chunker_factory, create_default_registry, get_chunker
from .size_enforcement import enforce_chunk_size

__all__ = [
    "BaseChunker",
    "BoundaryConfig",
    "BoundaryDetectorRegistry",
    "Chunk",
    "ChunkParams",
    "ChunkerRegistry",
    "FixedChunker",
    "HybridChunker",
    "RecursiveChunker",
    "SemanticChunker",
    "SlidingWindowChunker",
    "ThresholdingStrategy",
    "TopicChunker",
    "chunker_factory",
    "create_default_registry",
    "enforce_chunk_size",
    "get_chunker",
]
