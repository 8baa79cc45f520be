"""chunkforge: text chunking strategies for embedding/retrieval pipelines.

Usage:
    from chunkforge import get_chunker

    chunker = get_chunker("semantic", chunk_size=300, thresholding="gradient")
    for chunk in chunker.chunk(text):
        print(chunk.start, chunk.end, chunk.text[:40])
"""

from .chunking import (
    BaseChunker,
    Chunk,
    ChunkerRegistry,
    ChunkParams,
    create_default_registry,
    get_chunker,
)
from .embedding import BaseEmbedder, get_embedder
from .errors import ChunkForgeError, ConfigurationError, EmbeddingError

__version__ = "0.1.0"

__all__ = [
    "BaseChunker",
    "BaseEmbedder",
    "Chunk",
    "ChunkForgeError",
    "ChunkParams",
    "ChunkerRegistry",
    "ConfigurationError",
    "EmbeddingError",
    "create_default_registry",
    "get_chunker",
    "get_embedder",
]
