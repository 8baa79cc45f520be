"""Exception types raised by chunkforge."""


class ChunkForgeError(Exception):
    """Base exception for chunkforge errors."""

    pass


class ConfigurationError(ChunkForgeError, ValueError):
    """Raised when a chunker, strategy or embedder is misconfigured."""

    pass


class EmbeddingError(ChunkForgeError):
    """Raised when an embedding backend fails (transport, auth, bad payload)."""

    pass


__all__ = ["ChunkForgeError", "ConfigurationError", "EmbeddingError"]
