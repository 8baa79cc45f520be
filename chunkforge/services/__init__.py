"""Service layer."""

from .chunking_service import ChunkingService

__all__ = ["ChunkingService"]
