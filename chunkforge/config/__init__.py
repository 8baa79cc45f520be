"""Configuration module."""

from .settings import ChunkingSettings, chunking_settings, configure_logging

__all__ = ["ChunkingSettings", "chunking_settings", "configure_logging"]
