"""Embedding backends consumed by the semantic and topic chunkers."""

from .adapters import (
    HuggingFaceEmbedder,
    LexicalHashEmbedder,
    LocalFunctionEmbedder,
    OpenAIEmbedder,
    SentenceTransformerEmbedder,
    TEIEmbedder,
)
from .base import BaseEmbedder
from .registry import EmbedderRegistry, create_default_embedder_registry, get_embedder

__all__ = [
    "BaseEmbedder",
    "EmbedderRegistry",
    "HuggingFaceEmbedder",
    "LexicalHashEmbedder",
    "LocalFunctionEmbedder",
    "OpenAIEmbedder",
    "SentenceTransformerEmbedder",
    "TEIEmbedder",
    "create_default_embedder_registry",
    "get_embedder",
]
