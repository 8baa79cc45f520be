"""Chunker registry: strategy names to chunker factories."""

from __future__ import annotations

import logging
from typing import Any, Callable, Type

from ..embedding.base import BaseEmbedder
from ..errors import ConfigurationError
from .base import BaseChunker, ChunkParams

logger = logging.getLogger(__name__)

ChunkerFactory = Callable[..., BaseChunker]


class ChunkerRegistry:
    """Registry for chunker implementations.

    Allows runtime selection of chunking method based on configuration.
    Factories are called as ``factory(params=..., embedder=..., **kwargs)``.

    Example:
        ```python
        registry = create_default_registry()
        registry.register("mine", chunker_factory(MyChunker))

        chunker = registry.create("semantic", params=ChunkParams(chunk_size=300))
        chunks = chunker.chunk(text)
        ```
    """

    def __init__(self) -> None:
        self._registry: dict[str, dict[str, ChunkerFactory]] = {}

    def register(
        self,
        name: str,
        factory: ChunkerFactory,
        version: str = "v1",
    ) -> None:
        """Register a chunker factory.

        Raises:
            ValueError: If the name/version pair is already registered.
        """
        versions = self._registry.setdefault(name, {})
        if version in versions:
            raise ValueError(
                f"Chunker '{name}' version '{version}' already registered"
            )
        versions[version] = factory

    def create(
        self,
        name: str,
        version: str = "v1",
        params: ChunkParams | None = None,
        embedder: BaseEmbedder | None = None,
        **kwargs: Any,
    ) -> BaseChunker:
        """Create a chunker instance by name and version.

        Args:
            name: Chunker name (e.g., "semantic", "fixed").
            version: Chunker version (default: "v1").
            params: Optional ChunkParams instance.
            embedder: Embedder for strategies that embed sentences.
            **kwargs: Additional parameters passed to the chunker.

        Returns:
            Initialized BaseChunker instance.

        Raises:
            ConfigurationError: If chunker name or version is not registered.
        """
        if name not in self._registry:
            available = ", ".join(self._registry.keys()) or "(none)"
            raise ConfigurationError(
                f"Unknown chunker: '{name}'. Available: {available}"
            )

        if version not in self._registry[name]:
            available_versions = ", ".join(self._registry[name].keys())
            raise ConfigurationError(
                f"Unknown version '{version}' for chunker '{name}'. "
                f"Available versions: {available_versions}"
            )

        return self._registry[name][version](params=params, embedder=embedder, **kwargs)

    def list_chunkers(self) -> dict[str, list[str]]:
        """List all registered chunkers and their versions."""
        return {
            name: list(versions.keys())
            for name, versions in self._registry.items()
        }

    def is_registered(self, name: str, version: str = "v1") -> bool:
        return name in self._registry and version in self._registry[name]


def chunker_factory(chunker_cls: Type[BaseChunker], uses_embedder: bool = False) -> ChunkerFactory:
    """Wrap a chunker class as a registry factory.

    Classes that do not embed anything are constructed without the embedder.
    """

    def factory(
        params: ChunkParams | None = None,
        embedder: BaseEmbedder | None = None,
        **kwargs: Any,
    ) -> BaseChunker:
        if uses_embedder:
            return chunker_cls(params=params, embedder=embedder, **kwargs)
        return chunker_cls(params=params, **kwargs)

    return factory


def create_default_registry() -> ChunkerRegistry:
    """Build a registry holding the six built-in strategies."""
    from .engines import (
        FixedChunker,
        HybridChunker,
        RecursiveChunker,
        SemanticChunker,
        SlidingWindowChunker,
        TopicChunker,
    )

    registry = ChunkerRegistry()
    registry.register("fixed", chunker_factory(FixedChunker))
    registry.register("recursive", chunker_factory(RecursiveChunker))
    registry.register("semantic", chunker_factory(SemanticChunker, uses_embedder=True))
    registry.register("hybrid", chunker_factory(HybridChunker, uses_embedder=True))
    registry.register("topic", chunker_factory(TopicChunker, uses_embedder=True))
    registry.register("sliding", chunker_factory(SlidingWindowChunker))
    return registry


def get_chunker(
    name: str,
    version: str = "v1",
    params: ChunkParams | None = None,
    registry: ChunkerRegistry | None = None,
    **kwargs: Any,
) -> BaseChunker:
    """Convenience function to get a chunker instance.

    Args:
        name: Chunker name.
        version: Chunker version (default: "v1").
        params: Optional ChunkParams instance.
        registry: Registry to resolve from (default: a fresh built-in registry).
        **kwargs: Additional parameters (``embedder``, ChunkParams overrides, ...).

    Returns:
        Initialized BaseChunker instance.
    """
    if registry is None:
        registry = create_default_registry()
    return registry.create(name, version=version, params=params, **kwargs)


__all__ = [
    "ChunkerFactory",
    "ChunkerRegistry",
    "chunker_factory",
    "create_default_registry",
    "get_chunker",
]
