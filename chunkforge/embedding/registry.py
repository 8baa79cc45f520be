"""Registry for embedding backends."""

from typing import Any, Type

from ..errors import ConfigurationError
from .base import BaseEmbedder


class EmbedderRegistry:
    """Registry mapping embedder names to backend classes.

    The registry is an ordinary object: build one at start-up with
    ``create_default_embedder_registry()`` and pass it where embedders are
    selected by configuration.

    Example:
        ```python
        registry = create_default_embedder_registry()
        registry.register("my_embedder", MyEmbedder)

        embedder = registry.get("tei", endpoint_url="http://tei:80")
        vectors = embedder.embed_batch(["hello", "world"])
        ```
    """

    def __init__(self) -> None:
        self._registry: dict[str, dict[str, Type[BaseEmbedder]]] = {}

    def register(
        self,
        name: str,
        embedder_cls: Type[BaseEmbedder],
        version: str = "v1",
    ) -> None:
        """Register an embedder class.

        Args:
            name: Method name (e.g., "tei", "lexical")
            embedder_cls: Embedder class to register
            version: Version string (default: "v1")

        Raises:
            ValueError: If the name/version pair is already registered
        """
        versions = self._registry.setdefault(name, {})
        if version in versions:
            raise ValueError(
                f"Embedder '{name}' version '{version}' already registered"
            )
        versions[version] = embedder_cls

    def get(
        self,
        name: str,
        version: str = "v1",
        **kwargs: Any,
    ) -> BaseEmbedder:
        """Get an embedder instance.

        Args:
            name: Method name
            version: Version string (default: "v1")
            **kwargs: Additional config passed to embedder __init__

        Returns:
            Embedder instance

        Raises:
            ConfigurationError: If method or version not found
        """
        if name not in self._registry:
            available = ", ".join(self._registry.keys()) or "(none)"
            raise ConfigurationError(
                f"Unknown embedding method: '{name}'. "
                f"Available: {available}"
            )

        if version not in self._registry[name]:
            available_versions = ", ".join(self._registry[name].keys())
            raise ConfigurationError(
                f"Unknown version '{version}' for method '{name}'. "
                f"Available versions: {available_versions}"
            )

        return self._registry[name][version](**kwargs)

    def list_methods(self) -> dict[str, list[str]]:
        """List all registered methods and their versions."""
        return {
            name: list(versions.keys())
            for name, versions in self._registry.items()
        }

    def is_registered(self, name: str, version: str = "v1") -> bool:
        return name in self._registry and version in self._registry[name]


def create_default_embedder_registry() -> EmbedderRegistry:
    """Build a registry holding the built-in embedders."""
    from .adapters import (
        HuggingFaceEmbedder,
        LexicalHashEmbedder,
        LocalFunctionEmbedder,
        OpenAIEmbedder,
        SentenceTransformerEmbedder,
        TEIEmbedder,
    )

    registry = EmbedderRegistry()
    registry.register("lexical", LexicalHashEmbedder)
    registry.register("local", LocalFunctionEmbedder)
    registry.register("sentence_transformer", SentenceTransformerEmbedder)
    registry.register("tei", TEIEmbedder)
    registry.register("openai", OpenAIEmbedder)
    registry.register("huggingface", HuggingFaceEmbedder)
    return registry


def get_embedder(
    name: str,
    version: str = "v1",
    registry: EmbedderRegistry | None = None,
    **kwargs: Any,
) -> BaseEmbedder:
    """Get an embedder instance (convenience function).

    Args:
        name: Method name
        version: Version string
        registry: Registry to resolve from (default: a fresh built-in registry)
        **kwargs: Config passed to embedder

    Returns:
        Embedder instance
    """
    if registry is None:
        registry = create_default_embedder_registry()
    return registry.get(name, version=version, **kwargs)
