"""Registry mapping thresholding strategy names to detector functions."""

from __future__ import annotations

from ...errors import ConfigurationError
from .base import BoundaryDetector, BoundaryUnit, DetectorFn, ThresholdingStrategy
from .embedding_contrast import detect_embedding_contrast
from .lexical_cohesion import detect_lexical_cohesion
from .probabilistic import detect_probabilistic
from .statistical import detect_gradient, detect_local_minima, detect_percentile, detect_zscore

# Older strategy names accepted for compatibility with existing configs.
STRATEGY_ALIASES: dict[str, str] = {
    "zscore": ThresholdingStrategy.ZSCORE.value,
    "percentile": ThresholdingStrategy.PERCENTILE.value,
    "localMinima": ThresholdingStrategy.LOCAL_MINIMA.value,
    "local_minima": ThresholdingStrategy.LOCAL_MINIMA.value,
    "texttiling": ThresholdingStrategy.LEXICAL_COHESION.value,
    "c99": ThresholdingStrategy.EMBEDDING_CONTRAST.value,
    "bayesian": ThresholdingStrategy.PROBABILISTIC.value,
}


class BoundaryDetectorRegistry:
    """Tag -> detector table owned by whoever builds the chunkers.

    Example:
        ```python
        detectors = create_default_detector_registry()
        detectors.register("always-split", lambda ctx, cfg: list(range(len(ctx.sentences) - 1)))
        chunker = SemanticChunker(thresholding="always-split", detectors=detectors)
        ```
    """

    def __init__(self) -> None:
        self._detectors: dict[str, BoundaryDetector] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        name: str,
        detect: DetectorFn,
        unit: BoundaryUnit = BoundaryUnit.SENTENCE_INDEX,
    ) -> None:
        """Register a detector function under ``name``.

        Raises:
            ValueError: If the name is already registered.
        """
        if name in self._detectors or name in self._aliases:
            raise ValueError(f"Boundary detector '{name}' already registered")
        self._detectors[name] = BoundaryDetector(name=name, detect=detect, unit=unit)

    def add_alias(self, alias: str, name: str) -> None:
        if name not in self._detectors:
            raise ValueError(f"Cannot alias unknown detector '{name}'")
        self._aliases[alias] = name

    def resolve(self, name: str | ThresholdingStrategy) -> BoundaryDetector:
        """Look up a detector by canonical name or alias.

        Raises:
            ConfigurationError: If the strategy is unknown.
        """
        key = name.value if isinstance(name, ThresholdingStrategy) else str(name)
        key = self._aliases.get(key, key)
        if key not in self._detectors:
            available = ", ".join(self._detectors.keys()) or "(none)"
            raise ConfigurationError(
                f"Unknown thresholding strategy: '{name}'. Available: {available}"
            )
        return self._detectors[key]

    def list_strategies(self) -> list[str]:
        return list(self._detectors.keys())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and (name in self._detectors or name in self._aliases)


def create_default_detector_registry() -> BoundaryDetectorRegistry:
    """Build a registry with the seven built-in strategies and legacy aliases."""
    registry = BoundaryDetectorRegistry()
    registry.register(ThresholdingStrategy.ZSCORE.value, detect_zscore)
    registry.register(ThresholdingStrategy.PERCENTILE.value, detect_percentile)
    registry.register(ThresholdingStrategy.LOCAL_MINIMA.value, detect_local_minima)
    registry.register(ThresholdingStrategy.GRADIENT.value, detect_gradient)
    registry.register(
        ThresholdingStrategy.LEXICAL_COHESION.value,
        detect_lexical_cohesion,
        unit=BoundaryUnit.CHAR_OFFSET,
    )
    registry.register(
        ThresholdingStrategy.EMBEDDING_CONTRAST.value,
        detect_embedding_contrast,
        unit=BoundaryUnit.CHAR_OFFSET,
    )
    registry.register(ThresholdingStrategy.PROBABILISTIC.value, detect_probabilistic)
    for alias, name in STRATEGY_ALIASES.items():
        registry.add_alias(alias, name)
    return registry


__all__ = ["BoundaryDetectorRegistry", "STRATEGY_ALIASES", "create_default_detector_registry"]
