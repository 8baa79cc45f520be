"""Threshold and shape detectors over the adjacent-similarity signal."""

from __future__ import annotations

from typing import Sequence

from ...utils.stats import percentile as percentile_value
from ...utils.stats import z_score_threshold
from .base import BoundaryConfig, BoundaryContext


def zscore_boundaries(similarities: Sequence[float], k: float = 1.0) -> list[int]:
    """Indices where similarity falls strictly below ``mean - k * stdev``."""
    threshold = z_score_threshold(similarities, k)
    return [index for index, value in enumerate(similarities) if value < threshold]


def percentile_boundaries(similarities: Sequence[float], percentile: float = 10.0) -> list[int]:
    """Indices whose similarity is at or below the given percentile."""
    threshold = percentile_value(similarities, percentile)
    return [index for index, value in enumerate(similarities) if value <= threshold]


def local_minima_boundaries(similarities: Sequence[float]) -> list[int]:
    """Interior indices strictly lower than both neighbours."""
    return [
        i
        for i in range(1, len(similarities) - 1)
        if similarities[i] < similarities[i - 1] and similarities[i] < similarities[i + 1]
    ]


def gradient_boundaries(similarities: Sequence[float], gradient_threshold: float = 0.15) -> list[int]:
    """Indices followed by a drop steeper than ``gradient_threshold``."""
    return [
        i
        for i in range(len(similarities) - 1)
        if similarities[i + 1] - similarities[i] < -gradient_threshold
    ]


def detect_zscore(context: BoundaryContext, config: BoundaryConfig) -> list[int]:
    return zscore_boundaries(context.similarities, config.z_score_k)


def detect_percentile(context: BoundaryContext, config: BoundaryConfig) -> list[int]:
    return percentile_boundaries(context.similarities, config.percentile)


def detect_local_minima(context: BoundaryContext, config: BoundaryConfig) -> list[int]:
    return local_minima_boundaries(context.similarities)


def detect_gradient(context: BoundaryContext, config: BoundaryConfig) -> list[int]:
    return gradient_boundaries(context.similarities, config.gradient_threshold)


__all__ = [
    "zscore_boundaries",
    "percentile_boundaries",
    "local_minima_boundaries",
    "gradient_boundaries",
    "detect_zscore",
    "detect_percentile",
    "detect_local_minima",
    "detect_gradient",
]
