"""Boundary detectors used by the semantic chunker."""

from .base import (
    BoundaryConfig,
    BoundaryContext,
    BoundaryDetector,
    BoundaryUnit,
    ThresholdingStrategy,
    offsets_to_sentence_indices,
)
from .embedding_contrast import detect_embedding_contrast
from .lexical_cohesion import detect_lexical_cohesion
from .probabilistic import probabilistic_boundaries
from .registry import BoundaryDetectorRegistry, create_default_detector_registry
from .statistical import (
    gradient_boundaries,
    local_minima_boundaries,
    percentile_boundaries,
    zscore_boundaries,
)

__all__ = [
    "BoundaryConfig",
    "BoundaryContext",
    "BoundaryDetector",
    "BoundaryDetectorRegistry",
    "BoundaryUnit",
    "ThresholdingStrategy",
    "create_default_detector_registry",
    "detect_embedding_contrast",
    "detect_lexical_cohesion",
    "gradient_boundaries",
    "local_minima_boundaries",
    "offsets_to_sentence_indices",
    "percentile_boundaries",
    "probabilistic_boundaries",
    "zscore_boundaries",
]
