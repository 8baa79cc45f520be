"""Shared numeric helpers: vector math, signal statistics, smoothing, batching."""

from .batching import batch_process, concurrent_map
from .smoothing import moving_average, normalize
from .stats import mean, percentile, stdev, z_score_threshold
from .vector_math import (
    cosine_similarity,
    dot,
    euclidean_distance,
    magnitude,
    pairwise_cosine,
    similarity_matrix,
)

__all__ = [
    "batch_process",
    "concurrent_map",
    "cosine_similarity",
    "dot",
    "euclidean_distance",
    "magnitude",
    "mean",
    "moving_average",
    "normalize",
    "pairwise_cosine",
    "percentile",
    "similarity_matrix",
    "stdev",
    "z_score_threshold",
]
