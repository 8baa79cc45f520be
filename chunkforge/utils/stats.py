"""Summary statistics over similarity signals."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def stdev(values: Sequence[float]) -> float:
    """Sample standard deviation (n-1 denominator); 0.0 for fewer than 2 values."""
    if len(values) < 2:
        return 0.0
    return float(np.std(values, ddof=1))


def percentile(values: Sequence[float], percentile_value: float) -> float:
    """Nearest-rank percentile without interpolation.

    Returns the element at ``floor(p / 100 * n)`` of the sorted values,
    clamped to ``[0, n - 1]``. Empty input yields 0.0.
    """
    if len(values) == 0:
        return 0.0
    ordered = sorted(values)
    index = min(len(ordered) - 1, max(0, math.floor(percentile_value / 100 * len(ordered))))
    return float(ordered[index])


def z_score_threshold(values: Sequence[float], k: float) -> float:
    """``mean - k * stdev``; collapses to the mean for zero variance."""
    return mean(values) - k * stdev(values)


__all__ = ["mean", "stdev", "percentile", "z_score_threshold"]
