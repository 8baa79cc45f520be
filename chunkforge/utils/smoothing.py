"""Signal smoothing helpers."""

from __future__ import annotations

import math
from typing import Sequence


def moving_average(values: Sequence[float], window: int) -> list[float]:
    """Centered moving average.

    Each output ``i`` averages ``values[i - window // 2 : i + ceil(window / 2)]``
    clipped to the sequence bounds. A window of 1 or less returns a copy.
    """
    if window <= 1:
        return list(values)
    half_left = window // 2
    half_right = math.ceil(window / 2)
    result: list[float] = []
    for i in range(len(values)):
        start = max(0, i - half_left)
        end = min(len(values), i + half_right)
        window_values = values[start:end]
        result.append(sum(window_values) / len(window_values))
    return result


def normalize(values: Sequence[float]) -> list[float]:
    """Min-max scale to [0, 1]; a constant sequence maps to all zeros."""
    if len(values) == 0:
        return []
    low = min(values)
    high = max(values)
    if high == low:
        return [0.0 for _ in values]
    return [(value - low) / (high - low) for value in values]


__all__ = ["moving_average", "normalize"]
