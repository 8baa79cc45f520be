"""Embedding-contrast (C99-style) boundary detection.

Compares the dissimilarity of a sentence to the ``window`` sentences before
it against the ``window`` sentences from it onwards. A large gap between the
two means the local semantic dispersion shifts at that sentence.
"""

from __future__ import annotations

import numpy as np

from ...errors import ConfigurationError
from ...utils.vector_math import similarity_matrix
from .base import BoundaryConfig, BoundaryContext


def contrast_scores(matrix: np.ndarray, window: int) -> dict[int, float]:
    """Contrast value for every index with ``window`` sentences on each side."""
    n = matrix.shape[0]
    scores: dict[int, float] = {}
    for i in range(window, n - window):
        left = float(np.sum(1.0 - matrix[i, i - window : i]))
        right = float(np.sum(1.0 - matrix[i, i : i + window]))
        scores[i] = abs(left - right) / window
    return scores


def detect_embedding_contrast(context: BoundaryContext, config: BoundaryConfig) -> list[int]:
    """Return the end offsets of sentences where the contrast exceeds the threshold."""
    if context.embeddings is None:
        raise ConfigurationError("embedding-contrast detection requires sentence embeddings")
    sentences = context.sentences
    if len(sentences) <= 1:
        return []
    window = max(1, config.contrast_window)
    matrix = similarity_matrix(context.embeddings)
    return [
        sentences[i].end
        for i, score in sorted(contrast_scores(matrix, window).items())
        if score > config.contrast_threshold
    ]


__all__ = ["contrast_scores", "detect_embedding_contrast"]
