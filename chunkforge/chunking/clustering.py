"""Plain k-means over sentence embeddings, used by topic chunking."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import numpy.typing as npt

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 20


@dataclass
class KMeansResult:
    """Outcome of a k-means run.

    Attributes:
        labels: Cluster index per input vector.
        centroids: Final centroid matrix (k x dim).
        iterations: Assignment rounds performed.
        converged: True if an assignment round changed nothing.
    """

    labels: list[int]
    centroids: npt.NDArray[np.float64]
    iterations: int
    converged: bool


def _nearest(vector: npt.NDArray[np.float64], centroids: npt.NDArray[np.float64]) -> int:
    distances = np.linalg.norm(centroids - vector, axis=1)
    # argmin returns the lowest index on ties
    return int(np.argmin(distances))


def kmeans(
    vectors: npt.ArrayLike,
    k: int,
    max_iterations: int = MAX_ITERATIONS,
) -> KMeansResult:
    """Cluster vectors with Lloyd's algorithm, seeded by the first ``k`` vectors.

    Deterministic: no random initialisation. Clusters that lose all members
    keep their previous centroid.

    Args:
        vectors: Matrix of shape (n, dim).
        k: Number of clusters; clamped to [1, n].
        max_iterations: Upper bound on assignment rounds.

    Returns:
        KMeansResult with labels in ``range(k)``.
    """
    data = np.asarray(vectors, dtype=np.float64)
    n = data.shape[0] if data.ndim == 2 else 0
    if n == 0:
        return KMeansResult(labels=[], centroids=np.zeros((0, 0)), iterations=0, converged=True)

    k = max(1, min(k, n))
    centroids = data[:k].copy()
    labels = [0] * n
    converged = False
    iterations = 0

    for iterations in range(1, max_iterations + 1):
        changed = False
        for i in range(n):
            label = _nearest(data[i], centroids)
            if label != labels[i]:
                labels[i] = label
                changed = True

        if not changed:
            converged = True
            break

        label_array = np.asarray(labels)
        for cluster in range(k):
            members = data[label_array == cluster]
            if len(members) > 0:
                centroids[cluster] = members.mean(axis=0)

    logger.debug("kmeans: n=%d k=%d iterations=%d converged=%s", n, k, iterations, converged)
    return KMeansResult(labels=labels, centroids=centroids, iterations=iterations, converged=converged)


def contiguous_runs(labels: Sequence[int]) -> list[tuple[int, int, int]]:
    """Maximal runs of equal labels as ``(label, first_index, last_index)``."""
    runs: list[tuple[int, int, int]] = []
    for index, label in enumerate(labels):
        if runs and runs[-1][0] == label:
            runs[-1] = (label, runs[-1][1], index)
        else:
            runs.append((label, index, index))
    return runs


__all__ = ["KMeansResult", "MAX_ITERATIONS", "contiguous_runs", "kmeans"]
