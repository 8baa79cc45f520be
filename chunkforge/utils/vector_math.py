"""Vector operations over embeddings."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

ArrayLike = Union[Sequence[float], npt.NDArray[np.floating]]


def _as_vector(values: ArrayLike) -> npt.NDArray[np.float64]:
    return np.asarray(values, dtype=np.float64).ravel()


def dot(a: ArrayLike, b: ArrayLike) -> float:
    return float(np.dot(_as_vector(a), _as_vector(b)))


def magnitude(vec: ArrayLike) -> float:
    return float(np.linalg.norm(_as_vector(vec)))


def cosine_similarity(a: ArrayLike, b: ArrayLike) -> float:
    """Cosine similarity; defined as 0.0 when either vector has zero magnitude."""
    vec_a = _as_vector(a)
    vec_b = _as_vector(b)
    denom = np.linalg.norm(vec_a) * np.linalg.norm(vec_b)
    if denom == 0:
        return 0.0
    return float(np.dot(vec_a, vec_b) / denom)


def pairwise_cosine(vectors: Sequence[ArrayLike] | npt.NDArray[np.floating]) -> list[float]:
    """Cosine similarity of each vector with its successor (length n-1)."""
    return [
        cosine_similarity(vectors[i], vectors[i + 1])
        for i in range(len(vectors) - 1)
    ]


def similarity_matrix(vectors: Sequence[ArrayLike] | npt.NDArray[np.floating]) -> npt.NDArray[np.float64]:
    """Full pairwise cosine-similarity matrix (n x n).

    Rows for zero-magnitude vectors are all zeros.
    """
    matrix = np.asarray(vectors, dtype=np.float64)
    if matrix.size == 0:
        return np.zeros((0, 0), dtype=np.float64)
    norms = np.linalg.norm(matrix, axis=1)
    safe = np.where(norms == 0, 1.0, norms)
    unit = matrix / safe[:, None]
    sims = unit @ unit.T
    zero = norms == 0
    sims[zero, :] = 0.0
    sims[:, zero] = 0.0
    return sims


def euclidean_distance(a: ArrayLike, b: ArrayLike) -> float:
    return float(np.linalg.norm(_as_vector(a) - _as_vector(b)))


__all__ = [
    "dot",
    "magnitude",
    "cosine_similarity",
    "pairwise_cosine",
    "similarity_matrix",
    "euclidean_distance",
]
