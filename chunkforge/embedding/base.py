"""Base classes for embedding."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np
import numpy.typing as npt

from ..errors import EmbeddingError


class BaseEmbedder(ABC):
    """Base class for all embedding backends.

    An embedder turns an ordered list of texts into an ``(n, dimension)``
    matrix whose rows are index-aligned with the input. Each backend should:
    1. Inherit from this class
    2. Implement ``embed_batch()``
    3. Be registered in an ``EmbedderRegistry`` under a name

    Example:
        ```python
        class MyEmbedder(BaseEmbedder):
            def embed_batch(self, texts, batch_size=32):
                return np.ones((len(texts), 8), dtype=np.float32)

        registry.register("mine", MyEmbedder)
        ```
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize embedder with optional config."""
        self.config = kwargs
        self.dimension: int | None = None

    @abstractmethod
    def embed_batch(
        self,
        texts: Sequence[str],
        batch_size: int = 32,
    ) -> npt.NDArray[np.float32]:
        """Embed multiple texts.

        Args:
            texts: Input texts
            batch_size: Maximum texts per backend request

        Returns:
            Embedding matrix (2D numpy array: [n_texts, dimension])

        Raises:
            EmbeddingError: If the backend fails.
        """
        raise NotImplementedError

    def embed(self, text: str) -> npt.NDArray[np.float32]:
        """Embed a single text.

        Args:
            text: Input text

        Returns:
            Embedding vector (1D numpy array)
        """
        return self.embed_batch([text])[0]

    def get_dimension(self) -> int:
        """Get embedding dimension.

        Returns:
            Embedding vector dimension
        """
        if self.dimension is None:
            # Infer dimension by embedding a placeholder string
            sample_embedding = self.embed(" ")
            self.dimension = int(sample_embedding.shape[-1])
        return self.dimension

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config})"


def as_matrix(vectors: Any, expected_rows: int) -> npt.NDArray[np.float32]:
    """Coerce backend output to a float32 matrix and check its row count."""
    matrix = np.asarray(vectors, dtype=np.float32)
    if expected_rows == 0:
        return matrix.reshape(0, matrix.shape[-1] if matrix.ndim == 2 else 0)
    if matrix.ndim == 1:
        matrix = matrix.reshape(1, -1)
    if matrix.ndim != 2 or matrix.shape[0] != expected_rows:
        raise EmbeddingError(
            f"Embedding backend returned shape {matrix.shape}, "
            f"expected {expected_rows} rows"
        )
    return matrix
