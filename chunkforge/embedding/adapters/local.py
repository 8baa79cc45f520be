"""Embedder backed by a user-supplied function."""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np
import numpy.typing as npt

from ...errors import ConfigurationError
from ..base import BaseEmbedder, as_matrix

EmbedFunction = Callable[[list[str]], Any]


class LocalFunctionEmbedder(BaseEmbedder):
    """Wraps a callable ``texts -> vectors`` (e.g. an in-process model).

    The callable receives the whole list of texts and must return one vector
    per text, in order. Exceptions raised by the callable propagate unchanged.
    """

    def __init__(self, embed_fn: EmbedFunction | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if embed_fn is None or not callable(embed_fn):
            raise ConfigurationError("embed_fn callable is required for local embedder")
        self.embed_fn = embed_fn

    def embed_batch(
        self,
        texts: Sequence[str],
        batch_size: int = 32,
    ) -> npt.NDArray[np.float32]:
        texts_list = list(texts)
        matrix = as_matrix(self.embed_fn(texts_list), len(texts_list))
        if self.dimension is None and matrix.size:
            self.dimension = int(matrix.shape[-1])
        return matrix


__all__ = ["LocalFunctionEmbedder", "EmbedFunction"]
