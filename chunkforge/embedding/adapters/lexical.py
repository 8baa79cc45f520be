"""Deterministic token-hash embedder used when no embedder is configured."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
import numpy.typing as npt

from ...text.tokenizer import lowercase_tokens
from ..base import BaseEmbedder

DEFAULT_DIMENSION = 256


def string_hash(value: str) -> int:
    """32-bit polynomial string hash (``h = h * 31 + ord(c)``), absolute value."""
    h = 0
    for char in value:
        h = (h * 31 + ord(char)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


class LexicalHashEmbedder(BaseEmbedder):
    """Bag-of-words vectors with tokens hashed into a fixed number of buckets.

    Needs no model or network, so semantic and topic chunking always have a
    usable similarity signal. Sentences sharing vocabulary get a positive
    cosine similarity; sentences with disjoint vocabulary score zero.

    Config options:
        dimension: int = 256 - Number of hash buckets
    """

    def __init__(self, dimension: int = DEFAULT_DIMENSION, **kwargs: Any) -> None:
        super().__init__(dimension=dimension, **kwargs)
        if dimension <= 0:
            raise ValueError(f"dimension must be positive, got {dimension}")
        self.dimension = dimension

    def embed_batch(
        self,
        texts: Sequence[str],
        batch_size: int = 32,
    ) -> npt.NDArray[np.float32]:
        vectors = np.zeros((len(texts), self.dimension), dtype=np.float32)
        for row, text in enumerate(texts):
            for token in lowercase_tokens(text):
                vectors[row, string_hash(token) % self.dimension] += 1.0
        return vectors


__all__ = ["LexicalHashEmbedder", "string_hash"]
