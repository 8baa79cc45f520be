"""Shared fakes and fixtures for chunkforge tests."""

from __future__ import annotations

import numpy as np
import pytest

from chunkforge.embedding.base import BaseEmbedder
from chunkforge.errors import EmbeddingError


class KeywordEmbedder(BaseEmbedder):
    """One-hot vectors keyed by the first keyword found in each text.

    Texts without a keyword share an extra "other" axis. Every call is
    recorded so tests can assert on embedding traffic.
    """

    def __init__(self, keywords, **kwargs):
        super().__init__(**kwargs)
        self.keywords = list(keywords)
        self.dimension = len(self.keywords) + 1
        self.calls: list[list[str]] = []

    def embed_batch(self, texts, batch_size=32):
        self.calls.append(list(texts))
        vectors = np.zeros((len(texts), self.dimension), dtype=np.float32)
        for row, text in enumerate(texts):
            lowered = text.lower()
            for col, keyword in enumerate(self.keywords):
                if keyword in lowered:
                    vectors[row, col] = 1.0
                    break
            else:
                vectors[row, -1] = 1.0
        return vectors


class FailingEmbedder(BaseEmbedder):
    """Embedder whose backend always fails."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.calls = 0

    def embed_batch(self, texts, batch_size=32):
        self.calls += 1
        raise EmbeddingError("upstream 500: boom")


@pytest.fixture
def keyword_embedder():
    return KeywordEmbedder(["cat", "car"])


@pytest.fixture
def cat_car_text():
    return (
        "The cat sleeps. The cat purrs. The cat eats. "
        "The car drives. The car honks. The car parks."
    )


@pytest.fixture
def failing_embedder():
    return FailingEmbedder()
