"""OpenAI-compatible ``/v1/embeddings`` client embedder."""

from __future__ import annotations

import os
from typing import Any, Sequence

import numpy as np
import numpy.typing as npt

from ...errors import ConfigurationError, EmbeddingError
from ...utils.batching import batch_process
from ..base import BaseEmbedder, as_matrix
from ._http import build_client, close_quietly, post_json

DEFAULT_ENDPOINT = "https://api.openai.com/v1/embeddings"
DEFAULT_MODEL = "text-embedding-3-small"


class OpenAIEmbedder(BaseEmbedder):
    """Client for the OpenAI embeddings API (or any compatible server).

    Config options:
        api_key: str - Bearer token (falls back to OPENAI_API_KEY)
        model: str = "text-embedding-3-small"
        endpoint: str - Full embeddings URL
        timeout: float = 30
        batch_size: int = 32 - Texts per request
        client / transport - Optional httpx client or transport override
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.api_key = self.config.get("api_key") or os.getenv("OPENAI_API_KEY", "")
        if not self.api_key:
            raise ConfigurationError("OpenAI API key is required for OpenAIEmbedder")

        self.model = self.config.get("model") or DEFAULT_MODEL
        self.endpoint = self.config.get("endpoint") or DEFAULT_ENDPOINT
        self.timeout = self.config.get("timeout", 30)
        self.batch_size = self.config.get("batch_size", 32)
        self._owns_client = self.config.get("client") is None
        self.client = build_client(self.config, self.timeout)

    def _embed_request(self, batch: list[str]) -> list[list[float]]:
        payload = post_json(
            self.client,
            self.endpoint,
            {"input": batch, "model": self.model},
            service="OpenAI",
            headers={"Authorization": f"Bearer {self.api_key}"},
        )
        try:
            data = payload["data"]
            vectors = [entry["embedding"] for entry in data]
        except (KeyError, TypeError) as exc:
            raise EmbeddingError(f"OpenAI response missing embeddings: {payload!r}") from exc
        return list(as_matrix(vectors, len(batch)))

    def embed_batch(
        self,
        texts: Sequence[str],
        batch_size: int | None = None,
    ) -> npt.NDArray[np.float32]:
        rows = batch_process(list(texts), batch_size or self.batch_size, self._embed_request)
        if not rows:
            return np.zeros((0, self.dimension or 0), dtype=np.float32)
        stacked = np.vstack(rows).astype(np.float32)
        if self.dimension is None:
            self.dimension = int(stacked.shape[-1])
        return stacked

    def __del__(self):
        if getattr(self, "_owns_client", False):
            close_quietly(getattr(self, "client", None))


__all__ = ["OpenAIEmbedder"]
