"""Hugging Face Inference API feature-extraction embedder."""

from __future__ import annotations

import os
from typing import Any, Sequence

import numpy as np
import numpy.typing as npt

from ..base import BaseEmbedder
from ._http import build_client, close_quietly, post_json

DEFAULT_MODEL = "sentence-transformers/all-MiniLM-L6-v2"
PIPELINE_URL = "https://api-inference.huggingface.co/pipeline/feature-extraction/{model}"


class HuggingFaceEmbedder(BaseEmbedder):
    """Client for the Hugging Face feature-extraction pipeline.

    The endpoint embeds one text per request. A nested response
    (token-level or batched) is reduced to its first row.

    Config options:
        api_key: str - Optional bearer token (falls back to HUGGINGFACE_API_KEY)
        model: str = "sentence-transformers/all-MiniLM-L6-v2"
        endpoint: str - Override the pipeline URL
        timeout: float = 30
        client / transport - Optional httpx client or transport override
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.api_key = self.config.get("api_key") or os.getenv("HUGGINGFACE_API_KEY")
        self.model = self.config.get("model") or DEFAULT_MODEL
        self.endpoint = self.config.get("endpoint") or PIPELINE_URL.format(model=self.model)
        self.timeout = self.config.get("timeout", 30)
        self._owns_client = self.config.get("client") is None
        self.client = build_client(self.config, self.timeout)

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    def _embed_one(self, text: str) -> npt.NDArray[np.float32]:
        data = post_json(
            self.client,
            self.endpoint,
            {"inputs": text},
            service="Hugging Face",
            headers=self._headers(),
        )
        if isinstance(data, list) and data and isinstance(data[0], list):
            data = data[0]
        return np.asarray(data, dtype=np.float32)

    def embed_batch(
        self,
        texts: Sequence[str],
        batch_size: int = 32,
    ) -> npt.NDArray[np.float32]:
        rows = [self._embed_one(text) for text in texts]
        if not rows:
            return np.zeros((0, self.dimension or 0), dtype=np.float32)
        stacked = np.vstack(rows)
        if self.dimension is None:
            self.dimension = int(stacked.shape[-1])
        return stacked

    def __del__(self):
        if getattr(self, "_owns_client", False):
            close_quietly(getattr(self, "client", None))


__all__ = ["HuggingFaceEmbedder"]
