"""Text Embeddings Inference (TEI) client embedder."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
import numpy.typing as npt

from ...errors import ConfigurationError
from ...utils.batching import batch_process
from ..base import BaseEmbedder, as_matrix
from ._http import build_client, close_quietly, post_json


class TEIEmbedder(BaseEmbedder):
    """TEI (Text Embeddings Inference) server client.

    Config options:
        endpoint_url: str - TEI server URL (e.g., "http://tei:80")
        timeout: float = 30 - Request timeout in seconds
        normalize: bool = True - L2 normalize embeddings server-side
        batch_size: int = 32 - Texts per request
        client / transport - Optional httpx client or transport override
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)

        self.endpoint_url = self.config.get("endpoint_url")
        if not self.endpoint_url:
            raise ConfigurationError("endpoint_url is required for TEI embedder")
        self.endpoint_url = str(self.endpoint_url).rstrip("/")

        self.timeout = self.config.get("timeout", 30)
        self.batch_size = self.config.get("batch_size", 32)
        self.normalize = self.config.get("normalize", True)
        self._owns_client = self.config.get("client") is None
        self.client = build_client(self.config, self.timeout)

    def _embed_request(self, batch: list[str]) -> list[list[float]]:
        payload = post_json(
            self.client,
            f"{self.endpoint_url}/embed",
            {"inputs": batch, "normalize": self.normalize},
            service="TEI",
        )
        return list(as_matrix(payload, len(batch)))

    def embed_batch(
        self,
        texts: Sequence[str],
        batch_size: int | None = None,
    ) -> npt.NDArray[np.float32]:
        """Embed texts in batches of ``batch_size`` requests."""
        rows = batch_process(list(texts), batch_size or self.batch_size, self._embed_request)
        if not rows:
            return np.zeros((0, self.dimension or 0), dtype=np.float32)
        stacked = np.vstack(rows).astype(np.float32)
        if self.dimension is None:
            self.dimension = int(stacked.shape[-1])
        return stacked

    def __del__(self):
        """Clean up HTTP client."""
        if getattr(self, "_owns_client", False):
            close_quietly(getattr(self, "client", None))


__all__ = ["TEIEmbedder"]
