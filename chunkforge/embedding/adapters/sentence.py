"""SentenceTransformer-based local model embedder."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
import numpy.typing as npt

from ..base import BaseEmbedder

DEFAULT_MODEL = "sentence-transformers/all-MiniLM-L6-v2"


def l2_normalize(vectors: np.ndarray, axis: int = 1, eps: float = 1e-12) -> np.ndarray:
    """L2 normalization."""
    norm = np.linalg.norm(vectors, axis=axis, keepdims=True)
    norm = np.maximum(norm, eps)
    return vectors / norm


class SentenceTransformerEmbedder(BaseEmbedder):
    """Local embedding model loaded through sentence-transformers.

    Config options:
        model_name: str - HuggingFace model ID
        device: str = "cpu" - Device to run the model on
        normalize_embeddings: bool = True - L2 normalize embeddings
        show_progress_bar: bool = False
    """

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL,
        device: str = "cpu",
        normalize_embeddings: bool = True,
        show_progress_bar: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            model_name=model_name,
            device=device,
            normalize_embeddings=normalize_embeddings,
            **kwargs,
        )
        # Import here to make it optional
        try:
            from sentence_transformers import SentenceTransformer
        except ImportError as exc:
            raise ImportError(
                "sentence-transformers not installed. "
                "Install with: pip install 'chunkforge[local]'"
            ) from exc

        self.model_name = model_name
        self.model = SentenceTransformer(model_name, device=device)
        self.normalize_embeddings = normalize_embeddings
        self.show_progress_bar = show_progress_bar
        self.dimension = self.model.get_sentence_embedding_dimension()

    def embed_batch(
        self,
        texts: Sequence[str],
        batch_size: int = 32,
    ) -> npt.NDArray[np.float32]:
        texts_list = list(texts)
        if not texts_list:
            return np.zeros((0, self.dimension or 0), dtype=np.float32)

        vecs = self.model.encode(
            texts_list,
            batch_size=batch_size,
            normalize_embeddings=False,
            convert_to_numpy=True,
            show_progress_bar=self.show_progress_bar,
        )
        vecs = np.asarray(vecs, dtype=np.float32)
        if self.normalize_embeddings:
            vecs = l2_normalize(vecs)
        return vecs


__all__ = ["SentenceTransformerEmbedder", "l2_normalize"]
