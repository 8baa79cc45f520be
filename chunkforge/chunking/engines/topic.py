"""Topic chunker: k-means over sentence embeddings, contiguous runs become chunks."""

from __future__ import annotations

import logging
import math
from typing import Any

from ...embedding.adapters.lexical import LexicalHashEmbedder
from ...embedding.base import BaseEmbedder, as_matrix
from ...text.sentences import split_sentences
from ..base import BaseChunker, Chunk, ChunkParams
from ..clustering import contiguous_runs, kmeans

logger = logging.getLogger(__name__)


class TopicChunker(BaseChunker):
    """Group neighbouring sentences that fall into the same topic cluster.

    Sentences are clustered with deterministic k-means; every maximal run of
    sentences sharing a cluster becomes one chunk with ``metadata["cluster"]``.
    A topic that comes back later in the document yields a separate chunk
    with the same cluster label. Chunk sizes are not enforced.
    """

    name = "topic"
    default_chunk_size = 600

    def __init__(
        self,
        params: ChunkParams | None = None,
        embedder: BaseEmbedder | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(params=params, **kwargs)
        self.embedder = embedder if embedder is not None else LexicalHashEmbedder()

    def cluster_count(self, sentence_count: int) -> int:
        """``topic_count`` if set, else ``max(2, round(sqrt(n)))``; never above n."""
        requested = self.params.topic_count or max(2, round(math.sqrt(sentence_count)))
        return min(sentence_count, requested)

    def chunk(
        self,
        text: str,
        metadata: dict[str, Any] | None = None,
    ) -> list[Chunk]:
        sentences = split_sentences(text)
        if not sentences:
            return []

        texts = [sentence.text for sentence in sentences]
        vectors = as_matrix(self.embedder.embed_batch(texts), len(texts))
        k = self.cluster_count(len(sentences))
        result = kmeans(vectors, k)

        chunks: list[Chunk] = []
        for label, first, last in contiguous_runs(result.labels):
            run = sentences[first : last + 1]
            chunks.append(
                self._make_chunk(
                    " ".join(sentence.text for sentence in run),
                    run[0].start,
                    run[-1].end,
                    metadata,
                    cluster=label,
                )
            )

        logger.debug(
            "topic: %d sentences, k=%d, %d chunks (converged=%s)",
            len(sentences),
            k,
            len(chunks),
            result.converged,
        )
        return chunks
