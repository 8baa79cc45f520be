"""Structure-first chunker: paragraphs, then sentences, then tokens."""

from __future__ import annotations

import logging
from typing import Any

from ...text.sentences import split_paragraphs, split_sentences
from ...text.tokenizer import count_tokens
from ..base import BaseChunker, Chunk
from ..size_enforcement import merge_chunks, split_large_chunk

logger = logging.getLogger(__name__)


class RecursiveChunker(BaseChunker):
    """Recursive structural chunker.

    1. Paragraphs within ``chunk_size`` tokens are kept whole.
    2. Larger paragraphs are packed greedily sentence by sentence.
    3. Packs still over budget (a single huge sentence) are token-split.
    4. Adjacent chunks are merged while the result stays within budget.
    """

    name = "recursive"
    default_chunk_size = 500

    def chunk(
        self,
        text: str,
        metadata: dict[str, Any] | None = None,
    ) -> list[Chunk]:
        chunks: list[Chunk] = []
        for paragraph in split_paragraphs(text):
            if count_tokens(paragraph.text) <= self.chunk_size:
                chunks.append(
                    self._make_chunk(paragraph.text, paragraph.start, paragraph.end, metadata)
                )
            else:
                chunks.extend(self._split_paragraph(paragraph.text, paragraph.start, metadata))

        merged = self._merge_small_chunks(chunks)
        logger.debug("recursive: %d pieces merged into %d chunks", len(chunks), len(merged))
        return merged

    def _split_paragraph(
        self,
        paragraph: str,
        offset: int,
        metadata: dict[str, Any] | None,
    ) -> list[Chunk]:
        packs: list[Chunk] = []
        current: list[str] = []
        start = offset

        for sentence in split_sentences(paragraph):
            tentative = " ".join([*current, sentence.text])
            if current and count_tokens(tentative) > self.chunk_size:
                packed = " ".join(current)
                packs.append(self._make_chunk(packed, start, start + len(packed), metadata))
                current = [sentence.text]
                start = offset + sentence.start
            else:
                if not current:
                    start = offset + sentence.start
                current.append(sentence.text)

        if current:
            packed = " ".join(current)
            packs.append(self._make_chunk(packed, start, start + len(packed), metadata))

        result: list[Chunk] = []
        for pack in packs:
            if count_tokens(pack.text) > self.chunk_size:
                result.extend(split_large_chunk(pack, self.chunk_size))
            else:
                result.append(pack)
        return result

    def _merge_small_chunks(self, chunks: list[Chunk]) -> list[Chunk]:
        if not chunks:
            return []
        merged: list[Chunk] = []
        buffer = chunks[0]
        for candidate in chunks[1:]:
            if count_tokens(f"{buffer.text} {candidate.text}") <= self.chunk_size:
                buffer = merge_chunks(buffer, candidate)
            else:
                merged.append(buffer)
                buffer = candidate
        merged.append(buffer)
        return merged
