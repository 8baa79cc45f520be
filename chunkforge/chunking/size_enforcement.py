"""Chunk size enforcement: hard-split oversized chunks, merge small neighbours."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ..text.tokenizer import count_tokens, tokenize
from .base import Chunk, _new_chunk_id

logger = logging.getLogger(__name__)

# Chunks longer than this multiple of chunk_size are split on token counts.
OVERSIZE_FACTOR = 1.5


def merge_chunks(first: Chunk, second: Chunk, separator: str = " ") -> Chunk:
    """Join two adjacent chunks, keeping the id and metadata of ``first``."""
    return replace(
        first,
        text=f"{first.text}{separator}{second.text}",
        end=second.end,
        metadata=dict(first.metadata),
    )


def split_large_chunk(chunk: Chunk, chunk_size: int) -> list[Chunk]:
    """Cut a chunk into consecutive ``chunk_size``-token slices.

    Slice offsets are the chunk start plus the token offsets inside the
    chunk text. Every slice gets a fresh id and a copy of the metadata.
    Offsets of a chunk whose text was joined across a paragraph break drift
    from the source text by the whitespace that joining removed.
    """
    tokens = tokenize(chunk.text)
    slices: list[Chunk] = []
    for i in range(0, len(tokens), chunk_size):
        window = tokens[i : i + chunk_size]
        slices.append(
            Chunk(
                text=" ".join(token.value for token in window),
                start=chunk.start + window[0].start,
                end=chunk.start + window[-1].end,
                id=_new_chunk_id(),
                metadata=dict(chunk.metadata),
            )
        )
    return slices


def enforce_chunk_size(chunks: Sequence[Chunk], chunk_size: int) -> list[Chunk]:
    """Bound chunk sizes in a single left-to-right pass.

    Args:
        chunks: Chunks in document order.
        chunk_size: Target token budget.

    Returns:
        Chunks where no merged chunk exceeds ``chunk_size`` tokens and no
        split slice exceeds ``chunk_size`` tokens. Chunks between
        ``chunk_size`` and ``1.5 * chunk_size`` tokens pass through intact.
    """
    result: list[Chunk] = []
    pending: Chunk | None = None

    for current in chunks:
        tokens = count_tokens(current.text)
        if tokens > chunk_size * OVERSIZE_FACTOR:
            if pending is not None:
                result.append(pending)
                pending = None
            result.extend(split_large_chunk(current, chunk_size))
            continue

        if pending is None:
            pending = current
            continue

        if count_tokens(f"{pending.text} {current.text}") <= chunk_size:
            pending = merge_chunks(pending, current)
        else:
            result.append(pending)
            pending = current

    if pending is not None:
        result.append(pending)

    logger.debug("size enforcement: %d chunks in, %d out", len(chunks), len(result))
    return result


__all__ = ["OVERSIZE_FACTOR", "enforce_chunk_size", "merge_chunks", "split_large_chunk"]
