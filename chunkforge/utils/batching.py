"""Batching and bounded fan-out helpers for embedding calls."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def batch_process(
    items: Sequence[T],
    size: int,
    handler: Callable[[list[T]], Sequence[R]],
) -> list[R]:
    """Feed items to handler in consecutive batches and concatenate the results.

    Args:
        items: Input items.
        size: Maximum batch size (must be positive).
        handler: Called once per batch; must return one result per item.

    Returns:
        Flattened results in input order.
    """
    if size <= 0:
        raise ValueError(f"batch size must be positive, got {size}")
    results: list[R] = []
    for i in range(0, len(items), size):
        batch = list(items[i : i + size])
        results.extend(handler(batch))
    return results


def concurrent_map(
    items: Sequence[T],
    concurrency: int,
    handler: Callable[[T], R],
) -> list[R]:
    """Apply handler to every item using at most ``concurrency`` worker threads.

    Results are ordered by input index, not completion order. The first
    exception raised by a handler propagates to the caller.
    """
    if not items:
        return []
    workers = max(1, min(concurrency, len(items)))
    if workers == 1:
        return [handler(item) for item in items]

    logger.debug("concurrent_map: %d items on %d workers", len(items), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(handler, items))


__all__ = ["batch_process", "concurrent_map"]
