"""Maximum-likelihood segmentation by dynamic programming.

Every candidate segment is scored by the log-likelihood of its tokens under
a unigram model fitted to that segment: ``sum(count * log(count / total))``.
Homogeneous segments score higher (closer to zero). The DP picks the
segmentation maximising the summed score, subject to a minimum segment
length and a bounded lookback.

The segment counter carried per DP state only records whether a state has a
predecessor (0 or 1), not the cumulative number of segments on its path, so
``max_segments`` only rules out segmentations when it is below 2.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Sequence

from ...text.tokenizer import lowercase_tokens
from .base import BoundaryConfig, BoundaryContext

logger = logging.getLogger(__name__)


def sentence_bag(text: str) -> Counter:
    return Counter(lowercase_tokens(text))


def log_likelihood(counts: Counter) -> float:
    total = sum(counts.values())
    if total == 0:
        return 0.0
    return sum(count * math.log(count / total) for count in counts.values())


def probabilistic_boundaries(
    sentence_texts: Sequence[str],
    max_segments: int = 5,
    min_segment_length: int = 2,
    max_lookback: int = 20,
) -> list[int]:
    """Optimal segment ends as sentence indices, in document order.

    Args:
        sentence_texts: Sentences of the document.
        max_segments: Cap checked against the per-state segment counter.
        min_segment_length: Minimum sentences per segment.
        max_lookback: Maximum segment length considered.

    Returns:
        Index of the last sentence of every segment except the final one.
    """
    n = len(sentence_texts)
    if n <= 1:
        return []

    min_len = max(1, min_segment_length)
    bags = [sentence_bag(text) for text in sentence_texts]
    dp = [-math.inf] * (n + 1)
    back = [-1] * (n + 1)
    dp[0] = 0.0

    for i in range(min_len, n + 1):
        lowest = max(0, i - max_lookback)
        latest = i - min_len

        # Likelihood of [j, i) for every candidate j, grown leftwards.
        scores: dict[int, float] = {}
        counts: Counter = Counter()
        for j in range(i - 1, lowest - 1, -1):
            counts.update(bags[j])
            if j <= latest:
                scores[j] = log_likelihood(counts)

        for j in range(lowest, latest + 1):
            segment_count = (0 if back[j] == -1 else 1) + 1
            if segment_count > max_segments:
                continue
            score = dp[j] + scores[j]
            if score > dp[i]:
                dp[i] = score
                back[i] = j

    boundaries: list[int] = []
    idx = n
    while idx > 0 and back[idx] != -1:
        start = back[idx]
        if start > 0:
            boundaries.append(start - 1)
        idx = start

    boundaries.reverse()
    logger.debug("probabilistic segmentation: %d sentences -> %d boundaries", n, len(boundaries))
    return boundaries


def detect_probabilistic(context: BoundaryContext, config: BoundaryConfig) -> list[int]:
    return probabilistic_boundaries(
        [sentence.text for sentence in context.sentences],
        max_segments=config.max_segments,
        min_segment_length=config.min_segment_length,
        max_lookback=config.max_lookback,
    )


__all__ = ["log_likelihood", "probabilistic_boundaries", "detect_probabilistic"]
