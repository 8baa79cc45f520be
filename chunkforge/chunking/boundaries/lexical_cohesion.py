"""Window-based lexical cohesion (TextTiling-style) boundary detection.

Vocabulary overlap between the sentences just before and just after each
gap is scored, smoothed and normalised; gaps sitting in a sufficiently deep
valley of the score curve become boundaries.
"""

from __future__ import annotations

import math
from typing import Sequence

from ...text.sentences import SentenceSpan
from ...text.tokenizer import lowercase_tokens
from ...utils.smoothing import moving_average, normalize
from .base import BoundaryConfig, BoundaryContext


def cohesion_scores(sentences: Sequence[SentenceSpan], block_size: int) -> list[float]:
    """Overlap score for every gap between sentence i and i+1."""
    tokens = [lowercase_tokens(sentence.text) for sentence in sentences]
    n = len(sentences)
    scores: list[float] = []
    for i in range(n - 1):
        left = [tok for block in tokens[max(0, i - block_size + 1) : i + 1] for tok in block]
        right = [tok for block in tokens[i + 1 : min(n, i + 1 + block_size)] for tok in block]
        right_vocab = set(right)
        overlap = sum(1 for tok in left if tok in right_vocab)
        scores.append(overlap / max(1.0, math.sqrt(len(left) * len(right))))
    return scores


def depth_boundaries(scores: Sequence[float], depth_threshold: float) -> list[int]:
    """Interior local minima whose depth exceeds ``depth_threshold``."""
    boundaries: list[int] = []
    for i in range(1, len(scores) - 1):
        is_valley = scores[i] < scores[i - 1] and scores[i] < scores[i + 1]
        depth = (scores[i - 1] - scores[i]) + (scores[i + 1] - scores[i])
        if is_valley and depth > depth_threshold:
            boundaries.append(i)
    return boundaries


def detect_lexical_cohesion(context: BoundaryContext, config: BoundaryConfig) -> list[int]:
    """Return the end offsets of sentences closing a lexical segment."""
    sentences = context.sentences
    if len(sentences) <= 1:
        return []
    raw = cohesion_scores(sentences, config.block_size)
    smoothed = normalize(moving_average(raw, config.cohesion_smoothing_window))
    return [sentences[i].end for i in depth_boundaries(smoothed, config.depth_threshold)]


__all__ = ["cohesion_scores", "depth_boundaries", "detect_lexical_cohesion"]
