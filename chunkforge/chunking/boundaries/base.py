"""Shared types for boundary detection.

A boundary is a sentence index ``i`` meaning "the segment ends after
sentence i". Some detectors naturally report character offsets (the end
offset of the last sentence of a segment); those are mapped back to
sentence indices with ``offsets_to_sentence_indices``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

import numpy as np
import numpy.typing as npt

from ...text.sentences import SentenceSpan


class ThresholdingStrategy(str, Enum):
    """Closed set of built-in boundary detection strategies."""

    ZSCORE = "statistical-zscore"
    PERCENTILE = "statistical-percentile"
    LOCAL_MINIMA = "local-minima"
    GRADIENT = "gradient"
    LEXICAL_COHESION = "lexical-cohesion"
    EMBEDDING_CONTRAST = "embedding-contrast"
    PROBABILISTIC = "probabilistic-segmentation"


class BoundaryUnit(str, Enum):
    """What a detector's positions refer to."""

    SENTENCE_INDEX = "sentence_index"
    CHAR_OFFSET = "char_offset"


@dataclass(frozen=True)
class BoundaryConfig:
    """Detector parameters, fixed at chunker construction."""

    z_score_k: float = 1.0
    percentile: float = 10.0
    gradient_threshold: float = 0.15
    block_size: int = 6
    cohesion_smoothing_window: int = 4
    depth_threshold: float = 0.1
    contrast_window: int = 5
    contrast_threshold: float = 0.2
    max_segments: int = 5
    min_segment_length: int = 2
    max_lookback: int = 20


@dataclass(frozen=True)
class BoundaryContext:
    """Per-call inputs shared by all detectors.

    Attributes:
        text: Original document text.
        sentences: Sentence spans of ``text``.
        similarities: Smoothed adjacent-sentence cosine similarities (n-1 values).
        embeddings: Sentence embedding matrix (n x dim), if computed.
    """

    text: str
    sentences: Sequence[SentenceSpan]
    similarities: Sequence[float]
    embeddings: npt.NDArray[np.floating] | None = None


DetectorFn = Callable[[BoundaryContext, BoundaryConfig], list[int]]


@dataclass(frozen=True)
class BoundaryDetector:
    """A registered detector function and the unit of its output."""

    name: str
    detect: DetectorFn
    unit: BoundaryUnit = BoundaryUnit.SENTENCE_INDEX

    def boundaries(self, context: BoundaryContext, config: BoundaryConfig) -> list[int]:
        """Run the detector and return sorted, unique sentence indices."""
        positions = self.detect(context, config)
        if self.unit is BoundaryUnit.CHAR_OFFSET:
            positions = offsets_to_sentence_indices(context.sentences, positions)
        last = len(context.sentences) - 1
        return sorted({index for index in positions if 0 <= index <= last})


def offsets_to_sentence_indices(
    sentences: Sequence[SentenceSpan],
    offsets: Sequence[int],
) -> list[int]:
    """Map each offset to the first sentence whose end is at or after it.

    Offsets past the last sentence are dropped.
    """
    indexes: list[int] = []
    for offset in offsets:
        for index, sentence in enumerate(sentences):
            if sentence.end >= offset:
                indexes.append(index)
                break
    return indexes


__all__ = [
    "BoundaryConfig",
    "BoundaryContext",
    "BoundaryDetector",
    "BoundaryUnit",
    "DetectorFn",
    "ThresholdingStrategy",
    "offsets_to_sentence_indices",
]
