"""Chunking engine implementations."""

from .fixed import FixedChunker
from .hybrid import HybridChunker
from .recursive import RecursiveChunker
from .semantic import SemanticChunker
from .sliding_window import SlidingWindowChunker
from .topic import TopicChunker

__all__ = [
    "FixedChunker",
    "HybridChunker",
    "RecursiveChunker",
    "SemanticChunker",
    "SlidingWindowChunker",
    "TopicChunker",
]
