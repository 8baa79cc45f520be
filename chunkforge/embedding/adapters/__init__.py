"""Embedding adapters."""

from .huggingface import HuggingFaceEmbedder
from .lexical import LexicalHashEmbedder
from .local import LocalFunctionEmbedder
from .openai import OpenAIEmbedder
from .sentence import SentenceTransformerEmbedder
from .tei import TEIEmbedder

__all__ = [
    "HuggingFaceEmbedder",
    "LexicalHashEmbedder",
    "LocalFunctionEmbedder",
    "OpenAIEmbedder",
    "SentenceTransformerEmbedder",
    "TEIEmbedder",
]
