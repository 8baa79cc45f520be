"""Tokenization and sentence/paragraph splitting primitives."""

from .sentences import SentenceSpan, split_paragraphs, split_sentences
from .tokenizer import Token, count_tokens, tokenize

__all__ = [
    "SentenceSpan",
    "Token",
    "count_tokens",
    "split_paragraphs",
    "split_sentences",
    "tokenize",
]
