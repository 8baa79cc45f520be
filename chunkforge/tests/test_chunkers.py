"""Tests for the base chunker and the fixed, sliding, recursive and hybrid chunkers."""

from __future__ import annotations

import pytest

from chunkforge.chunking import (
    BaseChunker,
    Chunk,
    ChunkParams,
    FixedChunker,
    HybridChunker,
    RecursiveChunker,
    SlidingWindowChunker,
)


def _words(count):
    return " ".join(f"w{i}" for i in range(count))


# --- ChunkParams / Chunk / BaseChunker ---


def test_chunk_params_defaults():
    """Test ChunkParams default values."""
    params = ChunkParams()
    assert params.chunk_size is None
    assert params.thresholding == "statistical-zscore"
    assert params.smoothing_window == 3
    assert params.percentile == 10.0
    assert params.gradient_threshold == 0.15
    assert params.z_score_k == 1.0
    assert params.topic_count is None
    assert params.max_concurrent_embeddings == 4


def test_chunk_params_are_frozen():
    """Test ChunkParams cannot be mutated."""
    params = ChunkParams(chunk_size=100)
    with pytest.raises(AttributeError):
        params.chunk_size = 200


def test_chunk_defaults_and_repr():
    """Test Chunk default fields and repr."""
    chunk = Chunk(text="x" * 80, start=0, end=80)
    other = Chunk(text="y", start=0, end=1)

    assert chunk.metadata == {}
    assert chunk.id != other.id
    assert "..." in repr(chunk)


def test_chunker_kwargs_override_params():
    """Test constructor kwargs take precedence over params."""
    chunker = FixedChunker(params=ChunkParams(chunk_size=100), chunk_size=200, chunk_overlap=20)
    assert chunker.params.chunk_size == 200
    assert chunker.params.chunk_overlap == 20


def test_chunker_rejects_non_positive_size():
    """Test chunk_size must be positive."""
    with pytest.raises(ValueError):
        FixedChunker(chunk_size=-1)


def test_custom_chunker_subclass():
    """Test a minimal BaseChunker subclass."""
    class WholeTextChunker(BaseChunker):
        name = "whole"

        def chunk(self, text, metadata=None):
            return [self._make_chunk(text, 0, len(text), metadata)]

    chunks = WholeTextChunker().chunk("abc", metadata={"k": "v"})
    assert chunks[0].metadata == {"k": "v", "chunker": "whole"}


def test_chunk_batch_metadata_length_mismatch():
    """Test chunk_batch rejects mismatched metadata."""
    with pytest.raises(ValueError):
        FixedChunker().chunk_batch(["a", "b"], metadata_list=[{}])


# --- FixedChunker ---


def test_fixed_chunker_windows_with_overlap():
    """Test fixed chunker token windows overlap."""
    text = _words(25)
    chunks = FixedChunker(chunk_size=10, chunk_overlap=2).chunk(text)

    assert len(chunks) == 3
    assert chunks[1].text.split()[0] == "w8"
    assert chunks[2].text.split()[0] == "w16"
    assert [c.metadata["token_count"] for c in chunks] == [10, 10, 9]
    assert chunks[0].start == 0
    assert chunks[0].end == text.index("w9") + 2
    assert chunks[-1].end == len(text)


def test_fixed_chunker_defaults():
    """Test FixedChunker default size and overlap."""
    chunker = FixedChunker()
    assert chunker.chunk_size == 500
    assert chunker.chunk_overlap == 50
    assert FixedChunker(chunk_size=50).chunk_overlap == 5


def test_fixed_chunker_small_and_empty_text():
    """Test FixedChunker with short and empty text."""
    assert FixedChunker().chunk("") == []
    chunks = FixedChunker().chunk("  short   text ")
    assert len(chunks) == 1
    assert chunks[0].text == "short text"
    assert (chunks[0].start, chunks[0].end) == (2, 14)


def test_fixed_chunker_overlap_not_smaller_than_size():
    """The window always moves forward."""
    chunks = FixedChunker(chunk_size=3, chunk_overlap=5).chunk(_words(7))
    assert [c.text for c in chunks] == ["w0 w1 w2", "w3 w4 w5", "w6"]


def test_fixed_chunker_metadata():
    """Test that custom metadata is preserved in fixed chunks."""
    chunks = FixedChunker(chunk_size=5).chunk("a b c", metadata={"source": "s"})
    assert chunks[0].metadata["source"] == "s"
    assert chunks[0].metadata["chunker"] == "fixed"


# --- SlidingWindowChunker ---


def test_sliding_window_expands_to_sentences():
    """Test sliding windows expand to sentence boundaries."""
    text = "One two three. Four five six. Seven eight nine."
    chunks = SlidingWindowChunker(chunk_size=4, chunk_overlap=2).chunk(text)
    sentence_ends = {14, 29, len(text)}

    assert len(chunks) == 4
    assert chunks[0].text == "One two three. Four"
    assert (chunks[0].start, chunks[0].end) == (0, 29)
    assert chunks[2].start == text.index("Four")
    assert all(c.end in sentence_ends for c in chunks)
    # Windows overlap
    assert chunks[1].start < chunks[0].end


def test_sliding_window_defaults():
    """Test SlidingWindowChunker default size, overlap and stride."""
    chunker = SlidingWindowChunker()
    assert chunker.chunk_size == 400
    assert chunker.stride == 300
    assert SlidingWindowChunker(chunk_size=10, chunk_overlap=20).stride == 1


def test_sliding_window_empty():
    """Test SlidingWindowChunker with empty text."""
    assert SlidingWindowChunker().chunk("") == []


# --- RecursiveChunker ---


def test_recursive_merges_small_paragraphs():
    """Test recursive chunker merges small paragraphs."""
    text = "Para one here.\n\nPara two here."
    chunks = RecursiveChunker(chunk_size=100).chunk(text)

    assert len(chunks) == 1
    assert chunks[0].text == "Para one here. Para two here."
    assert (chunks[0].start, chunks[0].end) == (0, len(text))


def test_recursive_keeps_paragraphs_at_budget():
    """Test paragraphs exactly at chunk_size stay whole."""
    text = "Para one here.\n\nPara two here."
    chunks = RecursiveChunker(chunk_size=3).chunk(text)

    assert [c.text for c in chunks] == ["Para one here.", "Para two here."]
    assert chunks[1].start == text.index("Para two")


def test_recursive_packs_sentences_of_long_paragraph():
    """Test long paragraphs are packed by sentences."""
    text = "a b c. d e f. g h i."
    chunks = RecursiveChunker(chunk_size=6).chunk(text)

    assert [c.text for c in chunks] == ["a b c. d e f.", "g h i."]
    assert chunks[1].start == text.index("g")


def test_recursive_token_splits_long_sentence():
    """Test an over-long sentence is split on tokens."""
    chunks = RecursiveChunker(chunk_size=5).chunk(_words(12))
    assert [len(c.text.split()) for c in chunks] == [5, 5, 2]


def test_recursive_metadata():
    """Test that custom metadata is preserved in recursive chunks."""
    chunks = RecursiveChunker().chunk("Hello there.", metadata={"lang": "en"})
    assert chunks[0].metadata == {"lang": "en", "chunker": "recursive"}


# --- HybridChunker ---


def test_hybrid_balances_short_paragraphs():
    """Test hybrid chunker merges short paragraphs with newlines."""
    text = "One two.\n\nThree four.\n\nFive six."
    chunks = HybridChunker(chunk_size=8).chunk(text)

    assert len(chunks) == 1
    assert chunks[0].text == "One two.\nThree four.\nFive six."
    assert (chunks[0].start, chunks[0].end) == (0, len(text))
    assert chunks[0].metadata["chunker"] == "hybrid"


def test_hybrid_size_defaults():
    """Test HybridChunker min and max size defaults."""
    chunker = HybridChunker()
    assert chunker.chunk_size == 600
    assert chunker.min_chunk_size == 300
    assert chunker.max_chunk_size == 900


def test_hybrid_semantic_split_inside_long_paragraph(keyword_embedder, cat_car_text):
    """Test long paragraphs are split semantically with shifted offsets."""
    text = "Intro words here.\n\n" + cat_car_text
    chunker = HybridChunker(
        chunk_size=9,
        min_chunk_size=3,
        max_chunk_size=9,
        smoothing_window=1,
        embedder=keyword_embedder,
    )
    chunks = chunker.chunk(text)

    assert [c.text for c in chunks] == [
        "Intro words here.",
        "The cat sleeps. The cat purrs. The cat eats.",
        "The car drives. The car honks. The car parks.",
    ]
    # Offsets of inner semantic chunks are shifted to the document
    for chunk in chunks:
        assert text[chunk.start:chunk.end] == chunk.text
    assert all(c.metadata["chunker"] == "hybrid" for c in chunks)
    assert len(keyword_embedder.calls) == 1


def test_hybrid_empty():
    """Test HybridChunker with empty text."""
    assert HybridChunker().chunk("") == []
