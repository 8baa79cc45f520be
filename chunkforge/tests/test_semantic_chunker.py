"""Tests for the semantic chunker."""

from __future__ import annotations

import pytest

from chunkforge.chunking import ChunkParams, SemanticChunker
from chunkforge.chunking.boundaries import BoundaryDetectorRegistry, create_default_detector_registry
from chunkforge.embedding import LexicalHashEmbedder
from chunkforge.errors import ConfigurationError, EmbeddingError
from chunkforge.text import split_sentences

LONG_TEXT = (
    "Solar panels convert sunlight into electricity. "
    "Panels on roofs can power a home. "
    "Sunlight hours vary with the season. "
    "The recipe needs flour and butter. "
    "Mix the butter with sugar first. "
    "Bake the dough for twenty minutes.\n\n"
    "Trains leave the station every hour. "
    "The station has four platforms. "
    "Tickets can be bought on the train. "
    "Solar farms need a lot of land. "
    "Farms and panels share the land sometimes. "
    "The bakery sells fresh bread daily."
)


def test_splits_where_topic_changes(keyword_embedder, cat_car_text):
    """Test semantic chunker splits at the topic change."""
    chunker = SemanticChunker(embedder=keyword_embedder, chunk_size=9, smoothing_window=1)
    chunks = chunker.chunk(cat_car_text)

    assert [c.text for c in chunks] == [
        "The cat sleeps. The cat purrs. The cat eats.",
        "The car drives. The car honks. The car parks.",
    ]
    assert chunks[0].start == 0
    assert chunks[1].start == cat_car_text.index("The car drives.")
    assert chunks[1].end == len(cat_car_text)
    # One batched embedding call for all sentences
    assert len(keyword_embedder.calls) == 1
    assert len(keyword_embedder.calls[0]) == 6


def test_small_segments_are_merged(keyword_embedder, cat_car_text):
    """Test small segments are merged up to chunk_size."""
    chunker = SemanticChunker(embedder=keyword_embedder, smoothing_window=1)
    chunks = chunker.chunk(cat_car_text)

    assert len(chunks) == 1
    assert (chunks[0].start, chunks[0].end) == (0, len(cat_car_text))


def test_distinct_short_sentences_form_one_chunk():
    """All-zero similarities give a zero threshold, so nothing splits."""
    chunks = SemanticChunker().chunk("A. B. C.")

    assert len(chunks) == 1
    assert chunks[0].text == "A. B. C."
    assert (chunks[0].start, chunks[0].end) == (0, 8)


def test_single_sentence_skips_embedding(keyword_embedder):
    """Test single sentence input makes no embedding call."""
    chunks = SemanticChunker(embedder=keyword_embedder).chunk("  Just one sentence here.")

    assert keyword_embedder.calls == []
    assert len(chunks) == 1
    assert chunks[0].text == "Just one sentence here."
    assert chunks[0].start == 2


def test_empty_text():
    """Test SemanticChunker with empty text."""
    assert SemanticChunker().chunk("") == []
    assert SemanticChunker().chunk("\n\n   ") == []


def test_metadata(keyword_embedder, cat_car_text):
    """Test semantic chunk metadata."""
    chunker = SemanticChunker(embedder=keyword_embedder, thresholding="gradient")
    chunks = chunker.chunk(cat_car_text, metadata={"source": "doc-1"})

    for chunk in chunks:
        assert chunk.metadata["source"] == "doc-1"
        assert chunk.metadata["chunker"] == "semantic"
        assert chunk.metadata["strategy"] == "gradient"


def test_unknown_strategy_fails_at_construction():
    """Test unknown strategy fails when the chunker is built."""
    with pytest.raises(ConfigurationError):
        SemanticChunker(thresholding="magic")


def test_legacy_strategy_alias():
    """Test legacy strategy aliases are accepted."""
    chunker = SemanticChunker(thresholding="texttiling")
    assert chunker.detector.name == "lexical-cohesion"


def test_default_embedder_and_strategy():
    """Test default embedder and thresholding strategy."""
    chunker = SemanticChunker()
    assert isinstance(chunker.embedder, LexicalHashEmbedder)
    assert chunker.detector.name == "statistical-zscore"
    assert chunker.chunk_size == 600


def test_detector_parameters_from_params_and_kwargs():
    """Test detector options come from params and kwargs."""
    chunker = SemanticChunker(
        params=ChunkParams(z_score_k=2.0, percentile=25.0),
        max_segments=3,
        block_size=4,
    )
    config = chunker.boundary_config

    assert config.z_score_k == 2.0
    assert config.percentile == 25.0
    assert config.max_segments == 3
    assert config.block_size == 4
    assert "max_segments" not in chunker.config


def test_embedding_contrast_reuses_sentence_embeddings(keyword_embedder):
    """Test embedding contrast makes no second embedding call."""
    text = "The cat sleeps. The cat purrs. The car drives. The car honks."
    chunker = SemanticChunker(
        embedder=keyword_embedder,
        thresholding="embedding-contrast",
        contrast_window=1,
        chunk_size=6,
    )
    chunks = chunker.chunk(text)

    assert len(keyword_embedder.calls) == 1
    assert [c.text for c in chunks] == [
        "The cat sleeps. The cat purrs. The car drives.",
        "The car honks.",
    ]


def test_custom_detector_registry():
    """Test a custom detector registry."""
    detectors = BoundaryDetectorRegistry()
    detectors.register("every-gap", lambda ctx, cfg: list(range(len(ctx.sentences) - 1)))

    chunker = SemanticChunker(thresholding="every-gap", detectors=detectors, chunk_size=3)
    chunks = chunker.chunk("One two three. Four five six. Seven eight nine.")

    assert [c.text for c in chunks] == ["One two three.", "Four five six.", "Seven eight nine."]


def test_oversized_segment_is_hard_split(keyword_embedder):
    """Test oversized segments are split on tokens."""
    text = "The cat " + " ".join(["purrs"] * 20) + ". The car drives."
    chunker = SemanticChunker(
        embedder=keyword_embedder,
        thresholding="statistical-percentile",
        chunk_size=5,
        smoothing_window=1,
    )
    chunks = chunker.chunk(text)

    assert len(chunks) == 6
    assert all(len(c.text.split()) <= 5 for c in chunks)
    assert chunks[-1].text == "The car drives."


@pytest.mark.parametrize("strategy", create_default_detector_registry().list_strategies())
def test_every_strategy_reconstructs_sentences(strategy):
    """Chunks cover every sentence once, in order, without overlap."""
    chunker = SemanticChunker(thresholding=strategy, chunk_size=8, smoothing_window=2)
    chunks = chunker.chunk(LONG_TEXT)
    sentences = split_sentences(LONG_TEXT)

    assert " ".join(c.text for c in chunks) == " ".join(s.text for s in sentences)
    assert all(c.text for c in chunks)
    assert all(0 <= c.start <= c.end <= len(LONG_TEXT) for c in chunks)
    for prev, nxt in zip(chunks, chunks[1:]):
        assert prev.end <= nxt.start


def test_repeated_calls_are_deterministic():
    """Test repeated calls give the same chunks."""
    chunker = SemanticChunker(thresholding="statistical-percentile", chunk_size=8)
    first = [(c.start, c.end) for c in chunker.chunk(LONG_TEXT)]
    second = [(c.start, c.end) for c in chunker.chunk(LONG_TEXT)]
    assert first == second


def test_chunk_batch_keeps_order(keyword_embedder):
    """Test chunk_batch returns results in input order."""
    chunker = SemanticChunker(embedder=keyword_embedder)
    results = chunker.chunk_batch(
        ["The cat sleeps.", "The car drives. The car honks."],
        metadata_list=[{"doc": 1}, {"doc": 2}],
    )

    assert [r[0].metadata["doc"] for r in results] == [1, 2]
    assert results[0][0].text == "The cat sleeps."


def test_embedding_failure_aborts_chunk(failing_embedder, cat_car_text):
    """Test an embedding failure propagates out of chunk() unchanged."""
    chunker = SemanticChunker(embedder=failing_embedder)

    with pytest.raises(EmbeddingError, match="upstream 500: boom"):
        chunker.chunk(cat_car_text)
    # No retry
    assert failing_embedder.calls == 1


@pytest.mark.parametrize("value", [-10, 100.5])
def test_percentile_out_of_range_fails_at_construction(value):
    """Test percentile outside [0, 100] is rejected."""
    with pytest.raises(ConfigurationError, match="percentile"):
        SemanticChunker(thresholding="statistical-percentile", percentile=value)
