"""Tests for pydantic-settings configuration."""

import logging

from chunkforge.chunking import ChunkParams
from chunkforge.config import ChunkingSettings, configure_logging
from chunkforge.config import settings as settings_module


def test_settings_defaults(monkeypatch):
    """Test ChunkingSettings default values."""
    monkeypatch.delenv("CHUNKFORGE_CHUNKER_TYPE", raising=False)
    settings = ChunkingSettings(_env_file=None)

    assert settings.chunker_type == "semantic"
    assert settings.chunk_size is None
    assert settings.thresholding == "statistical-zscore"
    assert settings.embedding_method == "lexical"
    assert settings.embedding_batch_size == 32
    assert settings.max_concurrent_embeddings == 4


def test_settings_from_environment(monkeypatch):
    """Test settings read from CHUNKFORGE_ env vars."""
    monkeypatch.setenv("CHUNKFORGE_THRESHOLDING", "gradient")
    monkeypatch.setenv("CHUNKFORGE_CHUNK_SIZE", "250")
    monkeypatch.setenv("chunkforge_topic_count", "3")
    settings = ChunkingSettings(_env_file=None)

    assert settings.thresholding == "gradient"
    assert settings.chunk_size == 250
    assert settings.topic_count == 3


def test_settings_from_env_file(tmp_path):
    """Test settings read from a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("CHUNKFORGE_CHUNKER_TYPE=hybrid\nUNRELATED=1\n")
    settings = ChunkingSettings(_env_file=str(env_file))

    assert settings.chunker_type == "hybrid"


def test_to_chunk_params():
    """Test conversion to ChunkParams."""
    settings = ChunkingSettings(
        _env_file=None,
        chunk_size=120,
        chunk_overlap=12,
        thresholding="local-minima",
        z_score_k=1.5,
        topic_count=4,
    )
    params = settings.to_chunk_params()

    assert isinstance(params, ChunkParams)
    assert params.chunk_size == 120
    assert params.chunk_overlap == 12
    assert params.thresholding == "local-minima"
    assert params.z_score_k == 1.5
    assert params.topic_count == 4


def test_configure_logging(monkeypatch):
    """Test configure_logging sets the root level."""
    calls = []
    monkeypatch.setattr(settings_module.logging, "basicConfig", lambda **kw: calls.append(kw))

    configure_logging("debug")
    configure_logging("not-a-level")

    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == logging.INFO
