"""Tests for chunk size enforcement."""

from chunkforge.chunking.base import Chunk
from chunkforge.chunking.size_enforcement import enforce_chunk_size, merge_chunks, split_large_chunk
from chunkforge.text import count_tokens


def _chunk(text, start=0, **metadata):
    return Chunk(text=text, start=start, end=start + len(text), metadata=metadata)


def _words(count, prefix="w"):
    return " ".join(f"{prefix}{i}" for i in range(count))


def test_split_large_chunk_offsets():
    """Slices get offsets relative to the original document and fresh ids."""
    text = _words(12)
    chunk = _chunk(text, start=100, chunker="semantic")
    slices = split_large_chunk(chunk, 5)

    assert [count_tokens(s.text) for s in slices] == [5, 5, 2]
    assert slices[0].start == 100
    assert slices[0].end == 100 + len("w0 w1 w2 w3 w4")
    assert slices[1].start == 100 + text.index("w5")
    assert slices[-1].end == chunk.end
    assert len({s.id for s in slices} | {chunk.id}) == 4
    assert all(s.metadata == {"chunker": "semantic"} for s in slices)


def test_oversized_chunk_is_hard_split():
    """Test oversized chunks are split into chunk_size slices."""
    chunks = enforce_chunk_size([_chunk(_words(20))], chunk_size=5)

    assert len(chunks) == 4
    assert all(count_tokens(c.text) <= 5 for c in chunks)


def test_chunk_within_tolerance_passes_through():
    """Up to 1.5x the chunk size a chunk is left intact."""
    original = _chunk(_words(7))
    chunks = enforce_chunk_size([original], chunk_size=5)

    assert len(chunks) == 1
    assert chunks[0] is original


def test_small_neighbours_are_merged():
    """Test small neighbours merge and keep the first id."""
    first = _chunk("a b", start=0, chunker="semantic")
    second = _chunk("c d", start=4)
    third = _chunk("e f", start=8)
    chunks = enforce_chunk_size([first, second, third], chunk_size=5)

    assert [c.text for c in chunks] == ["a b c d", "e f"]
    assert chunks[0].id == first.id
    assert chunks[0].metadata == {"chunker": "semantic"}
    assert (chunks[0].start, chunks[0].end) == (0, second.end)
    assert chunks[1] is third


def test_merge_never_exceeds_chunk_size():
    """Test merged chunks stay within chunk_size."""
    pieces = [_chunk(_words(3, prefix=f"p{i}_"), start=i * 40) for i in range(6)]
    chunks = enforce_chunk_size(pieces, chunk_size=7)

    assert all(count_tokens(c.text) <= 7 for c in chunks)
    assert " ".join(c.text for c in chunks) == " ".join(p.text for p in pieces)


def test_pending_chunk_flushed_before_split_slices():
    """Output stays in document order around an oversized chunk."""
    before = _chunk("a b", start=0)
    huge = _chunk(_words(10), start=10)
    after = _chunk("c d", start=100)
    chunks = enforce_chunk_size([before, huge, after], chunk_size=4)

    assert chunks[0] is before
    assert [c.start for c in chunks] == sorted(c.start for c in chunks)
    assert chunks[-1] is after
    for prev, nxt in zip(chunks, chunks[1:]):
        assert prev.end <= nxt.start


def test_enforce_empty():
    """Test size enforcement with no chunks."""
    assert enforce_chunk_size([], chunk_size=10) == []


def test_merge_chunks_separator():
    """Test merge_chunks with a custom separator."""
    merged = merge_chunks(_chunk("one"), _chunk("two", start=5), separator="\n")
    assert merged.text == "one\ntwo"
    assert merged.end == 8
