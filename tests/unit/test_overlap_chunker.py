# tests/unit/test_overlap_chunker.py
"""
Tests for the overlap chunker.

Covers window placement, chunk count, ids, whitespace normalization and
parameter validation.
"""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from syllabus_rag.core.exceptions import ChunkingConfigError, ConfigError
from syllabus_rag.ingestion.chunking.base import ChunkerPlugin
from syllabus_rag.ingestion.chunking.plugins.overlap import (
    OverlapChunker,
    chunk_text,
    normalize_whitespace,
)

LONG_TEXT = " ".join(f"word{i}" for i in range(400))


def expected_count(length: int, size: int, overlap: int) -> int:
    if length == 0:
        return 0
    if length <= size:
        return 1
    return 1 + math.ceil((length - size) / (size - overlap))


class TestWindowing:
    """Window placement."""

    def test_small_example(self):
        chunks = chunk_text("abcdefghij", chunk_size=4, chunk_overlap=1, source_label="s")

        assert [c.text for c in chunks] == ["abcd", "defg", "ghij"]

    def test_no_overlap_partitions_text(self):
        chunks = chunk_text("abcdefghij", chunk_size=5, chunk_overlap=0, source_label="s")

        assert [c.text for c in chunks] == ["abcde", "fghij"]

    def test_last_window_may_be_short(self):
        chunks = chunk_text("abcdefg", chunk_size=4, chunk_overlap=0, source_label="s")

        assert [c.text for c in chunks] == ["abcd", "efg"]

    @pytest.mark.parametrize("size,overlap", [(50, 0), (50, 10), (120, 119), (7, 3), (1, 0)])
    def test_chunks_reconstruct_the_normalized_text(self, size, overlap):
        chunks = chunk_text(LONG_TEXT, size, overlap, "notes.md")

        rebuilt = chunks[0].text + "".join(c.text[overlap:] for c in chunks[1:])
        assert rebuilt == normalize_whitespace(LONG_TEXT)

    @pytest.mark.parametrize("size,overlap", [(50, 10), (64, 32), (9, 8)])
    def test_adjacent_chunks_share_overlap(self, size, overlap):
        chunks = chunk_text(LONG_TEXT, size, overlap, "notes.md")

        for left, right in zip(chunks, chunks[1:]):
            assert left.text[-overlap:] == right.text[:overlap]

    @pytest.mark.parametrize("size,overlap", [(50, 0), (50, 10), (300, 100), (1200, 200), (9, 8)])
    def test_chunk_count(self, size, overlap):
        chunks = chunk_text(LONG_TEXT, size, overlap, "notes.md")

        length = len(normalize_whitespace(LONG_TEXT))
        assert len(chunks) == expected_count(length, size, overlap)

    def test_every_chunk_is_at_most_chunk_size(self):
        chunks = chunk_text(LONG_TEXT, 77, 20, "notes.md")

        assert all(0 < len(c.text) <= 77 for c in chunks)
        assert all(len(c.text) == 77 for c in chunks[:-1])


class TestEdgeCases:
    """Empty, short and whitespace-heavy input."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t \n"])
    def test_empty_text_gives_no_chunks(self, text):
        assert chunk_text(text, 10, 2, "empty.md") == []

    def test_short_text_gives_one_chunk(self):
        chunks = chunk_text("  Ohm's law  ", 1200, 200, "ohm.md")

        assert len(chunks) == 1
        assert chunks[0].text == "Ohm's law"

    def test_text_exactly_chunk_size_gives_one_chunk(self):
        chunks = chunk_text("abcd", 4, 3, "s")

        assert [c.text for c in chunks] == ["abcd"]

    def test_whitespace_is_collapsed_before_windowing(self):
        chunks = chunk_text("Force\n\n  equals   mass\ttimes acceleration", 1200, 200, "s")

        assert chunks[0].text == "Force equals mass times acceleration"


class TestChunkIdentity:
    """Ids, sources and indexes."""

    def test_ids_are_source_and_sequence(self):
        chunks = chunk_text("abcdefghij", 4, 1, "waves/doppler.mdx")

        assert [c.id for c in chunks] == [
            "waves/doppler.mdx::0",
            "waves/doppler.mdx::1",
            "waves/doppler.mdx::2",
        ]
        assert [c.chunk_index for c in chunks] == [0, 1, 2]
        assert {c.source for c in chunks} == {"waves/doppler.mdx"}

    def test_chunks_are_immutable(self):
        chunk = chunk_text("abc", 10, 0, "s")[0]

        with pytest.raises(ValidationError):
            chunk.text = "changed"

    def test_deterministic(self):
        first = chunk_text(LONG_TEXT, 100, 30, "s")
        second = chunk_text(LONG_TEXT, 100, 30, "s")

        assert first == second


class TestValidation:
    """Invalid size/overlap pairs are rejected before any work."""

    @pytest.mark.parametrize(
        "size,overlap,fragment",
        [
            (0, 0, "chunk_size must be >= 1"),
            (-5, 0, "chunk_size must be >= 1"),
            (10, -1, "chunk_overlap must be >= 0"),
            (10, 10, "must be < chunk_size"),
            (10, 15, "must be < chunk_size"),
        ],
    )
    def test_invalid_parameters(self, size, overlap, fragment):
        with pytest.raises(ChunkingConfigError, match=fragment):
            chunk_text("some text", size, overlap, "s")

    def test_validation_happens_even_for_empty_text(self):
        with pytest.raises(ChunkingConfigError):
            chunk_text("", 10, 10, "s")

    def test_chunking_error_is_a_config_error(self):
        with pytest.raises(ConfigError):
            OverlapChunker(chunk_size=5, chunk_overlap=5)

        with pytest.raises(ValueError):
            OverlapChunker(chunk_size=0)


class TestOverlapChunkerPlugin:
    """The plugin wrapper around chunk_text."""

    def test_defaults(self):
        chunker = OverlapChunker()

        assert chunker.chunk_size == 1200
        assert chunker.chunk_overlap == 200

    def test_chunker_id(self):
        assert OverlapChunker(chunk_size=800, chunk_overlap=100).chunker_id == "overlap:800:100"

    def test_satisfies_plugin_protocol(self):
        assert isinstance(OverlapChunker(), ChunkerPlugin)

    def test_chunk_delegates_to_chunk_text(self):
        chunker = OverlapChunker(chunk_size=50, chunk_overlap=10)

        assert chunker.chunk(LONG_TEXT, "a.md") == chunk_text(LONG_TEXT, 50, 10, "a.md")
