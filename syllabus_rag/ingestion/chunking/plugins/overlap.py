# syllabus_rag/ingestion/chunking/plugins/overlap.py
"""
Overlap chunker - fixed-size character windows with overlap.

The document is whitespace-normalized first (every run of whitespace,
newlines included, becomes one space, ends trimmed), so window offsets do
not depend on how the notes were formatted.

Chunker ID format: "overlap:{chunk_size}:{chunk_overlap}"
Example: "overlap:1200:200" for 1200-char windows with 200-char overlap
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

from syllabus_rag.core.chunk import Chunk, make_chunk_id
from syllabus_rag.core.exceptions import ChunkingConfigError
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import CHUNKING

logger = get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _validate(chunk_size: int, chunk_overlap: int) -> None:
    if chunk_size < 1:
        raise ChunkingConfigError(f"chunk_size must be >= 1, got {chunk_size}")
    if chunk_overlap < 0:
        raise ChunkingConfigError(f"chunk_overlap must be >= 0, got {chunk_overlap}")
    if chunk_overlap >= chunk_size:
        raise ChunkingConfigError(
            f"chunk_overlap ({chunk_overlap}) must be < chunk_size ({chunk_size})"
        )


def chunk_text(
    text: str,
    chunk_size: int,
    chunk_overlap: int,
    source_label: str,
) -> List[Chunk]:
    """
    Split text into overlapping fixed-size windows.

    Args:
        text: Document text (markup already stripped).
        chunk_size: Window length in characters, > 0.
        chunk_overlap: Characters shared by adjacent windows, 0 <= overlap < size.
        source_label: Document identifier, used for Chunk.source and Chunk.id.

    Returns:
        Ordered chunks. Empty list for empty/whitespace-only text; exactly one
        chunk when the normalized text fits in one window.

    Raises:
        ChunkingConfigError: If the size/overlap pair is invalid.
    """
    _validate(chunk_size, chunk_overlap)

    clean = normalize_whitespace(text or "")
    length = len(clean)
    chunks: List[Chunk] = []

    start = 0
    index = 0
    while start < length:
        end = min(start + chunk_size, length)
        chunks.append(
            Chunk(
                id=make_chunk_id(source_label, index),
                source=source_label,
                text=clean[start:end],
                chunk_index=index,
            )
        )
        index += 1
        if end == length:
            break
        start = max(end - chunk_overlap, 0)

    logger.debug(f"{CHUNKING} {source_label}: {length} chars -> {len(chunks)} chunks")
    return chunks


@dataclass(frozen=True)
class OverlapChunker:
    """
    Character-based chunker with configurable overlap.

    Parameters are validated at construction, so a chunker that exists can
    always terminate.

    Example:
        >>> chunker = OverlapChunker(chunk_size=1000, chunk_overlap=200)
        >>> chunker.chunker_id
        'overlap:1000:200'
        >>> chunks = chunker.chunk("...", "notes/kinematics.mdx")
    """

    plugin_name: str = field(default="overlap", repr=False)
    chunk_size: int = 1200
    chunk_overlap: int = 200

    def __post_init__(self) -> None:
        """Validate parameters."""
        _validate(self.chunk_size, self.chunk_overlap)

    @property
    def chunker_id(self) -> str:
        """
        Unique identifier for this chunker configuration.

        Format: "overlap:{chunk_size}:{chunk_overlap}"
        """
        return f"{self.plugin_name}:{self.chunk_size}:{self.chunk_overlap}"

    def chunk(self, text: str, source_label: str) -> List[Chunk]:
        return chunk_text(text, self.chunk_size, self.chunk_overlap, source_label)


__all__ = ["OverlapChunker", "chunk_text", "normalize_whitespace"]
