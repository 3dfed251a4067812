# syllabus_rag/core/chunk.py
"""
Chunk - Core data model for syllabus_rag.

A chunk is a contiguous, whitespace-normalized slice of one source document.
Chunks are created in bulk when the corpus is built and are never mutated
afterwards, so the model is frozen.

This module provides:
- Chunk: The canonical Pydantic model
- ChunkLike: Protocol for duck-typed chunk handling
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

CHUNK_ID_SEPARATOR = "::"


@runtime_checkable
class ChunkLike(Protocol):
    """
    Protocol for chunk-like objects.

    Anything with a source and a text can be scored by the retriever
    or rendered into a prompt.
    """

    @property
    def id(self) -> str: ...

    @property
    def source(self) -> str: ...

    @property
    def text(self) -> str: ...


def make_chunk_id(source: str, chunk_index: int) -> str:
    """Build the stable chunk id: source label followed by the sequence counter."""
    return f"{source}{CHUNK_ID_SEPARATOR}{chunk_index}"


class Chunk(BaseModel):
    """
    Canonical chunk model.

    - id: "<source>::<chunk_index>", unique within a source
    - source: originating document identifier (relative path or logical name)
    - text: normalized substring of the document
    - chunk_index: zero-based position within the source
    """

    id: str = Field(..., description="Chunk ID")
    source: str = Field(..., description="Source document identifier")
    text: str = Field(..., description="Normalized chunk text")
    chunk_index: int = Field(..., ge=0, description="Index of this chunk within its source")

    model_config = ConfigDict(frozen=True)


__all__ = ["Chunk", "ChunkLike", "CHUNK_ID_SEPARATOR", "make_chunk_id"]
