# syllabus_rag/ingestion/chunking/base.py
"""
Base protocol for chunking plugins.

A chunker plugin provides:
- plugin_name: str - The plugin identifier (e.g., "overlap")
- chunker_id: str - Unique ID including params that affect output (e.g., "overlap:1200:200")
- chunk(text, source_label) -> List[Chunk]
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from syllabus_rag.core.chunk import Chunk


@runtime_checkable
class ChunkerPlugin(Protocol):
    """
    Protocol for chunker plugins.

    Contract:
    - Deterministic: same text and source_label always yield the same chunks
    - Side-effect free
    - Chunk ids are "<source_label>::<index>" in emission order

    Example:
        >>> chunker = OverlapChunker(chunk_size=1000, chunk_overlap=100)
        >>> chunker.chunker_id
        'overlap:1000:100'
    """

    plugin_name: str

    @property
    def chunker_id(self) -> str:
        """
        Plugin name plus every parameter that changes the emitted windows.

        Two chunkers with the same id produce identical chunks.
        """
        ...

    def chunk(self, text: str, source_label: str) -> List[Chunk]:
        """
        Cut one document into ordered chunks.

        Args:
            text: Raw document text (markup already stripped).
            source_label: Identifier of the originating document.

        Returns:
            Ordered list of Chunk objects.
        """
        ...


__all__ = ["ChunkerPlugin"]
