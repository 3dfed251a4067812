# syllabus_rag/ingestion/chunking/__init__.py
"""Chunking plugins."""

from .base import ChunkerPlugin
from .plugins.overlap import OverlapChunker, chunk_text, normalize_whitespace

__all__ = ["ChunkerPlugin", "OverlapChunker", "chunk_text", "normalize_whitespace"]
