# syllabus_rag/ingestion/__init__.py
"""
Ingestion: turning a notes folder into an in-memory Corpus of chunks.

source -> strip markup -> chunk -> Corpus
"""

from .chunking import OverlapChunker, chunk_text
from .corpus import Corpus, build_corpus, load_corpus
from .parser import strip_mdx
from .source import FileSystemSource, SourceDocument

__all__ = [
    "Corpus",
    "build_corpus",
    "load_corpus",
    "OverlapChunker",
    "chunk_text",
    "strip_mdx",
    "FileSystemSource",
    "SourceDocument",
]
