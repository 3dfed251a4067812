# syllabus_rag/retrieval/__init__.py
"""
Retrieval over the in-memory corpus.

Only lexical (keyword) retrieval is provided; there is no embedding index.
"""

from .keyword import KeywordRetriever, ScoredChunk, retrieve

__all__ = ["KeywordRetriever", "ScoredChunk", "retrieve"]
