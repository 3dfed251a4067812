# syllabus_rag/__init__.py
"""
syllabus_rag - Syllabus-scoped tutor over a local notes folder.

Quick Start:
    >>> from syllabus_rag import classify, retrieve, build_corpus, OverlapChunker
    >>> classify("what is resistance").allowed
    True
    >>> corpus = build_corpus([("capacitors.md", text)], OverlapChunker())
    >>> retrieve("capacitance formula", corpus.chunks, top_k=3)

Public API:
    Chunking:
        - OverlapChunker / chunk_text: fixed-size overlapping windows
        - build_corpus / load_corpus: notes -> immutable Corpus

    Retrieval:
        - KeywordRetriever / retrieve: lexical top-K ranking

    Scope:
        - ScopeClassifier / classify: priority-ordered scope gate

    Pipeline:
        - TutorPipeline: scope gate -> retrieval -> prompt -> chat model

Architecture:
    syllabus_rag/
    ├── core/          # Chunk model, exceptions
    ├── ingestion/     # source, markup stripping, chunking, corpus
    ├── retrieval/     # keyword retriever
    ├── scope/         # scope rules + classifier
    ├── generation/    # prompts, credentials, chat client
    ├── pipeline/      # TutorPipeline
    ├── config/        # pydantic schema + YAML loader
    └── cli/           # typer app
"""

from __future__ import annotations

__version__ = "0.1.0"

from syllabus_rag.core import Chunk, SyllabusRagError
from syllabus_rag.ingestion import Corpus, OverlapChunker, build_corpus, chunk_text, load_corpus
from syllabus_rag.pipeline import TutorAnswer, TutorPipeline
from syllabus_rag.retrieval import KeywordRetriever, ScoredChunk, retrieve
from syllabus_rag.scope import ClassificationResult, ScopeCategory, ScopeClassifier, classify

__all__ = [
    "__version__",
    # Core
    "Chunk",
    "SyllabusRagError",
    # Ingestion
    "Corpus",
    "OverlapChunker",
    "build_corpus",
    "chunk_text",
    "load_corpus",
    # Retrieval
    "KeywordRetriever",
    "ScoredChunk",
    "retrieve",
    # Scope
    "ClassificationResult",
    "ScopeCategory",
    "ScopeClassifier",
    "classify",
    # Pipeline
    "TutorAnswer",
    "TutorPipeline",
]
