# syllabus_rag/retrieval/keyword/__init__.py
from .retriever import (
    DEFAULT_STOPWORDS,
    DEFAULT_TOP_K,
    KeywordRetriever,
    ScoredChunk,
    count_occurrences,
    normalize,
    retrieve,
    token_weight,
    tokenize,
)

__all__ = [
    "DEFAULT_STOPWORDS",
    "DEFAULT_TOP_K",
    "KeywordRetriever",
    "ScoredChunk",
    "count_occurrences",
    "normalize",
    "retrieve",
    "token_weight",
    "tokenize",
]
