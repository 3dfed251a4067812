# syllabus_rag/retrieval/keyword/retriever.py
"""
Keyword retriever - lexical ranking of chunks against a question.

Each chunk is scored by:
    (1) how many query keywords appear in it
    (2) how often they appear, weighted by keyword length
    (3) a flat bonus when the whole query appears verbatim

There is no index: every call scans every chunk. At notes-folder scale
(hundreds of chunks) this is fast enough and trivially debuggable.

Usage:
    retriever = KeywordRetriever()
    top = retriever.retrieve("capacitance formula", corpus.chunks, top_k=3)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, Iterable, List, Sequence

from syllabus_rag.core.chunk import Chunk
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import RETRIEVER

if TYPE_CHECKING:
    from syllabus_rag.config.schema import RetrievalConfig

logger = get_logger(__name__)

DEFAULT_TOP_K = 6
DEFAULT_PHRASE_BONUS = 8.0
DEFAULT_PHRASE_MIN_CHARS = 12
MIN_TOKEN_CHARS = 2

# Alphanumerics and whitespace survive, plus notation used in physics notes:
# decimal points, signs, ratios/units, percentages and degrees.
_DISALLOWED_RE = re.compile(r"[^a-z0-9\s.+\-/%°]")
_WHITESPACE_RE = re.compile(r"\s+")

# fmt: off
DEFAULT_STOPWORDS: FrozenSet[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "to", "of", "in", "on", "for", "with",
        "is", "are", "was", "were", "be", "been", "being",
        "this", "that", "these", "those", "it", "as", "by", "from", "at",
        "into", "over", "under", "between",
        "when", "what", "why", "how",
        # instructional verbs say nothing about the topic
        "explain", "define", "find", "calculate", "show",
    }
)
# fmt: on

# (min_length, weight), longest first
TOKEN_WEIGHT_TIERS = ((10, 2.2), (7, 1.6))
BASE_TOKEN_WEIGHT = 1.0


# =============================================================================
# Text helpers
# =============================================================================


def normalize(text: str) -> str:
    """Lower-case, replace unsupported symbols by spaces, collapse whitespace."""
    lowered = text.lower()
    kept = _DISALLOWED_RE.sub(" ", lowered)
    return _WHITESPACE_RE.sub(" ", kept).strip()


def tokenize(normalized_query: str, stopwords: Iterable[str] = DEFAULT_STOPWORDS) -> List[str]:
    """Split on whitespace, drop short tokens and stopwords. Order and duplicates are kept."""
    stop = stopwords if isinstance(stopwords, (set, frozenset)) else frozenset(stopwords)
    return [
        token
        for token in normalized_query.split(" ")
        if len(token) >= MIN_TOKEN_CHARS and token not in stop
    ]


def count_occurrences(haystack: str, needle: str) -> int:
    """Count non-overlapping literal occurrences; the query is never compiled as a regex."""
    if not needle:
        return 0

    count = 0
    idx = haystack.find(needle)
    while idx != -1:
        count += 1
        idx = haystack.find(needle, idx + len(needle))
    return count


def token_weight(token: str) -> float:
    """Longer tokens are rarer and more specific: 'capacitance' outweighs 'field'."""
    length = len(token)
    for min_length, weight in TOKEN_WEIGHT_TIERS:
        if length >= min_length:
            return weight
    return BASE_TOKEN_WEIGHT


# =============================================================================
# Retriever
# =============================================================================


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk with its relevance score for one retrieval call."""

    chunk: Chunk
    score: float


@dataclass(frozen=True)
class KeywordRetriever:
    """
    Lexical top-K retriever.

    Read-only over the chunks it is given and holds no per-call state, so a
    single instance can serve concurrent requests.
    """

    stopwords: FrozenSet[str] = field(default=DEFAULT_STOPWORDS)
    phrase_bonus: float = DEFAULT_PHRASE_BONUS
    phrase_min_chars: int = DEFAULT_PHRASE_MIN_CHARS
    default_top_k: int = DEFAULT_TOP_K

    @classmethod
    def with_extra_stopwords(cls, extra: Iterable[str], **kwargs) -> "KeywordRetriever":
        """Default stopwords plus extra ones (normalized the same way as queries)."""
        words = {normalize(w) for w in extra if normalize(w)}
        return cls(stopwords=DEFAULT_STOPWORDS | frozenset(words), **kwargs)

    @classmethod
    def from_config(cls, config: "RetrievalConfig") -> "KeywordRetriever":
        return cls.with_extra_stopwords(
            config.extra_stopwords,
            phrase_bonus=config.phrase_bonus,
            phrase_min_chars=config.phrase_min_chars,
            default_top_k=config.top_k,
        )

    def score(self, normalized_query: str, tokens: Sequence[str], chunk_text: str) -> float:
        """Score one chunk's text. Both query and text must already be normalized."""
        total = 0.0
        for token in tokens:
            total += count_occurrences(chunk_text, token) * token_weight(token)

        if len(normalized_query) >= self.phrase_min_chars and normalized_query in chunk_text:
            total += self.phrase_bonus

        return total

    def retrieve_scored(
        self,
        query: str,
        chunks: Iterable[Chunk],
        top_k: int | None = None,
    ) -> List[ScoredChunk]:
        """
        Rank chunks and keep their scores.

        Returns at most top_k entries with score > 0, best first. Ties keep
        the order of the input chunks.
        """
        k = self.default_top_k if top_k is None else top_k
        if k <= 0:
            return []

        q = normalize(query or "")
        tokens = tokenize(q, self.stopwords)
        if not tokens:
            logger.debug(f"{RETRIEVER} No usable tokens in query {query!r}")
            return []

        scored = [
            ScoredChunk(chunk=c, score=self.score(q, tokens, normalize(c.text))) for c in chunks
        ]
        # sorted() is stable
        scored = sorted(scored, key=lambda s: s.score, reverse=True)
        results = [s for s in scored if s.score > 0][:k]

        logger.debug(
            f"{RETRIEVER} tokens={tokens} scanned={len(scored)} hits={len(results)} "
            f"top={results[0].score if results else 0:.1f}"
        )
        return results

    def retrieve(
        self,
        query: str,
        chunks: Iterable[Chunk],
        top_k: int | None = None,
    ) -> List[Chunk]:
        """Top-K chunks for query, most relevant first. Empty when nothing matches."""
        return [s.chunk for s in self.retrieve_scored(query, chunks, top_k)]


_DEFAULT_RETRIEVER = KeywordRetriever()


def retrieve(query: str, chunks: Iterable[Chunk], top_k: int = DEFAULT_TOP_K) -> List[Chunk]:
    """Rank chunks against query with the default stopwords and weights."""
    return _DEFAULT_RETRIEVER.retrieve(query, chunks, top_k)


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
