# syllabus_rag/scope/classifier.py
"""
Scope classifier.

Gates a question into one of four categories, first match wins:
- OUT_OF_DOMAIN: mentions a clearly non-subject topic ("leetcode", "sql")
- ABOVE_LEVEL: mentions a university-level marker ("lagrangian")
- IN_SCOPE: mentions a syllabus keyword, or hits the topical regex fallback
- UNRECOGNIZED: none of the above; ask the student to rephrase

Matching is plain substring containment on the lower-cased question, so
"ac" also matches inside "reaction" and paraphrases outside the lists are
missed. Word-boundary matching would change which questions pass the gate,
so the heuristic is kept as is.

Usage:
    classifier = ScopeClassifier()
    result = classifier.classify("what is resistance")
    if not result.allowed:
        print(result.refusal)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import SCOPE
from syllabus_rag.scope.rules import ScopeRules, load_default_rules

logger = get_logger(__name__)


class ScopeCategory(str, Enum):
    """Outcome of the scope gate."""

    IN_SCOPE = "in_scope"
    OUT_OF_DOMAIN = "out_of_domain"
    ABOVE_LEVEL = "above_level"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ClassificationResult:
    """
    Result of evaluating a question against the scope rules.

    Attributes:
        allowed: True only for IN_SCOPE
        refusal: Explanation shown to the student; set iff allowed is False
        category: Which rule decided
        matched_term: The list term (or fallback pattern) that matched, if any
    """

    allowed: bool
    category: ScopeCategory
    refusal: Optional[str] = None
    matched_term: Optional[str] = None

    def __post_init__(self) -> None:
        if self.allowed and self.refusal is not None:
            raise ValueError("an allowed result cannot carry a refusal")
        if not self.allowed and not self.refusal:
            raise ValueError("a rejected result needs a refusal message")

    @classmethod
    def allow(cls, matched_term: Optional[str] = None) -> "ClassificationResult":
        return cls(allowed=True, category=ScopeCategory.IN_SCOPE, matched_term=matched_term)

    @classmethod
    def reject(
        cls,
        category: ScopeCategory,
        refusal: str,
        matched_term: Optional[str] = None,
    ) -> "ClassificationResult":
        return cls(allowed=False, category=category, refusal=refusal, matched_term=matched_term)


def _first_contained(text: str, terms: Iterable[str]) -> Optional[str]:
    for term in terms:
        if term in text:
            return term
    return None


class ScopeClassifier:
    """
    Priority-ordered scope gate over a ScopeRules value.

    Stateless between calls; one instance can be shared across requests.
    """

    def __init__(self, rules: ScopeRules | None = None) -> None:
        self.rules = rules if rules is not None else load_default_rules()
        self._fallback = (
            re.compile(self.rules.fallback_pattern) if self.rules.fallback_pattern else None
        )

    def classify(self, query: str | None) -> ClassificationResult:
        """
        Classify a question. Total over all inputs: never raises.

        Args:
            query: The student's question (None is treated as empty)

        Returns:
            ClassificationResult
        """
        s = (query or "").lower()
        rules = self.rules

        term = _first_contained(s, rules.out_of_domain)
        if term is not None:
            return self._log(
                ClassificationResult.reject(
                    ScopeCategory.OUT_OF_DOMAIN, rules.refusals.out_of_domain, term
                )
            )

        term = _first_contained(s, rules.above_level)
        if term is not None:
            return self._log(
                ClassificationResult.reject(
                    ScopeCategory.ABOVE_LEVEL, rules.refusals.above_level, term
                )
            )

        term = _first_contained(s, rules.in_scope)
        if term is not None:
            return self._log(ClassificationResult.allow(term))

        if self._fallback is not None:
            match = self._fallback.search(s)
            if match:
                return self._log(ClassificationResult.allow(match.group(0)))

        return self._log(
            ClassificationResult.reject(ScopeCategory.UNRECOGNIZED, rules.refusals.unrecognized)
        )

    @staticmethod
    def _log(result: ClassificationResult) -> ClassificationResult:
        logger.debug(
            f"{SCOPE} category={result.category.value} matched={result.matched_term!r}"
        )
        return result


def classify(query: str | None) -> ClassificationResult:
    """Classify against the package default scope rules."""
    return ScopeClassifier().classify(query)


__all__ = ["ClassificationResult", "ScopeCategory", "ScopeClassifier", "classify"]
