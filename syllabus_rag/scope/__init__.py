# syllabus_rag/scope/__init__.py
"""
Scope gate: decides whether a question is answerable within the configured
subject and level before any retrieval or generation happens.
"""

from .classifier import ClassificationResult, ScopeCategory, ScopeClassifier, classify
from .rules import RefusalMessages, ScopeRules, load_default_rules, load_rules

__all__ = [
    "ClassificationResult",
    "RefusalMessages",
    "ScopeCategory",
    "ScopeClassifier",
    "ScopeRules",
    "classify",
    "load_default_rules",
    "load_rules",
]
