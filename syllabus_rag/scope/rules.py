# syllabus_rag/scope/rules.py
"""
Scope rules - the content half of the scope gate.

Which topics are in or out of the syllabus is a content decision, so the
term lists, the regex fallback and the refusal texts are data loaded from
YAML rather than literals in the classifier.

Package defaults: syllabus_rag/scope/default_scope.yaml
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from syllabus_rag.core.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import SCOPE

logger = get_logger(__name__)

DEFAULT_SCOPE_PATH = Path(__file__).parent / "default_scope.yaml"


class RefusalMessages(BaseModel):
    """One human-readable refusal per rejection reason."""

    out_of_domain: str = Field(..., min_length=1)
    above_level: str = Field(..., min_length=1)
    unrecognized: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


class ScopeRules(BaseModel):
    """
    Term lists for the three ordered categories plus the topical fallback.

    Terms are lower-cased on load, since matching runs against the
    lower-cased question.

    Example YAML:
        subject: Singapore H2 Physics
        out_of_domain: [leetcode, sql]
        above_level: [lagrangian]
        in_scope: [kinematics, capacitance]
        fallback_pattern: "force|energy|field"
        refusals:
          out_of_domain: "..."
          above_level: "..."
          unrecognized: "..."
    """

    subject: str = Field(default="Singapore H2 Physics")
    out_of_domain: tuple[str, ...] = Field(default=())
    above_level: tuple[str, ...] = Field(default=())
    in_scope: tuple[str, ...] = Field(default=())
    fallback_pattern: str | None = Field(
        default=None, description="Regex searched in the lower-cased question when no keyword hits"
    )
    refusals: RefusalMessages

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("out_of_domain", "above_level", "in_scope", mode="before")
    @classmethod
    def normalize_terms(cls, v: Any) -> Any:
        """Lower-case, strip and drop empty terms."""
        if v is None:
            return ()
        if not isinstance(v, (list, tuple)):
            return v
        return tuple(t.strip().lower() for t in v if isinstance(t, str) and t.strip())

    @field_validator("fallback_pattern")
    @classmethod
    def validate_pattern(cls, v: str | None) -> str | None:
        if not v:
            return None
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"fallback_pattern is not a valid regex: {e}") from e
        return v


def rules_from_dict(data: dict[str, Any], path: Path | None = None) -> ScopeRules:
    """Validate raw scope data, raising ConfigValidationError on bad input."""
    try:
        return ScopeRules.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid scope rules: {e}", path) from e


def load_rules(path: Union[str, Path]) -> ScopeRules:
    """
    Load scope rules from a YAML file.

    Raises:
        ConfigNotFoundError: File does not exist
        ConfigParseError: File is not valid YAML
        ConfigValidationError: Content does not match ScopeRules
    """
    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError("Scope rules file not found", path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML in scope rules: {e}", path) from e

    rules = rules_from_dict(data, path)
    logger.debug(
        f"{SCOPE} Loaded scope rules from {path}: "
        f"{len(rules.out_of_domain)} out-of-domain, {len(rules.above_level)} above-level, "
        f"{len(rules.in_scope)} in-scope terms"
    )
    return rules


@lru_cache(maxsize=1)
def load_default_rules() -> ScopeRules:
    """Package default rules. Cached: the model is frozen, so sharing is safe."""
    return load_rules(DEFAULT_SCOPE_PATH)


__all__ = [
    "DEFAULT_SCOPE_PATH",
    "RefusalMessages",
    "ScopeRules",
    "load_default_rules",
    "load_rules",
    "rules_from_dict",
]
