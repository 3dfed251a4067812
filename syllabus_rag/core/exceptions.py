# syllabus_rag/core/exceptions.py
"""
All exceptions for syllabus_rag.

Hierarchy:
    SyllabusRagError
    ├── ConfigError (also ValueError)
    │   ├── ChunkingConfigError - Invalid chunk_size / chunk_overlap
    │   ├── ConfigNotFoundError - Config file missing
    │   ├── ConfigParseError - Config file is not valid YAML
    │   └── ConfigValidationError - Config does not match the schema
    ├── DocumentSourceError - Corpus could not be read
    └── GenerationError - Answer generation failures
        ├── CredentialError - No API key could be resolved
        └── ChatError - Chat API call failed
            └── ChatResponseError - Chat API returned an unusable payload

The retrieval and scope layers never raise: an empty result or a refusal
is a normal outcome there.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SyllabusRagError(Exception):
    """Base class for every error raised by syllabus_rag."""

    pass


# =============================================================================
# Config Errors
# =============================================================================


class ConfigError(SyllabusRagError, ValueError):
    """Configuration error."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


class ChunkingConfigError(ConfigError):
    """chunk_size / chunk_overlap combination cannot produce a terminating window walk."""

    pass


class ConfigNotFoundError(ConfigError):
    """Config file does not exist."""

    pass


class ConfigParseError(ConfigError):
    """Config file could not be parsed."""

    pass


class ConfigValidationError(ConfigError):
    """Config file parsed but failed schema validation."""

    pass


# =============================================================================
# Source Errors
# =============================================================================


class DocumentSourceError(SyllabusRagError):
    """The document source is unavailable or unreadable."""

    pass


# =============================================================================
# Generation Errors
# =============================================================================


class GenerationError(SyllabusRagError):
    """Answer generation failed."""

    pass


class CredentialError(GenerationError):
    """Raised when credentials cannot be resolved."""

    pass


class ChatError(GenerationError):
    """Chat API call failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)


class ChatResponseError(ChatError):
    """Chat API returned invalid or unparseable response."""

    pass


__all__ = [
    "SyllabusRagError",
    # Config
    "ConfigError",
    "ChunkingConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    # Source
    "DocumentSourceError",
    # Generation
    "GenerationError",
    "CredentialError",
    "ChatError",
    "ChatResponseError",
]
