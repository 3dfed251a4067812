# syllabus_rag/core/__init__.py
"""
Core contracts shared by every layer: the Chunk model and the error hierarchy.
"""

from .chunk import Chunk, ChunkLike, make_chunk_id
from .exceptions import (
    ChatError,
    ChatResponseError,
    ChunkingConfigError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    CredentialError,
    DocumentSourceError,
    GenerationError,
    SyllabusRagError,
)

__all__ = [
    "Chunk",
    "ChunkLike",
    "make_chunk_id",
    "SyllabusRagError",
    "ConfigError",
    "ChunkingConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "DocumentSourceError",
    "GenerationError",
    "CredentialError",
    "ChatError",
    "ChatResponseError",
]
