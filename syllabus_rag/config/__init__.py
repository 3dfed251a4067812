# syllabus_rag/config/__init__.py
"""
Configuration: package defaults + optional user YAML, validated by pydantic.
"""

from .loader import deep_merge, load_config, load_config_dict
from .schema import (
    ChatConfig,
    ChunkingConfig,
    ContentConfig,
    GenerationConfig,
    LoggingConfig,
    RetrievalConfig,
    SyllabusRagConfig,
)

__all__ = [
    "ChatConfig",
    "ChunkingConfig",
    "ContentConfig",
    "GenerationConfig",
    "LoggingConfig",
    "RetrievalConfig",
    "SyllabusRagConfig",
    "deep_merge",
    "load_config",
    "load_config_dict",
]
