# syllabus_rag/config/schema.py
"""
Configuration schema for syllabus_rag.

This is the SINGLE source of truth for configuration.

Schema hierarchy:
- SyllabusRagConfig: The main config
- ContentConfig: Where the notes live
- ChunkingConfig: Window size / overlap
- RetrievalConfig: Keyword retriever settings
- ScopeRules: Scope gate data (see syllabus_rag.scope.rules)
- ChatConfig: Chat model settings
- GenerationConfig: Answer assembly settings
- LoggingConfig: Logging settings
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from syllabus_rag.scope.rules import ScopeRules


class ContentConfig(BaseModel):
    """Location of the notes corpus."""

    root: str = Field(default="content/physics", description="Notes folder (file or directory)")
    extensions: list[str] = Field(
        default_factory=lambda: [".md", ".mdx"],
        description="File extensions to ingest",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("extensions", mode="before")
    @classmethod
    def normalize_extensions(cls, v):
        """Ensure all extensions start with a dot and are lowercase."""
        if not isinstance(v, list):
            return v
        return [e.lower() if e.startswith(".") else f".{e.lower()}" for e in v]


class ChunkingConfig(BaseModel):
    """
    Overlapping window chunker settings.

    Example YAML:
        chunking:
          chunk_size: 1200
          chunk_overlap: 200
    """

    chunk_size: int = Field(default=1200, ge=1, description="Window length in characters")
    chunk_overlap: int = Field(default=200, ge=0, description="Characters shared by neighbours")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def overlap_below_size(self) -> "ChunkingConfig":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be < chunk_size ({self.chunk_size})"
            )
        return self


class RetrievalConfig(BaseModel):
    """Keyword retriever settings."""

    top_k: int = Field(default=6, ge=1, description="Max chunks handed to generation")
    phrase_bonus: float = Field(default=8.0, ge=0.0, description="Bonus for a verbatim query hit")
    phrase_min_chars: int = Field(
        default=12, ge=1, description="Shortest normalized query eligible for the phrase bonus"
    )
    extra_stopwords: list[str] = Field(
        default_factory=list, description="Added to the built-in stopword set"
    )

    model_config = ConfigDict(extra="forbid")


class ChatConfig(BaseModel):
    """
    Chat model used for the final answer.

    Any OpenAI-compatible /chat/completions endpoint works; point base_url
    at a local server to stay offline.
    """

    provider: str = Field(default="openai", description="Credential provider name")
    model: str = Field(default="gpt-4o-mini")
    base_url: str = Field(default="https://api.openai.com/v1")
    temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    timeout: float = Field(default=120.0, gt=0)
    api_key: Optional[str] = Field(default=None, description="Overrides environment lookup")

    model_config = ConfigDict(extra="forbid")


class GenerationConfig(BaseModel):
    """How retrieved notes become an answer."""

    subject: str = Field(default="Singapore H2 Physics", description="Named in the system prompt")
    skip_on_empty_context: bool = Field(
        default=False,
        description="Return insufficient_notes_message instead of calling the model with no notes",
    )
    insufficient_notes_message: str = Field(
        default="Your site notes don't cover this yet.",
    )

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="WARNING")

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown logging level: {v}")
        return level


class SyllabusRagConfig(BaseModel):
    """
    Complete syllabus_rag configuration.

    scope is None when the package default scope rules apply.
    """

    content: ContentConfig = Field(default_factory=ContentConfig)
    chunking: ChunkingConfig = Field(default_factory=ChunkingConfig)
    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)
    scope: Optional[ScopeRules] = None
    chat: ChatConfig = Field(default_factory=ChatConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "ChatConfig",
    "ChunkingConfig",
    "ContentConfig",
    "GenerationConfig",
    "LoggingConfig",
    "RetrievalConfig",
    "SyllabusRagConfig",
]
