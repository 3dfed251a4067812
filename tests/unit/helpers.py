# tests/unit/helpers.py
"""Small builders shared by unit tests."""

from __future__ import annotations

from typing import Any, Dict, List

from syllabus_rag.core.chunk import Chunk, make_chunk_id


def make_chunk(source: str, text: str, index: int = 0) -> Chunk:
    """Chunk that bypasses the chunker (text used as-is)."""
    return Chunk(id=make_chunk_id(source, index), source=source, text=text, chunk_index=index)


class RecordingChat:
    """Chat client double: returns a fixed reply and keeps every message list."""

    def __init__(self, reply: str = "1. Concept / Definition\nC = Q / V") -> None:
        self.reply = reply
        self.calls: List[List[Dict[str, Any]]] = []

    def chat(self, messages):
        self.calls.append(messages)
        return self.reply


class FailingChat:
    """Chat client double that always raises."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    def chat(self, messages):
        raise self.error
