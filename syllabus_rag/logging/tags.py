# syllabus_rag/logging/tags.py
"""
Logging subsystem tags.

Prefixed into log messages so output stays searchable per subsystem.
"""

INGEST = "[INGEST]"
CHUNKING = "[CHUNKING]"
RETRIEVER = "[RETRIEVER]"
SCOPE = "[SCOPE]"
PIPELINE = "[PIPELINE]"
PROMPT = "[PROMPT]"
CHAT = "[CHAT]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
