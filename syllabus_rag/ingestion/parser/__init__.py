# syllabus_rag/ingestion/parser/__init__.py
from .mdx import strip_mdx

__all__ = ["strip_mdx"]
