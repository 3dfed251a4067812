# syllabus_rag/ingestion/source/__init__.py
from .filesystem import DEFAULT_EXTENSIONS, FileSystemSource, SourceDocument

__all__ = ["DEFAULT_EXTENSIONS", "FileSystemSource", "SourceDocument"]
