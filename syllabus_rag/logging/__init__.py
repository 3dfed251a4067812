# syllabus_rag/logging/__init__.py
"""Logging helpers shared by every syllabus_rag module."""

from .logger import DEFAULT_FORMAT, configure_logging, get_logger

__all__ = ["DEFAULT_FORMAT", "configure_logging", "get_logger"]
