# syllabus_rag/logging/logger.py
"""
Unified logging setup for syllabus_rag.

All modules use:
    from syllabus_rag.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, at the CLI entrypoint (or by the embedding
application), through configure_logging().
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int | str = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times - a second call only changes the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Module logger; handlers and levels come from configure_logging()."""
    return logging.getLogger(name)
