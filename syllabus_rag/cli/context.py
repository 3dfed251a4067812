# syllabus_rag/cli/context.py
"""
CLI context - config loading shared by all commands.

Commands call load_config_or_exit(); config errors become a readable
message and exit code 1 instead of a traceback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from syllabus_rag.cli.ui import ui
from syllabus_rag.config.loader import load_config
from syllabus_rag.config.schema import SyllabusRagConfig
from syllabus_rag.core.exceptions import ConfigError
from syllabus_rag.logging.logger import configure_logging, get_logger

logger = get_logger(__name__)


def load_config_or_exit(config_path: Optional[Path], verbose: bool = False) -> SyllabusRagConfig:
    """Load config, configure logging, exit(1) on config errors."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        ui.error(f"Failed to load config: {e}")
        raise typer.Exit(1)

    configure_logging("DEBUG" if verbose else config.logging.level)
    return config


__all__ = ["load_config_or_exit"]
