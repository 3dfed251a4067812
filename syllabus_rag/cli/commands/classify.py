# syllabus_rag/cli/commands/classify.py
"""
Scope gate check.

Usage:
    syllabus-rag classify "what is resistance"
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from syllabus_rag.cli.context import load_config_or_exit
from syllabus_rag.cli.ui import ui
from syllabus_rag.scope.classifier import ScopeClassifier


def command(question: str, config_path: Optional[Path] = None, verbose: bool = False) -> None:
    config = load_config_or_exit(config_path, verbose)
    result = ScopeClassifier(config.scope).classify(question)

    if result.allowed:
        ui.success(f"In scope ({result.matched_term})")
        return

    ui.error(f"Rejected: {result.category.value}")
    ui.print(result.refusal or "")
    raise typer.Exit(2)
