# syllabus_rag/cli/commands/ask.py
"""
Ask the tutor a question.

Usage:
    syllabus-rag ask "state Kirchhoff's current law"
    syllabus-rag ask "what is capacitance" --content ./notes -k 4
    syllabus-rag ask "what is capacitance" --no-generate   # print the prompt only
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from syllabus_rag.cli.context import load_config_or_exit
from syllabus_rag.cli.ui import ui
from syllabus_rag.core.exceptions import DocumentSourceError, GenerationError
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import CLI
from syllabus_rag.pipeline.engine import TutorPipeline

logger = get_logger(__name__)


def command(
    question: str,
    content: Optional[Path] = None,
    top_k: Optional[int] = None,
    generate: bool = True,
    show_sources: bool = True,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    config = load_config_or_exit(config_path, verbose)
    if top_k is not None:
        config.retrieval.top_k = top_k

    try:
        pipeline = TutorPipeline.from_config(config, content_root=content, with_chat=generate)
    except DocumentSourceError as e:
        ui.error(str(e))
        raise typer.Exit(1)
    except GenerationError as e:
        ui.error(str(e))
        ui.info("Use --no-generate to inspect the prompt without a model.")
        raise typer.Exit(1)

    if not generate:
        early, chunks, messages = pipeline.prepare(question)
        if early is not None:
            ui.panel(early.text, title=early.category.value, style="yellow")
            raise typer.Exit(0 if early.allowed else 2)
        for message in messages:
            ui.panel(message["content"], title=message["role"])
        return

    try:
        answer = pipeline.answer(question)
    except GenerationError as e:
        logger.debug(f"{CLI} generation failed", exc_info=True)
        ui.error(f"Generation failed: {e}")
        raise typer.Exit(1)

    if not answer.allowed:
        ui.panel(answer.text, title="Out of scope", style="yellow")
        raise typer.Exit(2)

    ui.markdown(answer.text)
    if show_sources and answer.sources:
        ui.section("Sources")
        for chunk in answer.sources:
            ui.info(chunk.id)
