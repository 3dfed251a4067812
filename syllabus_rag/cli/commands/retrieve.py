# syllabus_rag/cli/commands/retrieve.py
"""
Show which notes the keyword retriever picks for a question.

Usage:
    syllabus-rag retrieve "capacitance formula" --content ./content/physics -k 3
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from syllabus_rag.cli.context import load_config_or_exit
from syllabus_rag.cli.ui import ui
from syllabus_rag.core.exceptions import DocumentSourceError
from syllabus_rag.ingestion.corpus import load_corpus
from syllabus_rag.retrieval.keyword.retriever import KeywordRetriever


def command(
    question: str,
    content: Optional[Path] = None,
    top_k: Optional[int] = None,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    config = load_config_or_exit(config_path, verbose)

    try:
        corpus = load_corpus(config, root=content)
    except DocumentSourceError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    retriever = KeywordRetriever.from_config(config.retrieval)
    results = retriever.retrieve_scored(question, corpus.chunks, top_k)

    if not results:
        ui.warning("No matching notes", f"{len(corpus)} chunks searched")
        return

    ui.scored_table(results)
