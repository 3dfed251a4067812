# syllabus_rag/cli/commands/chunk.py
"""
Chunk a single notes file and show the windows.

Usage:
    syllabus-rag chunk notes/kinematics.mdx --size 800 --overlap 100
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from syllabus_rag.cli.context import load_config_or_exit
from syllabus_rag.cli.ui import ui
from syllabus_rag.core.exceptions import ChunkingConfigError
from syllabus_rag.ingestion.chunking.plugins.overlap import OverlapChunker
from syllabus_rag.ingestion.parser.mdx import strip_mdx


def command(
    path: Path,
    size: Optional[int] = None,
    overlap: Optional[int] = None,
    raw: bool = False,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    config = load_config_or_exit(config_path, verbose)

    if not path.is_file():
        ui.error(f"Not a file: {path}")
        raise typer.Exit(1)

    try:
        chunker = OverlapChunker(
            chunk_size=size if size is not None else config.chunking.chunk_size,
            chunk_overlap=overlap if overlap is not None else config.chunking.chunk_overlap,
        )
    except ChunkingConfigError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    text = path.read_text(encoding="utf-8")
    if not raw:
        text = strip_mdx(text)

    chunks = chunker.chunk(text, path.name)
    ui.chunk_table(chunks, title=f"{path.name} ({chunker.chunker_id})")
    ui.info(f"{len(chunks)} chunks")
