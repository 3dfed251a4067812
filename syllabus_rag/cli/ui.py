# syllabus_rag/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from syllabus_rag.cli.ui import ui

    ui.section("Retrieve")
    ui.success("Done!")
    ui.scored_table(results)
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from syllabus_rag.core.chunk import Chunk
from syllabus_rag.retrieval.keyword.retriever import ScoredChunk

# Chunk ids and file names are data; ":100:" must not become an emoji.
console = Console(emoji=False)

PREVIEW_CHARS = 160


def _preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


class UI:
    """Rich-styled output helpers shared by every command."""

    def print(self, msg: str, style: str = "") -> None:
        if style:
            console.print(f"[{style}]{msg}[/{style}]")
        else:
            console.print(msg)

    def section(self, title: str) -> None:
        console.print(f"\n[bold cyan]{title}[/bold cyan]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {msg}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {msg}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({detail})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {msg}{detail_str}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{msg}[/dim]")

    def panel(self, content: str, title: str = "", style: str = "blue") -> None:
        """Boxed plain text; brackets in notes are not read as markup."""
        console.print(Panel(Text(content), title=title, border_style=style))

    def markdown(self, content: str) -> None:
        console.print(Markdown(content))

    def chunk_table(self, chunks: Sequence[Chunk], title: str = "Chunks") -> None:
        """Chunk ids, lengths and a text preview."""
        table = Table(title=Text(title), show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("id", style="cyan", no_wrap=True)
        table.add_column("chars", justify="right")
        table.add_column("text")

        for i, chunk in enumerate(chunks, 1):
            table.add_row(
                str(i), Text(chunk.id), str(len(chunk.text)), Text(_preview(chunk.text))
            )

        console.print(table)

    def scored_table(self, results: Sequence[ScoredChunk], title: str = "Top chunks") -> None:
        """Ranked chunks with their keyword scores."""
        table = Table(title=Text(title), show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("score", justify="right", style="green")
        table.add_column("source", style="cyan", no_wrap=True)
        table.add_column("text")

        for i, result in enumerate(results, 1):
            table.add_row(
                str(i),
                f"{result.score:.1f}",
                Text(result.chunk.id),
                Text(_preview(result.chunk.text)),
            )

        console.print(table)


ui = UI()

__all__ = ["UI", "console", "ui"]
