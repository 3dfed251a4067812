# syllabus_rag/cli/cli.py
"""
syllabus-rag CLI - Main application.

Commands:
    syllabus-rag ask        Answer a question from the notes
    syllabus-rag classify   Check whether a question is in scope
    syllabus-rag retrieve   Show the notes chosen for a question
    syllabus-rag chunk      Show how one notes file is chunked

Exit codes: 0 ok, 1 error, 2 question out of scope.

NOTE: Commands use lazy loading - a command's module is imported only when
it is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="syllabus-rag",
    help="Syllabus-scoped tutor grounded in your notes.",
    no_args_is_help=True,
    add_completion=False,
)

CONFIG_OPTION = typer.Option(None, "--config", help="User config YAML (merged over defaults).")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Debug logging.")
CONTENT_OPTION = typer.Option(None, "--content", help="Notes folder (overrides content.root).")
TOP_K_OPTION = typer.Option(None, "--top-k", "-k", min=1, help="Number of chunks to retrieve.")


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("ask")
def ask(
    question: str = typer.Argument(..., help="Question to ask."),
    content: Optional[Path] = CONTENT_OPTION,
    top_k: Optional[int] = TOP_K_OPTION,
    generate: bool = typer.Option(
        True, "--generate/--no-generate", help="Call the chat model, or only print the prompt."
    ),
    show_sources: bool = typer.Option(True, "--sources/--no-sources", help="List source chunks."),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Answer a question from the notes."""
    from syllabus_rag.cli.commands import ask as mod

    mod.command(
        question=question,
        content=content,
        top_k=top_k,
        generate=generate,
        show_sources=show_sources,
        config_path=config,
        verbose=verbose,
    )


@app.command("classify")
def classify(
    question: str = typer.Argument(..., help="Question to check."),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Check whether a question is in scope."""
    from syllabus_rag.cli.commands import classify as mod

    mod.command(question=question, config_path=config, verbose=verbose)


@app.command("retrieve")
def retrieve(
    question: str = typer.Argument(..., help="Question to retrieve notes for."),
    content: Optional[Path] = CONTENT_OPTION,
    top_k: Optional[int] = TOP_K_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the notes chosen for a question, with scores."""
    from syllabus_rag.cli.commands import retrieve as mod

    mod.command(
        question=question, content=content, top_k=top_k, config_path=config, verbose=verbose
    )


@app.command("chunk")
def chunk(
    path: Path = typer.Argument(..., help="Notes file to chunk."),
    size: Optional[int] = typer.Option(None, "--size", help="Chunk size in characters."),
    overlap: Optional[int] = typer.Option(None, "--overlap", help="Chunk overlap in characters."),
    raw: bool = typer.Option(False, "--raw", help="Skip MDX markup stripping."),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show how one notes file is chunked."""
    from syllabus_rag.cli.commands import chunk as mod

    mod.command(
        path=path, size=size, overlap=overlap, raw=raw, config_path=config, verbose=verbose
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
