"""Command-line interface for sani."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from pydantic import ValidationError

from sani import __version__
from sani.config import get_settings
from sani.core.document import ParagraphMode
from sani.core.pipeline import RenderError, RenderPipeline

# sysexits.h EX_UNAVAILABLE
EXIT_UNAVAILABLE = 69
# click usage errors exit with 2
EXIT_USAGE = 2

app = typer.Typer(
    name="sani",
    help="Render inline markdown emphasis as terminal text styles.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"sani v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def main(
    file: Path = typer.Argument(
        ...,
        help="The file to render",
    ),
    paragraphs: Optional[ParagraphMode] = typer.Option(
        None,
        "--paragraphs",
        "-p",
        case_sensitive=False,
        help="Paragraph splitting: blank-line (default) or document",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render a markdown-style file to the terminal.

    Supports **bold**, *italic*, ~~strikethrough~~ and backslash escapes.

    Examples:

        sani notes.md

        sani notes.md --paragraphs document
    """
    try:
        configure_logging(verbose)
        pipeline = RenderPipeline(mode=paragraphs)
    except ValidationError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(EXIT_USAGE)

    try:
        output = pipeline.render_file(file)
    except RenderError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        if verbose:
            err_console.print(f"[dim]{escape(str(e.__cause__))}[/dim]", highlight=False)
        raise typer.Exit(EXIT_UNAVAILABLE)

    # color=True keeps the style codes when stdout is not a terminal
    typer.echo(output, color=True)


if __name__ == "__main__":
    app()
