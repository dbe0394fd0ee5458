"""Command-line interface for Markdown Toggle."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from markdown_toggle import __version__
from markdown_toggle.core.converter import ConversionError, DocumentConverter
from markdown_toggle.formatting.ir import runs_to_ranges, style_names

app = typer.Typer(
    name="markdown-toggle",
    help="Convert between markdown syntax and styled text runs.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Markdown Toggle v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send library debug logging to the console when verbose."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.callback()
def main(
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
    Convert between markdown syntax and styled text runs.

    Examples:

        markdown-toggle convert notes.md  # Writes notes.json

        markdown-toggle convert runs.json -o notes.md

        markdown-toggle inspect notes.md
    """
    setup_logging(verbose)


@app.command()
def convert(
    path: Path = typer.Argument(
        ...,
        help="File to convert (.md, .markdown or .json)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (format chosen by extension)",
    ),
) -> None:
    """Convert markdown to styled runs (JSON) or back."""
    if output is None:
        target = ".json" if path.suffix.lower() != ".json" else ".md"
        output = path.with_suffix(target)

    try:
        runs = DocumentConverter().convert_file(path, output)
    except ConversionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]Success:[/green] {output} ({len(runs)} runs)")


@app.command()
def inspect(
    path: Path = typer.Argument(
        ...,
        help="File to inspect (.md, .markdown or .json)",
    ),
) -> None:
    """Show the styled ranges of a file."""
    try:
        runs = DocumentConverter().read(path)
    except ConversionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=path.name)
    table.add_column("Start", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Style")
    table.add_column("Text")

    for run, styled_range in zip(runs, runs_to_ranges(runs)):
        table.add_row(
            str(styled_range.start),
            str(styled_range.length),
            "+".join(style_names(run.style)) or "none",
            escape(repr(run.text)),
        )

    console.print(table)


if __name__ == "__main__":
    app()
