"""Command line interface for NoteServe."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from noteserve.config import AppConfig
from noteserve.index.indexer import Indexer
from noteserve.index.search import NotReady
from noteserve.index.storage import load_index
from noteserve.web.app import create_app


console = Console()
app = typer.Typer(help="NoteServe - browsable markdown note archive with search")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def render(
    notes_dir: Path = typer.Argument(
        ...,
        help="Directory containing markdown notes.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
    output: Path = typer.Option(AppConfig().output_dir, "--output", "-o", help="Output directory"),
    retries: int = typer.Option(AppConfig().render_retries, help="Render retries per note"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Render every note to HTML and write the summary index."""
    _setup_logging(verbose)
    config = AppConfig(notes_dir=notes_dir, output_dir=output, render_retries=retries)
    output_dir = config.resolve_output_dir(Path.cwd())

    console.print(f"Rendering [bold]{notes_dir}[/bold] into [bold]{output_dir}[/bold]...")
    indexer = Indexer(
        notes_dir,
        output_dir,
        summary_name=config.summary_name,
        render_retries=config.render_retries,
    )
    stats = indexer.index()
    if not stats.processed_files:
        console.print("[yellow]No markdown notes found.[/yellow]")
        return

    console.print(f"Rendered: {stats.rendered}, failed: {stats.failed}")
    for path in stats.failed_files:
        console.print(f"[red]Failed:[/red] {path}")


@app.command()
def search(
    query: str = typer.Argument("", help="Substring to search for; empty or '*' lists every note"),
    summary: Optional[Path] = typer.Option(None, "--summary", "-s", help="Summary JSON file"),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", help="Match case exactly"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search the rendered notes."""
    _setup_logging(verbose)
    config = AppConfig(summary_path=summary, case_sensitive=case_sensitive)
    resolved_summary = config.resolve_summary_path(Path.cwd())

    index = load_index(resolved_summary, case_sensitive=config.case_sensitive)
    try:
        results = index.search(query)
    except NotReady:
        raise typer.BadParameter(f"Summary file not found: {resolved_summary}")

    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("File")
    table.add_column("Title")
    table.add_column("Tags")
    table.add_column("Snippet")

    for record in results:
        snippet = record.content.replace("\n", " ")
        table.add_row(record.file, record.title, ", ".join(record.tags), snippet[:120])

    console.print(table)


@app.command()
def serve(
    summary: Optional[Path] = typer.Option(None, "--summary", "-s", help="Summary JSON file"),
    html_dir: Optional[Path] = typer.Option(None, "--html-dir", "-d", help="Rendered HTML directory"),
    host: str = typer.Option(AppConfig().host, help="Host interface"),
    port: int = typer.Option(AppConfig().port, help="Server port"),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", help="Match case exactly"),
) -> None:
    """Start the web interface."""
    import uvicorn

    config = AppConfig(
        summary_path=summary,
        html_dir=html_dir,
        host=host,
        port=port,
        case_sensitive=case_sensitive,
    )
    resolved_summary = config.resolve_summary_path(Path.cwd())
    if not resolved_summary.exists():
        console.print("[yellow]Warning: summary file not found, searches will report the index is not loaded.[/yellow]")

    console.print(
        f"Starting web interface on http://{config.host}:{config.port} (summary: {resolved_summary})"
    )
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        reload=False,
        log_level="info",
    )
