"""CLI entrypoints for kobo-highlights."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from kobo_highlights.config import load_settings
from kobo_highlights.core.hierarchy import HierarchyStrategy
from kobo_highlights.errors import ExportError
from kobo_highlights.logging import configure_logging, get_logger
from kobo_highlights.orchestrator.exporter import export_library, render_book
from kobo_highlights.store.kobo_db import KoboDatabase

app = typer.Typer(add_completion=False, help="Export Kobo highlights and annotations to Markdown")
logger = get_logger(__name__)


def _fail(err: ExportError) -> NoReturn:
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


@app.command()
def export(
    db_path: Path = typer.Argument(..., help="Path to the KoboReader.sqlite file"),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Output directory for Markdown files (overrides KOBO_HIGHLIGHTS_OUTPUT_DIR)",
    ),
    strategy: HierarchyStrategy | None = typer.Option(
        None,
        "--strategy",
        help="How chapter nesting is inferred (overrides KOBO_HIGHLIGHTS_HIERARCHY_STRATEGY)",
    ),
    include_empty: bool = typer.Option(
        False,
        "--include-empty",
        help="Also write files for books without highlights",
    ),
) -> None:
    """Write one Markdown file per book that has highlights."""

    settings = load_settings()
    if output_dir is not None:
        settings.output_dir = output_dir
    if strategy is not None:
        settings.hierarchy_strategy = strategy
    if include_empty:
        settings.skip_empty_books = False

    configure_logging(settings.log_level)
    logger.info("Export requested", extra={"db_path": str(db_path)})

    try:
        summary = export_library(db_path=db_path, settings=settings)
    except ExportError as e:
        _fail(e)

    typer.echo(f"Exported {summary.exported} of {summary.books_found} books to {settings.output_dir}")


@app.command()
def books(
    db_path: Path = typer.Argument(..., help="Path to the KoboReader.sqlite file"),
) -> None:
    """List the books in the database with their highlight counts."""

    configure_logging(load_settings().log_level)
    try:
        with KoboDatabase(db_path) as db:
            for book in db.list_books():
                count = len(db.highlights(book.content_id))
                author = f" ({book.author})" if book.author else ""
                typer.echo(f"{count:5d}  {book.title}{author}")
    except ExportError as e:
        _fail(e)


@app.command("render-book")
def render_book_cmd(
    db_path: Path = typer.Argument(..., help="Path to the KoboReader.sqlite file"),
    content_id: str = typer.Argument(..., help="ContentID of the book"),
    strategy: HierarchyStrategy | None = typer.Option(None, "--strategy", help="Hierarchy strategy"),
) -> None:
    """Print the Markdown of a single book to stdout."""

    settings = load_settings()
    if strategy is not None:
        settings.hierarchy_strategy = strategy
    configure_logging(settings.log_level)

    try:
        with KoboDatabase(db_path) as db:
            book = db.get_book(content_id)
            if book is None:
                typer.echo(f"Error: no book with ContentID {content_id!r}", err=True)
                raise typer.Exit(code=1)
            typer.echo(render_book(db, book, settings), nl=False)
    except ExportError as e:
        _fail(e)


if __name__ == "__main__":
    app()
