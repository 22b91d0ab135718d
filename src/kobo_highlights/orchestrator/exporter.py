"""Export driver.

Walks every book of a Kobo database, renders the ones that carry highlights and writes
one Markdown file per book into the output directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from kobo_highlights.config import Settings
from kobo_highlights.core.render import render
from kobo_highlights.errors import OutputPermissionError
from kobo_highlights.events import ExportEvent, ExportEventType
from kobo_highlights.logging import book_context, get_logger
from kobo_highlights.models.book import Book
from kobo_highlights.models.highlight import Highlight
from kobo_highlights.store.kobo_db import KoboDatabase
from kobo_highlights.utils.filenames import sanitize_filename

logger = get_logger(__name__)

FALLBACK_STEM = "untitled"


@dataclass(frozen=True)
class ExportPaths:
    """Output layout for an export run."""

    root: Path
    extension: str = ".md"

    def book_path(self, book: Book) -> Path:
        stem = sanitize_filename(book.title) or sanitize_filename(book.content_id) or FALLBACK_STEM
        return self.root / f"{stem}{self.extension}"


@dataclass
class ExportSummary:
    """Outcome of an export run."""

    books_found: int = 0
    skipped: int = 0
    written: list[Path] = field(default_factory=list)

    @property
    def exported(self) -> int:
        return len(self.written)


def _write(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputPermissionError(f"cannot write {path}: {e}") from e


def render_book(
    db: KoboDatabase,
    book: Book,
    settings: Settings,
    highlights: list[Highlight] | None = None,
) -> str:
    """Render one book's highlights to Markdown.

    Highlights already fetched by the caller are reused instead of queried again.
    """

    if highlights is None:
        highlights = db.highlights(book.content_id)
    return render(
        book.title,
        book.author,
        db.outline_entries(book.content_id),
        highlights,
        strategy=settings.hierarchy_strategy,
    )


def export_library_stream(*, db_path: Path, settings: Settings) -> Iterator[ExportEvent]:
    """Export every book and yield progress events.

    Raises:
        DatabaseNotFoundError: The database file does not exist.
        CorruptDatabaseError: The database cannot be queried.
        OutputPermissionError: An output file cannot be written.
    """

    paths = ExportPaths(root=settings.output_dir, extension=settings.file_extension)
    seq = 0

    def emit(event_type: ExportEventType, data: str | dict | list | None = None) -> ExportEvent:
        nonlocal seq
        seq += 1
        return ExportEvent(seq=seq, event_type=event_type, data=data)

    with KoboDatabase(db_path) as db:
        books = db.list_books()
        logger.info("Found %d books in database", len(books))
        yield emit(ExportEventType.BOOKS_FOUND, {"count": len(books), "db_path": str(db_path)})

        exported = 0
        for book in books:
            with book_context(book.title or book.content_id):
                highlights = db.highlights(book.content_id)
                if not highlights and settings.skip_empty_books:
                    logger.debug("No highlights, skipping")
                    yield emit(ExportEventType.BOOK_SKIPPED, {"content_id": book.content_id, "title": book.title})
                    continue

                text = render_book(db, book, settings, highlights)
                path = paths.book_path(book)
                _write(path, text)
                exported += 1
                logger.info("Exported %s (%d highlights)", path.name, len(highlights))
                yield emit(
                    ExportEventType.BOOK_EXPORTED,
                    {
                        "content_id": book.content_id,
                        "title": book.title,
                        "path": str(path),
                        "highlights": len(highlights),
                    },
                )

        logger.info("Done. Exported %d books to %s", exported, paths.root)
        yield emit(ExportEventType.EXPORT_DONE, {"exported": exported, "output_dir": str(paths.root)})


def export_library(*, db_path: Path, settings: Settings) -> ExportSummary:
    """Run the export and collect its outcome.

    This is a convenience wrapper around :func:`export_library_stream`.
    """

    summary = ExportSummary()
    for ev in export_library_stream(db_path=db_path, settings=settings):
        data = ev.data if isinstance(ev.data, dict) else {}
        if ev.event_type == ExportEventType.BOOKS_FOUND:
            summary.books_found = int(data.get("count", 0))
        elif ev.event_type == ExportEventType.BOOK_SKIPPED:
            summary.skipped += 1
        elif ev.event_type == ExportEventType.BOOK_EXPORTED:
            summary.written.append(Path(data["path"]))
    return summary
