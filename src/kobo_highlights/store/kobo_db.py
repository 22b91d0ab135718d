"""Read-only access to a Kobo `KoboReader.sqlite` database.

Relevant tables:

- ``content``: books (``ContentType = 6``, no ``BookID``) and their table-of-contents
  entries (``ContentType = 899``, ``BookID`` = the book's ContentID, ordered by
  ``VolumeIndex``).
- ``Bookmark``: highlights and dog-ears of a book (``VolumeID`` = the book's ContentID).
  Dog-ears carry no ``Text`` and are ignored.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any

from kobo_highlights.errors import CorruptDatabaseError, DatabaseNotFoundError
from kobo_highlights.logging import get_logger
from kobo_highlights.models.book import Book
from kobo_highlights.models.highlight import Highlight
from kobo_highlights.models.outline import OutlineEntry

logger = get_logger(__name__)

BOOK_CONTENT_TYPE = 6
TOC_CONTENT_TYPE = 899

_BOOKS_SQL = """
    SELECT ContentID, Title, Attribution
    FROM content
    WHERE BookID IS NULL AND ContentType = ?
    ORDER BY Title
"""

_BOOK_SQL = """
    SELECT ContentID, Title, Attribution
    FROM content
    WHERE ContentID = ? AND BookID IS NULL AND ContentType = ?
"""

_TOC_SQL = """
    SELECT ContentID, Title, VolumeIndex
    FROM content
    WHERE BookID = ? AND ContentType = ?
    ORDER BY VolumeIndex
"""

_HIGHLIGHTS_SQL = """
    SELECT Text, Annotation, ContentID, DateCreated
    FROM Bookmark
    WHERE VolumeID = ?
      AND Text IS NOT NULL
      AND Text != ''
    ORDER BY ContentID, ChapterProgress
"""


def _connect(path: Path) -> sqlite3.Connection:
    # immutable=1 lets us read a database mounted from a device without touching its journal
    uri = f"{path.resolve().as_uri()}?mode=ro&immutable=1"
    return sqlite3.connect(uri, uri=True)


class KoboDatabase:
    """Query helper over an open Kobo database."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        if not self.path.is_file():
            raise DatabaseNotFoundError(f"database file not found: {self.path}")
        try:
            self._conn = _connect(self.path)
        except sqlite3.Error as e:
            raise CorruptDatabaseError(f"cannot open {self.path}: {e}") from e
        logger.debug("Opened %s", self.path)

    @classmethod
    def from_connection(cls, conn: sqlite3.Connection, path: str | Path = ":memory:") -> "KoboDatabase":
        """Wrap an existing connection (used for in-memory databases)."""

        db = cls.__new__(cls)
        db.path = Path(path)
        db._conn = conn
        return db

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "KoboDatabase":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _query(self, sql: str, params: tuple[Any, ...]) -> list[tuple[Any, ...]]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.DatabaseError as e:
            raise CorruptDatabaseError(f"{self.path} is not a readable Kobo database: {e}") from e

    def list_books(self) -> list[Book]:
        """Return all books in the library, ordered by title."""

        rows = self._query(_BOOKS_SQL, (BOOK_CONTENT_TYPE,))
        return [Book(content_id=cid, title=title or "", author=author) for cid, title, author in rows]

    def get_book(self, content_id: str) -> Book | None:
        rows = self._query(_BOOK_SQL, (content_id, BOOK_CONTENT_TYPE))
        if not rows:
            return None
        cid, title, author = rows[0]
        return Book(content_id=cid, title=title or "", author=author)

    def outline_entries(self, book_id: str) -> list[OutlineEntry]:
        """Return the table of contents of a book in display order."""

        rows = self._query(_TOC_SQL, (book_id, TOC_CONTENT_TYPE))
        return [
            OutlineEntry(identifier=cid, title=title or "", sequence=int(seq or 0))
            for cid, title, seq in rows
        ]

    def highlights(self, book_id: str) -> list[Highlight]:
        """Return a book's text highlights ordered by location."""

        rows = self._query(_HIGHLIGHTS_SQL, (book_id,))
        return [
            Highlight(text=text, note=note, location_key=cid, created_at=created)
            for text, note, cid, created in rows
        ]
