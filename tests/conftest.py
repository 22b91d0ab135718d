"""Shared fixtures: a Kobo-shaped SQLite database on disk."""

from __future__ import annotations

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Callable

import pytest

_SCHEMA = """
CREATE TABLE content (
    ContentID TEXT NOT NULL,
    ContentType TEXT NOT NULL,
    BookID TEXT,
    Title TEXT,
    Attribution TEXT,
    VolumeIndex INTEGER DEFAULT 0
);
CREATE TABLE Bookmark (
    BookmarkID TEXT NOT NULL,
    VolumeID TEXT NOT NULL,
    ContentID TEXT NOT NULL,
    Text TEXT,
    Annotation TEXT,
    DateCreated TEXT,
    ChapterProgress REAL DEFAULT 0,
    Hidden BOOL DEFAULT 0
);
"""


class KoboFixture:
    """Builder for test databases."""

    def __init__(self, path: Path) -> None:
        self.path = path
        with closing(sqlite3.connect(path)) as conn, conn:
            conn.executescript(_SCHEMA)

    def _exec(self, sql: str, params: tuple) -> None:
        with closing(sqlite3.connect(self.path)) as conn, conn:
            conn.execute(sql, params)

    def add_book(self, content_id: str, title: str, author: str | None = None) -> None:
        self._exec(
            "INSERT INTO content (ContentID, ContentType, BookID, Title, Attribution) "
            "VALUES (?, '6', NULL, ?, ?)",
            (content_id, title, author),
        )

    def add_content(self, content_id: str, content_type: str, book_id: str, title: str, index: int) -> None:
        self._exec(
            "INSERT INTO content (ContentID, ContentType, BookID, Title, VolumeIndex) "
            "VALUES (?, ?, ?, ?, ?)",
            (content_id, content_type, book_id, title, index),
        )

    def add_toc(self, book_id: str, content_id: str, title: str, index: int) -> None:
        self.add_content(content_id, "899", book_id, title, index)

    def add_bookmark(
        self,
        bookmark_id: str,
        volume_id: str,
        content_id: str,
        text: str | None,
        *,
        annotation: str | None = None,
        date_created: str | None = None,
        progress: float = 0.0,
    ) -> None:
        self._exec(
            "INSERT INTO Bookmark "
            "(BookmarkID, VolumeID, ContentID, Text, Annotation, DateCreated, ChapterProgress) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            (bookmark_id, volume_id, content_id, text, annotation, date_created, progress),
        )


@pytest.fixture()
def kobo(tmp_path: Path) -> KoboFixture:
    return KoboFixture(tmp_path / "KoboReader.sqlite")


@pytest.fixture()
def orchard_db(kobo: KoboFixture) -> KoboFixture:
    """Two books: one with a highlighted sub-section, one without highlights."""

    kobo.add_book("book1", "The Paper Orchard", "Samir Hale")
    kobo.add_content("book1!ch01.xhtml", "9", "book1", "ch01.xhtml", 0)
    kobo.add_toc("book1", "book1!ch01.xhtml#ch01-1", "I. Chapter Seven", 0)
    kobo.add_toc("book1", "book1!ch01.xhtml#ch01_1-2", "1. Abschnitt", 1)
    kobo.add_bookmark("bm1", "book1", "book1!ch01.xhtml#ch01_1", "A curious passage about seasons", progress=0.1)

    kobo.add_book("book2", "Blue Lantern", "Nora Finch")
    kobo.add_toc("book2", "book2!a.xhtml#a-1", "Only Chapter", 0)
    return kobo


@pytest.fixture()
def make_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., object]:
    """Settings isolated from the developer's environment."""

    from kobo_highlights.config import Settings

    for name in ("OUTPUT_DIR", "HIERARCHY_STRATEGY", "SKIP_EMPTY_BOOKS", "FILE_EXTENSION", "ENV_FILE"):
        monkeypatch.delenv(f"KOBO_HIGHLIGHTS_{name}", raising=False)

    def _make(**overrides: object) -> Settings:
        overrides.setdefault("output_dir", tmp_path / "out")
        return Settings(**overrides)

    return _make
