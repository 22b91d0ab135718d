"""Tests for the Kobo database reader."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from kobo_highlights.errors import CorruptDatabaseError, DatabaseNotFoundError
from kobo_highlights.store.kobo_db import KoboDatabase


def test_list_books(kobo) -> None:
    kobo.add_book("book1", "Blue Lantern", "Nora Finch")

    with KoboDatabase(kobo.path) as db:
        books = db.list_books()

    assert len(books) == 1
    assert books[0].title == "Blue Lantern"
    assert books[0].author == "Nora Finch"


def test_list_books_skips_chapters_and_sorts_by_title(kobo) -> None:
    """It should only return top-level book rows, ordered by title."""

    kobo.add_book("b2", "Zebra")
    kobo.add_book("b1", "Apple")
    kobo.add_content("ch1", "9", "b1", "Chapter file", 0)

    with KoboDatabase(kobo.path) as db:
        assert [b.title for b in db.list_books()] == ["Apple", "Zebra"]


def test_get_book(kobo) -> None:
    kobo.add_book("book1", "Blue Lantern")

    with KoboDatabase(kobo.path) as db:
        assert db.get_book("book1").title == "Blue Lantern"
        assert db.get_book("missing") is None


def test_outline_entries_only_toc_rows_in_volume_order(kobo) -> None:
    kobo.add_content("book!Chapter01.xhtml", "9", "book1", "Chapter01.xhtml", 0)
    kobo.add_toc("book1", "book!Chapter01.xhtml#ch01_1-3", "1. Section", 1)
    kobo.add_toc("book1", "book!Chapter01.xhtml#ch01-2", "I. KAPITEL", 0)
    kobo.add_toc("other", "other!x.xhtml-1", "Elsewhere", 0)

    with KoboDatabase(kobo.path) as db:
        toc = db.outline_entries("book1")

    assert [(e.identifier, e.title, e.sequence) for e in toc] == [
        ("book!Chapter01.xhtml#ch01-2", "I. KAPITEL", 0),
        ("book!Chapter01.xhtml#ch01_1-3", "1. Section", 1),
    ]


def test_highlights_skip_dogears_and_keep_fields(kobo) -> None:
    """It should drop bookmarks without text and map the remaining columns."""

    kobo.add_bookmark(
        "bm1", "book1", "book!ch01.xhtml#sec1", "highlighted text",
        annotation="my note", date_created="2024-01-15", progress=0.5,
    )
    kobo.add_bookmark("bm2", "book1", "book!ch01.xhtml#sec2", None, progress=0.8)
    kobo.add_bookmark("bm3", "book1", "book!ch01.xhtml#sec3", "", progress=0.9)

    with KoboDatabase(kobo.path) as db:
        highlights = db.highlights("book1")

    assert len(highlights) == 1
    h = highlights[0]
    assert h.text == "highlighted text"
    assert h.note == "my note"
    assert h.created_at == "2024-01-15"
    assert h.location_key == "book!ch01.xhtml#sec1"


def test_highlights_ordered_by_location_then_progress(kobo) -> None:
    kobo.add_bookmark("1", "book1", "b", "b-late", progress=0.9)
    kobo.add_bookmark("2", "book1", "a", "a-only", progress=0.5)
    kobo.add_bookmark("3", "book1", "b", "b-early", progress=0.1)

    with KoboDatabase(kobo.path) as db:
        assert [h.text for h in db.highlights("book1")] == ["a-only", "b-early", "b-late"]


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(DatabaseNotFoundError):
        KoboDatabase(tmp_path / "nope.sqlite")


def test_garbage_file_raises_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "KoboReader.sqlite"
    path.write_bytes(b"this is not a sqlite database at all" * 10)

    with KoboDatabase(path) as db, pytest.raises(CorruptDatabaseError):
        db.list_books()


def test_missing_tables_raise_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "empty.sqlite"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE unrelated (x INTEGER)")
    conn.commit()
    conn.close()

    with KoboDatabase(path) as db, pytest.raises(CorruptDatabaseError):
        db.highlights("book1")


def test_from_connection_wraps_in_memory_database() -> None:
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE content (ContentID TEXT, ContentType TEXT, BookID TEXT, Title TEXT, Attribution TEXT)")
    conn.execute("INSERT INTO content VALUES ('b', '6', NULL, 'Memory', NULL)")

    db = KoboDatabase.from_connection(conn)
    assert [b.title for b in db.list_books()] == ["Memory"]
    db.close()
