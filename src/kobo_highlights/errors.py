"""Errors raised by the data access and file writing layers.

The rendering core never raises for well-formed input records; everything that can fail
(opening the database, querying it, writing output files) surfaces one of these.
"""

from __future__ import annotations


class ExportError(RuntimeError):
    """Base class for export failures."""


class DatabaseNotFoundError(ExportError):
    """The database file does not exist."""


class CorruptDatabaseError(ExportError):
    """The file is not a readable Kobo database."""


class OutputPermissionError(ExportError):
    """An output file or directory could not be written."""
