"""Event model used for streaming export progress.

The export driver yields a sequence of events so callers (the CLI, tests) can report
progress without the driver knowing how it is displayed.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class ExportEventType(str, Enum):
    """What an export event is about."""

    BOOKS_FOUND = "books_found"
    BOOK_SKIPPED = "book_skipped"
    BOOK_EXPORTED = "book_exported"
    EXPORT_DONE = "export_done"


class ExportEvent(BaseModel):
    """A single event in an export run."""

    seq: int = Field(ge=1)
    ts: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    event_type: ExportEventType

    data: str | dict | list | None = None
    metadata: dict[str, str | int | float | bool | None] = Field(default_factory=dict)
