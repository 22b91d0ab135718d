"""Highlight models."""

from __future__ import annotations

from pydantic import BaseModel


class Highlight(BaseModel):
    """A user-created highlight, optionally carrying a note.

    `location_key` is the ContentID of the location the highlight was made in. It is
    matched verbatim against outline match keys.
    """

    text: str
    location_key: str
    note: str | None = None
    created_at: str | None = None
