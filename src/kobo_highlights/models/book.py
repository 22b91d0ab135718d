"""Book models."""

from __future__ import annotations

from pydantic import BaseModel


class Book(BaseModel):
    """A book known to the device library."""

    content_id: str
    title: str
    author: str | None = None
