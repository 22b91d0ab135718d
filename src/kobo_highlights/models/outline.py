"""Outline models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutlineEntry(BaseModel):
    """A raw table-of-contents record as stored on the device.

    `identifier` is the opaque ContentID of the entry, e.g.
    `book.epub!OPS!xhtml/Chapter01.xhtml#chapter01_4-2`.
    """

    identifier: str
    title: str = ""
    sequence: int = 0


class HierarchyNode(BaseModel):
    """An outline entry with its derived match key and nesting level."""

    title: str
    match_key: str
    level: int = Field(default=1, ge=1)
