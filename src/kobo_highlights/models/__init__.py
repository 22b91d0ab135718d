"""Pydantic models used across the project."""

from __future__ import annotations

from kobo_highlights.models.book import Book
from kobo_highlights.models.highlight import Highlight
from kobo_highlights.models.outline import HierarchyNode, OutlineEntry

__all__ = [
    "Book",
    "Highlight",
    "HierarchyNode",
    "OutlineEntry",
]
