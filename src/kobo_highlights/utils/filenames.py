"""Filename utilities."""

from __future__ import annotations


def sanitize_filename(name: str) -> str:
    """Keep letters, digits, spaces and dashes; drop everything else.

    Examples:
        ``"Book: A «Story»!"`` -> ``"Book A Story"``
    """

    return "".join(c for c in name if c.isalnum() or c in " -").strip()
