"""Export Kobo highlights and annotations to Markdown."""

from __future__ import annotations

from kobo_highlights.core.render import render

__all__ = ["render"]
__version__ = "0.1.0"
