"""Data access for device databases."""

from __future__ import annotations

from kobo_highlights.store.kobo_db import KoboDatabase

__all__ = ["KoboDatabase"]
