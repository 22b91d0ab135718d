"""Export orchestration."""

from __future__ import annotations

from kobo_highlights.orchestrator.exporter import (
    ExportPaths,
    ExportSummary,
    export_library,
    export_library_stream,
    render_book,
)

__all__ = [
    "ExportPaths",
    "ExportSummary",
    "export_library",
    "export_library_stream",
    "render_book",
]
