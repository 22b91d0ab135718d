"""Outline reconstruction, highlight assignment and rendering."""

from __future__ import annotations

from kobo_highlights.core.assignment import Assignment, assign_highlights
from kobo_highlights.core.closure import heading_closure
from kobo_highlights.core.hierarchy import HierarchyStrategy, build_hierarchy
from kobo_highlights.core.identifiers import base_file_of, depth_of, normalize
from kobo_highlights.core.render import format_highlight, render, render_document

__all__ = [
    "Assignment",
    "HierarchyStrategy",
    "assign_highlights",
    "base_file_of",
    "build_hierarchy",
    "depth_of",
    "format_highlight",
    "heading_closure",
    "normalize",
    "render",
    "render_document",
]
