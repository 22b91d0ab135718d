"""Markdown rendering of a book's highlights.

Output layout::

    # Book Title

    **Author:** Someone

    ---

    ## Chapter

    ### Section

    > highlighted line

    **Note:** user note

    *2024-01-15T10:30:00*

    ## Uncategorized

    > highlight that matched no outline entry

`#` is reserved for the book title, so an outline node at level ``n`` gets ``n + 1`` hashes.
"""

from __future__ import annotations

from typing import Iterable

from kobo_highlights.core.assignment import Assignment, assign_highlights
from kobo_highlights.core.closure import heading_closure
from kobo_highlights.core.hierarchy import HierarchyStrategy, build_hierarchy
from kobo_highlights.models.highlight import Highlight
from kobo_highlights.models.outline import HierarchyNode, OutlineEntry

UNCATEGORIZED_HEADING = "Uncategorized"


def _physical_lines(text: str) -> list[str]:
    """Split on line feeds only; a CR before one and a single trailing empty line are dropped."""

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def format_highlight(h: Highlight) -> str:
    """Render one highlight as a quote with optional note and date."""

    parts: list[str] = [f"> {line}\n" for line in _physical_lines(h.text)]
    if h.note:
        parts.append(f"\n**Note:** {h.note}\n")
    if h.created_at:
        parts.append(f"\n*{h.created_at}*\n")
    return "".join(parts)


def _heading(level: int, title: str) -> str:
    return f"{'#' * level} {title}\n\n"


def _highlight_block(highlights: Iterable[Highlight]) -> str:
    return "".join(format_highlight(h) + "\n" for h in highlights)


def render_document(
    title: str,
    author: str | None,
    nodes: list[HierarchyNode],
    assignment: Assignment,
    closure: set[int],
) -> str:
    """Render a document from already-computed hierarchy, assignment and closure."""

    out: list[str] = [_heading(1, title)]
    if author:
        out.append(f"**Author:** {author}\n\n")
    out.append("---\n\n")

    for i, node in enumerate(nodes):
        if i not in closure or not node.title:
            continue
        out.append(_heading(node.level + 1, node.title))
        out.append(_highlight_block(assignment.by_node.get(i, ())))

    if assignment.unassigned:
        out.append(_heading(2, UNCATEGORIZED_HEADING))
        out.append(_highlight_block(assignment.unassigned))

    return "".join(out)


def render(
    title: str,
    author: str | None,
    outline_entries: Iterable[OutlineEntry],
    highlights: Iterable[Highlight],
    *,
    strategy: HierarchyStrategy = HierarchyStrategy.DEPTH_SUFFIX,
) -> str:
    """Render a book's highlights grouped under its table of contents.

    Args:
        title: Book title.
        author: Optional author; omitted from the output when empty.
        outline_entries: Table-of-contents entries in display order.
        highlights: Highlights in (location, position) order.
        strategy: How outline nesting is inferred.

    Returns:
        The Markdown document.
    """

    nodes = build_hierarchy(outline_entries, strategy)
    assignment = assign_highlights(nodes, highlights)
    closure = heading_closure(nodes, assignment.assigned_positions())
    return render_document(title, author, nodes, assignment, closure)
