"""Hierarchy inference for flat outline tables.

Two strategies are available and one must be chosen explicitly. They can disagree on the
same data, so nothing here tries to guess which one a book needs.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable

from kobo_highlights.core.identifiers import base_file_of, depth_of, normalize
from kobo_highlights.models.outline import HierarchyNode, OutlineEntry


class HierarchyStrategy(str, Enum):
    """How nesting levels are inferred."""

    DEPTH_SUFFIX = "depth-suffix"
    FIRST_OCCURRENCE = "first-occurrence"


def _depth_suffix_levels(entries: list[OutlineEntry]) -> list[int]:
    return [depth_of(e.identifier) for e in entries]


def _first_occurrence_levels(entries: list[OutlineEntry]) -> list[int]:
    seen: set[str] = set()
    levels: list[int] = []
    for e in entries:
        base = base_file_of(e.identifier)
        if base in seen:
            levels.append(2)
        else:
            seen.add(base)
            levels.append(1)
    return levels


_STRATEGIES: dict[HierarchyStrategy, Callable[[list[OutlineEntry]], list[int]]] = {
    HierarchyStrategy.DEPTH_SUFFIX: _depth_suffix_levels,
    HierarchyStrategy.FIRST_OCCURRENCE: _first_occurrence_levels,
}


def build_hierarchy(
    entries: Iterable[OutlineEntry],
    strategy: HierarchyStrategy = HierarchyStrategy.DEPTH_SUFFIX,
) -> list[HierarchyNode]:
    """Turn outline entries into hierarchy nodes, keeping their order.

    Args:
        entries: Outline entries in display order.
        strategy: Level inference strategy.

    Returns:
        One node per entry, in the same order.
    """

    entries = list(entries)
    levels = _STRATEGIES[HierarchyStrategy(strategy)](entries)
    return [
        HierarchyNode(title=e.title, match_key=normalize(e.identifier), level=level)
        for e, level in zip(entries, levels)
    ]
