"""Binding highlights to outline nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from kobo_highlights.models.highlight import Highlight
from kobo_highlights.models.outline import HierarchyNode


@dataclass
class Assignment:
    """Highlights grouped by node position, plus those that matched nothing."""

    by_node: dict[int, list[Highlight]] = field(default_factory=dict)
    unassigned: list[Highlight] = field(default_factory=list)

    def assigned_positions(self) -> set[int]:
        return set(self.by_node)

    def assigned_count(self) -> int:
        return sum(len(hl) for hl in self.by_node.values())


def match_index(nodes: Iterable[HierarchyNode]) -> dict[str, int]:
    """Map each match key to the position of its first node."""

    index: dict[str, int] = {}
    for i, node in enumerate(nodes):
        # Duplicate keys bind to the earliest node
        if node.match_key not in index:
            index[node.match_key] = i
    return index


def assign_highlights(nodes: list[HierarchyNode], highlights: Iterable[Highlight]) -> Assignment:
    """Assign every highlight to exactly one node or to the unassigned list.

    Highlights are matched by their `location_key`, verbatim, against node match keys.
    Arrival order is kept inside each bucket.
    """

    index = match_index(nodes)
    result = Assignment()
    for h in highlights:
        pos = index.get(h.location_key)
        if pos is None:
            result.unassigned.append(h)
        else:
            result.by_node.setdefault(pos, []).append(h)
    return result
