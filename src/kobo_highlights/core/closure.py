"""Selection of the headings a rendered document needs."""

from __future__ import annotations

from typing import Iterable

from kobo_highlights.models.outline import HierarchyNode


def ancestors_of(nodes: list[HierarchyNode], position: int) -> list[int]:
    """Return the positions of all structural ancestors of `position`, nearest first.

    An ancestor is an earlier node whose level is strictly below every level seen so far
    on the way back from `position`.
    """

    found: list[int] = []
    min_level = nodes[position].level
    if min_level <= 1:
        return found
    for j in range(position - 1, -1, -1):
        level = nodes[j].level
        if level < min_level:
            found.append(j)
            min_level = level
            if min_level <= 1:
                break
    return found


def heading_closure(nodes: list[HierarchyNode], assigned: Iterable[int]) -> set[int]:
    """Return assigned positions together with their full ancestor chains."""

    needed: set[int] = set()
    for i in sorted(set(assigned)):
        if not 0 <= i < len(nodes):
            continue
        needed.add(i)
        needed.update(ancestors_of(nodes, i))
    return needed
