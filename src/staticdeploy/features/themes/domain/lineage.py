"""Iterative, cycle-safe walk over declared parent pointers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .models import ChainBreak, ThemeIdentity


@dataclass(frozen=True, slots=True)
class ParentWalk:
    """Identities visited from a start theme towards its root ancestor."""

    lineage: tuple[ThemeIdentity, ...]
    break_kind: ChainBreak | None = None
    break_at: ThemeIdentity | None = None


def walk_parent_chain(
    start: ThemeIdentity,
    parent_of: Mapping[ThemeIdentity, ThemeIdentity | None],
) -> ParentWalk:
    """Follow ``parent_of`` from ``start`` until a root, a cycle or a gap.

    Args:
        start: Identity the walk begins at; always the first lineage entry.
        parent_of: Adjacency lookup of every known theme to its declared parent.

    Returns:
        ParentWalk: The non-repeating lineage plus the reason it stopped early,
        if any. ``break_at`` names the parent that was not followed.
    """
    lineage: list[ThemeIdentity] = [start]
    visited: set[ThemeIdentity] = {start}
    current = start

    while True:
        parent = parent_of.get(current)
        if parent is None:
            return ParentWalk(tuple(lineage))
        if parent in visited:
            return ParentWalk(tuple(lineage), ChainBreak.CYCLE, parent)
        if parent not in parent_of:
            return ParentWalk(tuple(lineage), ChainBreak.MISSING_PARENT, parent)
        lineage.append(parent)
        visited.add(parent)
        current = parent


__all__ = ["ParentWalk", "walk_parent_chain"]
