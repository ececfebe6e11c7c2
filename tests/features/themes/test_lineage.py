"""Tests for the iterative parent walk."""

from __future__ import annotations

from staticdeploy.features.themes.domain.lineage import walk_parent_chain
from staticdeploy.features.themes.domain.models import ChainBreak, ThemeIdentity

A = ThemeIdentity("A", "x")
B = ThemeIdentity("B", "y")
C = ThemeIdentity("C", "z")


def test_walk_reaches_root() -> None:
    walk = walk_parent_chain(C, {A: None, B: A, C: B})
    assert walk.lineage == (C, B, A)
    assert walk.break_kind is None


def test_two_node_cycle_terminates() -> None:
    walk = walk_parent_chain(A, {A: B, B: A})
    assert walk.lineage == (A, B)
    assert walk.break_kind is ChainBreak.CYCLE
    assert walk.break_at == A


def test_self_parent_is_a_cycle() -> None:
    walk = walk_parent_chain(A, {A: A})
    assert walk.lineage == (A,)
    assert walk.break_kind is ChainBreak.CYCLE


def test_missing_parent_stops_walk() -> None:
    walk = walk_parent_chain(C, {B: A, C: B})
    assert walk.lineage == (C, B)
    assert walk.break_kind is ChainBreak.MISSING_PARENT
    assert walk.break_at == A


def test_long_chain_is_walked_without_recursion() -> None:
    identities = [ThemeIdentity("V", f"t{i}") for i in range(5000)]
    parent_of = {identity: (identities[i + 1] if i + 1 < len(identities) else None) for i, identity in enumerate(identities)}
    walk = walk_parent_chain(identities[0], parent_of)
    assert len(walk.lineage) == 5000
