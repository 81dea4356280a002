from __future__ import annotations

"""
Unit tests for the Frame Registry.

Verifies:
1. One node instance per frame name with accumulated counts.
2. Idempotent, first-wins association linking.
3. Root registration order and shared ownership with the registry.
"""

import pytest

from calltree.core.services.registry import FrameRegistry


def test_observe_creates_then_increments():
    """A new name starts at one; repeated observations return the same node."""
    registry = FrameRegistry()

    first = registry.observe("#A")
    second = registry.observe("#A")

    assert first is second
    assert first.count == 2
    assert len(registry) == 1
    assert "#A" in registry


def test_link_is_idempotent_and_keeps_first_observation():
    registry = FrameRegistry()
    a = registry.observe("#A")
    b = registry.observe("#B")

    registry.link(a, b)
    registry.link(a, b)

    assert list(a.associations) == ["#B"]
    assert a.associations["#B"] is b
    assert registry.edge_count() == 1


def test_link_rejects_unregistered_nodes():
    """Dangling edges are a programming defect."""
    registry = FrameRegistry()
    other = FrameRegistry()
    a = registry.observe("#A")
    stray = other.observe("#Z")

    with pytest.raises(AssertionError):
        registry.link(a, stray)


def test_roots_share_nodes_and_keep_first_position():
    registry = FrameRegistry()
    a = registry.observe("#A")
    b = registry.observe("#B")

    registry.add_root(b)
    registry.add_root(a)
    registry.add_root(b)

    roots = registry.roots
    assert list(roots) == ["#B", "#A"]
    assert roots["#B"] is b
    assert registry.get("#B") is b


def test_iteration_follows_first_observation_order():
    registry = FrameRegistry()
    for name in ["#C", "#A", "#C", "#B"]:
        registry.observe(name)

    assert [n.name for n in registry] == ["#C", "#A", "#B"]
    assert registry.counts() == {"#C": 2, "#A": 1, "#B": 1}
    assert registry.get("#missing") is None
