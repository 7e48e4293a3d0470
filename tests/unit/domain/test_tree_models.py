from __future__ import annotations

"""
Unit tests for the tree data models.

Verifies entry immutability, parent chain traversal and that equality
and repr never walk back up through the parent reference.
"""

import dataclasses

import pytest

from dirtree.domain.tree_models import DirEntry, TreeNode


def _chain() -> TreeNode:
    """Build a -> b -> c.txt and return the leaf."""
    a = TreeNode(entry=DirEntry("a", True), is_last=False)
    b = TreeNode(entry=DirEntry("b", True), is_last=True, parent=a)
    a.children = [b]
    c = TreeNode(entry=DirEntry("c.txt", False, 3), is_last=True, parent=b)
    b.children = [c]
    return c


def test_dir_entry_is_frozen() -> None:
    entry = DirEntry("a.txt", False, 10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "b.txt"  # type: ignore[misc]


def test_node_delegates_entry_fields() -> None:
    node = TreeNode(entry=DirEntry("data.bin", False, 42))
    assert node.name == "data.bin"
    assert node.is_dir is False
    assert node.size == 42
    assert node.children == []


def test_depth_and_parent_chain() -> None:
    leaf = _chain()
    assert leaf.depth == 2
    assert [n.name for n in leaf.iter_parents()] == ["b", "a"]


def test_top_level_node_has_no_ancestors() -> None:
    node = TreeNode(entry=DirEntry("top", True), is_last=True)
    assert node.depth == 0
    assert list(node.iter_parents()) == []


def test_equality_ignores_parent() -> None:
    leaf = _chain()
    detached = TreeNode(entry=DirEntry("c.txt", False, 3), is_last=True)
    assert leaf == detached
    assert "parent" not in repr(leaf)
