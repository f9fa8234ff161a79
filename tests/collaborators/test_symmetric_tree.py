"""Tests for the arena-backed binary tree mirror-symmetry checker."""

from __future__ import annotations

import pytest

from string_scans.symmetric_tree import (
    ArenaNode,
    TreeArena,
    TreeStructureError,
    build_tree_from_level_order,
    is_symmetric,
    level_order_traversal,
    render_tree,
)


def test_absent_and_empty_trees_are_symmetric() -> None:
    assert is_symmetric(None)
    assert is_symmetric(TreeArena())
    assert is_symmetric(build_tree_from_level_order([]))
    assert is_symmetric(build_tree_from_level_order([None]))


def test_single_node_is_symmetric() -> None:
    assert is_symmetric(build_tree_from_level_order([7]))


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 2],
        [1, 2, 2, 3, 4, 4, 3],
        [1, 2, 2, None, 3, 3, None],
        [0, -1, -1],
    ],
)
def test_symmetric_trees(values: list[int | None]) -> None:
    assert is_symmetric(build_tree_from_level_order(values))


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3],
        [1, 2],
        [1, None, 2],
        [1, 2, 2, None, 3, None, 3],
        [1, 2, 2, 3, 4, 3, 4],
    ],
)
def test_asymmetric_trees(values: list[int | None]) -> None:
    assert not is_symmetric(build_tree_from_level_order(values))


def test_deep_mirrored_chains_do_not_exhaust_the_stack() -> None:
    tree = TreeArena()
    left = right = None
    for value in range(5_000):
        left = tree.add(value, left=left)
        right = tree.add(value, right=right)
    tree.root = tree.add(-1, left, right)
    assert is_symmetric(tree)

    tree.set_children(tree.root, left, None)
    assert not is_symmetric(tree)


def test_manual_arena_construction() -> None:
    tree = TreeArena()
    leaf_a = tree.add(3)
    leaf_b = tree.add(3)
    tree.root = tree.add(1, leaf_a, leaf_b)
    assert len(tree) == 3
    assert tree.node(tree.root) == ArenaNode(1, 0, 1)
    assert tree.parent(leaf_a) == tree.root
    assert tree.parent(tree.root) is None
    assert is_symmetric(tree)


def test_self_links_are_rejected() -> None:
    tree = TreeArena()
    root = tree.add(1)
    with pytest.raises(TreeStructureError):
        tree.set_children(root, root, None)
    with pytest.raises(TreeStructureError):
        TreeArena(nodes=[ArenaNode(1, 1, 2), ArenaNode(2, left=1), ArenaNode(2, right=2)], root=0)


def test_back_edges_to_ancestors_are_rejected() -> None:
    tree = build_tree_from_level_order([1, 2, 2, 3])
    grandchild = tree.node(tree.node(tree.root).left).left
    with pytest.raises(TreeStructureError):
        tree.set_children(grandchild, tree.root, None)
    with pytest.raises(TreeStructureError):
        TreeArena(nodes=[ArenaNode(1, left=1), ArenaNode(2, left=0)])
    # the failed link leaves the tree untouched
    assert level_order_traversal(tree) == [1, 2, 2, 3]
    assert is_symmetric(tree) is False


def test_shared_children_are_rejected() -> None:
    tree = TreeArena()
    leaf = tree.add(5)
    first = tree.add(2, left=leaf)
    with pytest.raises(TreeStructureError):
        tree.add(2, right=leaf)
    with pytest.raises(TreeStructureError):
        tree.add(1, leaf, leaf)
    assert len(tree) == 2
    assert tree.parent(leaf) == first


def test_relinking_releases_previous_children() -> None:
    tree = TreeArena()
    leaf = tree.add(4)
    first = tree.add(2, left=leaf)
    second = tree.add(2)
    tree.set_children(first, None, None)
    tree.set_children(second, None, leaf)
    assert tree.parent(leaf) == second


def test_root_that_is_a_child_is_rejected_by_walkers() -> None:
    tree = build_tree_from_level_order([1, 2, 2])
    tree.root = tree.node(tree.root).left
    for walker in (is_symmetric, level_order_traversal, render_tree):
        with pytest.raises(TreeStructureError):
            walker(tree)


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 2, None, 3, None, 3],
        [1, None, 2, None, 3],
        [1, 2, 3, 4, None, None, 5],
    ],
)
def test_level_order_round_trip(values: list[int | None]) -> None:
    assert level_order_traversal(build_tree_from_level_order(values)) == values


def test_level_order_of_absent_tree() -> None:
    assert level_order_traversal(None) == []
    assert level_order_traversal(TreeArena()) == []


def test_build_stops_when_values_run_out() -> None:
    tree = build_tree_from_level_order([1, 2])
    root = tree.node(tree.root)
    assert root.left is not None
    assert root.right is None
    assert level_order_traversal(tree) == [1, 2]


def test_render_tree_marks_missing_children() -> None:
    tree = build_tree_from_level_order([1, 2, 2, None, 3, None, 3])
    assert render_tree(tree) == "\n".join(["1", "2 2", "· 3 · 3"])
    assert render_tree(build_tree_from_level_order([1, None, 2, None, 3])) == "\n".join(
        ["1", "· 2", "· · · 3"]
    )
    assert render_tree(TreeArena()) == "<empty>"
    assert render_tree(None) == "<empty>"


def test_arena_node_rejects_non_integer_values() -> None:
    with pytest.raises(TypeError):
        ArenaNode("invalid")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        ArenaNode(True)


def test_arena_rejects_dangling_child_indices() -> None:
    tree = TreeArena()
    with pytest.raises(IndexError):
        tree.add(1, left=0)
    with pytest.raises(IndexError):
        TreeArena(nodes=[ArenaNode(1, left=4)])
    with pytest.raises(TypeError):
        tree.add(1, left="0")  # type: ignore[arg-type]
    assert len(tree) == 0


def test_build_tree_rejects_non_integer_payloads() -> None:
    with pytest.raises(TypeError):
        build_tree_from_level_order([1, "two"])  # type: ignore[list-item]
