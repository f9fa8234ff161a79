"""Mirror-symmetry checks for binary trees stored in an index arena.

Nodes live in a flat list and refer to their children by index, with ``None``
marking a missing child. The arena records the parent of every linked node and
refuses links that would give a node two parents or close a cycle, so every
structure reachable from the root is a proper tree. That lets the checker walk
arbitrarily deep trees with an explicit stack instead of recursion.

The module offers:

* ``ArenaNode`` / ``TreeArena`` – the node record and its container.
* ``is_symmetric`` – checks whether the left and right subtrees of the root
  mirror each other. An empty tree is symmetric.
* ``build_tree_from_level_order`` and ``level_order_traversal`` – conversion
  to and from level-order sequences containing ``None`` sentinels.
* ``render_tree`` – deterministic level-by-level ASCII rendering with ``·``
  placeholders for missing children.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Iterator, List, Optional, Tuple


class TreeStructureError(ValueError):
    """Raised when a link would share a node between parents or form a cycle."""


@dataclass(frozen=True, slots=True)
class ArenaNode:
    """Node payload with optional child indices into the owning arena."""

    value: int
    left: Optional[int] = None
    right: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("ArenaNode value must be an integer")


@dataclass(slots=True)
class TreeArena:
    """Binary tree stored as a list of ``ArenaNode`` records.

    ``root`` may be reassigned freely, but walkers reject a root that is the
    child of another node.
    """

    nodes: List[ArenaNode] = field(default_factory=list)
    root: Optional[int] = None
    _parents: List[Optional[int]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._parents = [None] * len(self.nodes)
        for index, node in enumerate(self.nodes):
            self._link(index, node.left, node.right)
        self._check_child(self.root)

    def __len__(self) -> int:
        return len(self.nodes)

    def add(
        self, value: int, left: Optional[int] = None, right: Optional[int] = None
    ) -> int:
        """Append a node adopting *left* and *right* and return its index."""

        node = ArenaNode(value, left, right)
        self._check_child(left)
        self._check_child(right)
        self.nodes.append(node)
        self._parents.append(None)
        index = len(self.nodes) - 1
        try:
            self._link(index, left, right)
        except (IndexError, TypeError, TreeStructureError):
            self.nodes.pop()
            self._parents.pop()
            raise
        return index

    def node(self, index: int) -> ArenaNode:
        """Return the node stored at *index*."""

        self._check_child(index)
        return self.nodes[index]

    def parent(self, index: int) -> Optional[int]:
        """Return the index of the node that links to *index*, if any."""

        self._check_child(index)
        return self._parents[index]

    def set_children(
        self, index: int, left: Optional[int], right: Optional[int]
    ) -> None:
        """Replace the child links of the node at *index*."""

        current = self.node(index)
        for child in (current.left, current.right):
            if child is not None:
                self._parents[child] = None
        try:
            self._link(index, left, right)
        except (IndexError, TypeError, TreeStructureError):
            self._link(index, current.left, current.right)
            raise
        self.nodes[index] = ArenaNode(current.value, left, right)

    def require_root(self) -> Optional[int]:
        """Return ``root`` after checking that no node links to it."""

        self._check_child(self.root)
        if self.root is not None and self._parents[self.root] is not None:
            raise TreeStructureError(
                f"Root {self.root} is a child of node {self._parents[self.root]}"
            )
        return self.root

    def _link(self, parent: int, left: Optional[int], right: Optional[int]) -> None:
        self._check_child(left)
        self._check_child(right)
        if left is not None and left == right:
            raise TreeStructureError(f"Node {left} cannot be both children of {parent}")
        for child in (left, right):
            if child is None:
                continue
            owner = self._parents[child]
            if owner is not None and owner != parent:
                raise TreeStructureError(f"Node {child} already belongs to node {owner}")
            if child in self._ancestors(parent):
                raise TreeStructureError(f"Linking node {child} under {parent} forms a cycle")
        for child in (left, right):
            if child is not None:
                self._parents[child] = parent

    def _ancestors(self, index: int) -> Iterator[int]:
        current: Optional[int] = index
        while current is not None:
            yield current
            current = self._parents[current]

    def _check_child(self, index: Optional[int]) -> None:
        if index is None:
            return
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("Child references must be integer indices or None")
        if not 0 <= index < len(self.nodes):
            raise IndexError(f"Node index {index} is outside the arena")


def is_symmetric(tree: Optional[TreeArena]) -> bool:
    """Return ``True`` when *tree* is a mirror image of itself."""

    if tree is None:
        return True
    root_index = tree.require_root()
    if root_index is None:
        return True

    root = tree.node(root_index)
    stack: List[Tuple[Optional[int], Optional[int]]] = [(root.left, root.right)]
    while stack:
        first_index, second_index = stack.pop()
        if first_index is None and second_index is None:
            continue
        if first_index is None or second_index is None:
            return False
        first = tree.node(first_index)
        second = tree.node(second_index)
        if first.value != second.value:
            return False
        stack.append((first.left, second.right))
        stack.append((first.right, second.left))
    return True


def _validate_payload(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("Level-order values must be integers or None")
    return value


def build_tree_from_level_order(values: Iterable[Optional[int]]) -> TreeArena:
    """Construct a tree arena from a level-order sequence.

    The *values* iterable may contain ``None`` sentinels to represent missing
    children. An empty sequence or a ``None`` root produces an empty arena.
    """

    tree = TreeArena()
    iterator = iter(values)
    first = next(iterator, None)
    if first is None:
        return tree

    tree.root = tree.add(_validate_payload(first))
    pending: Deque[int] = deque([tree.root])
    exhausted = False
    while pending and not exhausted:
        parent = pending.popleft()
        children: List[Optional[int]] = [None, None]
        for slot in range(2):
            try:
                child_value = next(iterator)
            except StopIteration:
                exhausted = True
                break
            if child_value is not None:
                children[slot] = tree.add(_validate_payload(child_value))
                pending.append(children[slot])
        tree.set_children(parent, children[0], children[1])

    return tree


def _levels(tree: Optional[TreeArena]) -> Iterator[List[Optional[int]]]:
    """Yield each level as node indices, ``None`` standing in for gaps.

    Gaps keep their two placeholder children so positions line up with a
    complete binary tree. Iteration stops after the deepest real node.
    """

    if tree is None:
        return
    root = tree.require_root()
    level: List[Optional[int]] = [] if root is None else [root]
    while any(index is not None for index in level):
        yield level
        below: List[Optional[int]] = []
        for index in level:
            if index is None:
                below += [None, None]
            else:
                node = tree.node(index)
                below += [node.left, node.right]
        level = below


def level_order_traversal(tree: Optional[TreeArena]) -> List[Optional[int]]:
    """Return the tree's level-order values with ``None`` for missing children.

    Only children of real nodes are listed, matching the layout accepted by
    :func:`build_tree_from_level_order`.
    """

    root = None if tree is None else tree.require_root()
    if root is None:
        return []
    result: List[Optional[int]] = [tree.node(root).value]
    pending: Deque[int] = deque([root])
    while pending:
        node = tree.node(pending.popleft())
        for child in (node.left, node.right):
            if child is None:
                result.append(None)
                continue
            result.append(tree.node(child).value)
            pending.append(child)
    while result and result[-1] is None:
        result.pop()
    return result


def render_tree(tree: Optional[TreeArena]) -> str:
    """Render *tree* level-by-level, marking missing nodes with ``·``."""

    rows = [
        " ".join("·" if index is None else str(tree.node(index).value) for index in level)
        for level in _levels(tree)
    ]
    return "\n".join(rows) if rows else "<empty>"


__all__ = [
    "ArenaNode",
    "TreeArena",
    "TreeStructureError",
    "build_tree_from_level_order",
    "is_symmetric",
    "level_order_traversal",
    "render_tree",
]
