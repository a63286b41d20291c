"""Binary trees: level-order building and traversal, search trees, symmetry, and islands."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "TreeNode",
    "build_level_order",
    "bst_search",
    "bst_search_recursive",
    "bst_insert",
    "height",
    "level_order",
    "is_symmetric",
    "count_islands",
]


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    key: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from values given level by level.

    The first value is the root; after it come the left and then the right
    child of each node in the order the nodes were created. ``None`` marks a
    missing child. Running out of values leaves the remaining children empty.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            value = next(items, None)
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def bst_search(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Return the node holding ``key`` in a binary search tree, or None."""
    node = root
    while node is not None:
        if node.key == key:
            return node
        node = node.left if node.key > key else node.right
    return None


def bst_search_recursive(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Return the node holding ``key`` by recursing down a binary search tree, or None."""
    if root is None or root.key == key:
        return root
    if root.key > key:
        return bst_search_recursive(root.left, key)
    return bst_search_recursive(root.right, key)


def bst_insert(root: Optional[TreeNode], key: Any) -> TreeNode:
    """Insert ``key`` as a new leaf and return the root; a present key is left alone."""
    new = TreeNode(key)
    if root is None:
        return new
    node = root
    while True:
        if node.key == key:
            return root
        if node.key > key:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path; 0 for no tree."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Return the keys level by level, left to right within a level."""
    keys = []
    pending = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        keys.append(node.key)
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return keys


def _mirrors(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    if first is None and second is None:
        return True
    if first is None or second is None or first.key != second.key:
        return False
    return _mirrors(first.left, second.right) and _mirrors(first.right, second.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is its own mirror image; an empty tree is."""
    return _mirrors(root, root)


def count_islands(grid: Sequence[Sequence[Any]]) -> int:
    """Count groups of land cells ('1') joined up, down, left or right.

    The grid is left unchanged.
    """
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if str(cell) == "1"
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            r, c = stack.pop()
            for neighbour in ((r + 1, c), (r - 1, c), (r, c - 1), (r, c + 1)):
                if neighbour in land:
                    land.discard(neighbour)
                    stack.append(neighbour)
    return islands