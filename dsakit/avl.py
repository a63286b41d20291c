"""AVL trees: binary search trees kept balanced by rotations on insertion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["AVLNode", "AVLTree"]


@dataclass(eq=False)
class AVLNode:
    """A tree node; a leaf has height 1."""

    key: Any
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    height: int = 1


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _computed_height(node: AVLNode) -> int:
    return max(_height(node.left), _height(node.right)) + 1


def _balance(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    node.height = _computed_height(node)
    pivot.height = _computed_height(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    node.height = _computed_height(node)
    pivot.height = _computed_height(pivot)
    return pivot


def _insert(node: Optional[AVLNode], key: Any) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    node.height = _computed_height(node)

    balance = _balance(node)
    if balance == 2:
        child = _balance(node.left)
        if child == 1:
            return _rotate_right(node)
        if child == -1:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
    elif balance == -2:
        child = _balance(node.right)
        if child == -1:
            return _rotate_left(node)
        if child == 1:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
    return node


def _inorder(node: Optional[AVLNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


class AVLTree:
    """A self-balancing binary search tree; inserting a present key changes nothing."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def insert(self, key: Any) -> None:
        """Insert ``key`` and rebalance on the way back up."""
        self.root = _insert(self.root, key)

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(_inorder(self.root))