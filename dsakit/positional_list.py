"""A singly linked list edited by 1-based positions and by value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.linked_list import ListNode

__all__ = ["PositionalList"]


class PositionalList:
    """A linked list with insertion, update and deletion at either end or at a position."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[ListNode] = None
        self._size = 0
        for value in values:
            self.insert_back(value)

    def _node_at(self, position: int) -> ListNode:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def _require_items(self) -> None:
        if self._head is None:
            raise IndexError("the list is empty")

    def insert_front(self, value: Any) -> None:
        """Make ``value`` the first element."""
        self._head = ListNode(value, self._head)
        self._size += 1

    def insert_back(self, value: Any) -> None:
        """Make ``value`` the last element."""
        if self._head is None:
            self.insert_front(value)
            return
        self._node_at(self._size).next = ListNode(value)
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        Raises IndexError unless 1 <= position <= len(self) + 1.
        """
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"cannot insert at position {position} of {self._size} elements")
        if position == 1:
            self.insert_front(value)
            return
        previous = self._node_at(position - 1)
        previous.next = ListNode(value, previous.next)
        self._size += 1

    def update(self, old: Any, new: Any) -> int:
        """Replace every ``old`` value with ``new`` and return how many were replaced."""
        count = 0
        node = self._head
        while node is not None:
            if node.value == old:
                node.value = new
                count += 1
            node = node.next
        return count

    def delete_first(self) -> Any:
        """Remove and return the first value; IndexError when empty."""
        self._require_items()
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.value

    def delete_last(self) -> Any:
        """Remove and return the last value; IndexError when empty."""
        self._require_items()
        if self._size == 1:
            return self.delete_first()
        previous = self._node_at(self._size - 1)
        removed = previous.next
        previous.next = None
        self._size -= 1
        return removed.value

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``.

        Raises IndexError when the position lies outside the list.
        """
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} outside a list of {self._size} elements")
        if position == 1:
            return self.delete_first()
        previous = self._node_at(position - 1)
        removed = previous.next
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._head) if self._head is not None else iter(())

    def __len__(self) -> int:
        return self._size