"""Singly linked lists built from ``ListNode`` objects and the usual list algorithms.

An empty list is represented by ``None``. Functions that may change which node
comes first return the new head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "ListNode",
    "from_values",
    "to_values",
    "push",
    "append",
    "sorted_insert",
    "reverse",
    "reversed_values",
    "k_reverse",
    "merge_sorted",
    "is_palindrome",
    "swap_nodes",
    "rotate",
]


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    value: Any
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.value
            node = node.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of the list as a Python list."""
    return [node.value for node in _nodes(head)]


def push(head: Optional[ListNode], value: Any) -> ListNode:
    """Put ``value`` in front of the list and return the new head."""
    return ListNode(value, head)


def append(head: Optional[ListNode], value: Any) -> ListNode:
    """Add ``value`` at the end of the list and return the head."""
    node = ListNode(value)
    if head is None:
        return node
    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head


def sorted_insert(head: Optional[ListNode], value: Any) -> ListNode:
    """Insert ``value`` into an ascending list before the first node not smaller than it."""
    node = ListNode(value)
    if head is None or head.value >= value:
        node.next = head
        return node
    current = head
    while current.next is not None and current.next.value < value:
        current = current.next
    node.next = current.next
    current.next = node
    return head


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def reversed_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values from last to first, leaving the list untouched."""
    stack = to_values(head)
    return [stack.pop() for _ in range(len(stack))]


def k_reverse(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list ``k`` nodes at a time, the shorter last group included.

    A ``k`` below one leaves the list as it is.
    """
    size = max(k, 1)
    new_head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    current = head
    while current is not None:
        group_first = current
        previous: Optional[ListNode] = None
        count = 0
        while current is not None and count < size:
            following = current.next
            current.next = previous
            previous = current
            current = following
            count += 1
        if tail is None:
            new_head = previous
        else:
            tail.next = previous
        tail = group_first
    return new_head


def merge_sorted(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two ascending lists by relinking their nodes; ties take ``first`` first."""
    sentinel = ListNode(None)
    tail = sentinel
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return sentinel.next


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the values read the same both ways; an empty list is one."""
    values = to_values(head)
    half = len(values) // 2
    return all(a == b for a, b in zip(values[:half], reversed(values)))


def swap_nodes(head: Optional[ListNode], i: int, j: int) -> Optional[ListNode]:
    """Swap the nodes (not their values) at zero-based positions ``i`` and ``j``.

    Raises IndexError when a position lies outside the list.
    """
    if i == j or head is None or head.next is None:
        return head
    nodes = list(_nodes(head))
    for position in (i, j):
        if not 0 <= position < len(nodes):
            raise IndexError(f"position {position} outside a list of {len(nodes)} nodes")
    nodes[i], nodes[j] = nodes[j], nodes[i]
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    nodes[-1].next = None
    return nodes[0]


def rotate(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list counter-clockwise by ``k`` nodes.

    The list is left unchanged when ``k`` is zero or not smaller than its length.
    Raises ValueError for a negative ``k``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return head
    nodes = list(_nodes(head))
    if k >= len(nodes):
        return head
    kth = nodes[k - 1]
    new_head = kth.next
    nodes[-1].next = head
    kth.next = None
    return new_head