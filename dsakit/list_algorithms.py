"""More algorithms on singly linked lists of ``ListNode`` objects.

An empty list is ``None``. Functions that may change which node comes first
return the new head.
"""

from __future__ import annotations

from typing import Any, Optional

from dsakit.linked_list import ListNode, to_values

__all__ = [
    "pairwise_swap_values",
    "swap_pairs",
    "remove_duplicates",
    "remove_nth_from_end",
    "nth_from_end",
    "has_cycle",
    "floyd_meeting_point",
    "intersection",
    "reorder",
    "total",
    "find_position",
]


def _nodes(head: Optional[ListNode]) -> list[ListNode]:
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    return nodes


def pairwise_swap_values(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap the values of each adjacent pair of nodes in place; the nodes stay put."""
    node = head
    while node is not None and node.next is not None:
        node.value, node.next.value = node.next.value, node.value
        node = node.next.next
    return head


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap each adjacent pair of nodes by relinking them and return the new head."""
    sentinel = ListNode(None, head)
    previous = sentinel
    current = head
    while current is not None and current.next is not None:
        second = current.next
        current.next = second.next
        second.next = current
        previous.next = second
        previous = current
        current = current.next
    return sentinel.next


def remove_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from an ascending list, keeping the first of each run."""
    node = head
    while node is not None and node.next is not None:
        if node.next.value == node.value:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end (1 is the last) and return the head.

    Raises ValueError when ``n`` is not between 1 and the length of the list.
    """
    if head is None:
        return None
    nodes = _nodes(head)
    if not 1 <= n <= len(nodes):
        raise ValueError(f"n must be between 1 and {len(nodes)}, got {n}")
    if len(nodes) == n:
        following = head.next
        head.next = None
        return following
    before = nodes[len(nodes) - n - 1]
    removed = before.next
    before.next = removed.next
    removed.next = None
    return head


def nth_from_end(head: Optional[ListNode], n: int) -> Any:
    """Return the value ``n`` nodes before the last one (0 gives the last value).

    Raises IndexError when the list has no such node.
    """
    values = to_values(head)
    if not 0 <= n < len(values):
        raise IndexError(
            f"n = {n} does not fit a list of {len(values)} elements"
        )
    return values[len(values) - 1 - n]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever comes back to a node."""
    return floyd_meeting_point(head) is not None


def floyd_meeting_point(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a slow and a fast walker meet, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def intersection(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never join."""
    if first is None or second is None:
        return None
    a, b = first, second
    while a is not b:
        a = a.next if a is not None else second
        b = b.next if b is not None else first
    return a


def reorder(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place and return the head."""
    if head is None or head.next is None or head.next.next is None:
        return head
    nodes = _nodes(head)
    current = head
    for element in reversed(nodes[len(nodes) - len(nodes) // 2:]):
        element.next = current.next
        current.next = element
        current = element.next
    current.next = None
    return head


def total(head: Optional[ListNode]) -> Any:
    """Return the sum of the values in the list; 0 for an empty list."""
    return sum(to_values(head))


def find_position(head: Optional[ListNode], value: Any) -> int:
    """Return the 1-based position of the first node holding ``value``.

    Raises ValueError when the list is empty or does not hold the value.
    """
    if head is None:
        raise ValueError("the list is empty")
    for position, item in enumerate(head, start=1):
        if item == value:
            return position
    raise ValueError(f"{value!r} is not in the list")