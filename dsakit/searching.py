"""Searching a sequence for a value."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["ternary_search", "find_positions"]


def ternary_search(values: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending sequence ``values``.

    Each step splits the range in three. Raises ValueError when ``key`` is absent.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        third = (high - low) // 3
        first, second = low + third, high - third
        if values[first] == key:
            return first
        if values[second] == key:
            return second
        if key < values[first]:
            high = first - 1
        elif key > values[second]:
            low = second + 1
        else:
            low, high = first + 1, second - 1
    raise ValueError(f"{key!r} is not in the sequence")


def find_positions(values: Iterable[Any], element: Any) -> list[int]:
    """Return every 1-based position at which ``element`` occurs.

    The list is empty when the element does not occur. Raises ValueError when
    there are no values to search.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot search an empty sequence")
    return [position for position, item in enumerate(items, start=1) if item == element]