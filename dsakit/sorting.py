"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new sorted list. The input
is left untouched.
"""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any

__all__ = [
    "quick_sort_middle_pivot",
    "quick_sort",
    "quick_sort_first_pivot",
    "radix_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "bubble_sort",
    "selection_sort",
    "wave_sort",
    "merge_k_sorted",
]

_Partition = Callable[[MutableSequence[Any], int, int], int]


def _quick(items: MutableSequence[Any], partition: _Partition) -> None:
    """Quicksort that recurses into the smaller side and loops over the larger."""

    def sort(low: int, high: int) -> None:
        while low < high:
            pivot = partition(items, low, high)
            if pivot - low < high - pivot:
                sort(low, pivot - 1)
                low = pivot + 1
            else:
                sort(pivot + 1, high)
                high = pivot - 1

    sort(0, len(items) - 1)


def _middle_partition(items: MutableSequence[Any], low: int, high: int) -> int:
    middle = (low + high) // 2
    items[middle], items[high] = items[high], items[middle]
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[high] = items[store]
    items[store] = pivot
    return store


def _last_partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] < pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def _first_partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[low]
    smaller = sum(1 for index in range(low + 1, high + 1) if items[index] <= pivot)
    place = low + smaller
    items[place], items[low] = items[low], items[place]
    i, j = low, high
    while i < place < j:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < place < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return place


def quick_sort_middle_pivot(values: Iterable[Any]) -> list[Any]:
    """Quicksort with Lomuto partitioning around the middle element."""
    items = list(values)
    _quick(items, _middle_partition)
    return items


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with Lomuto partitioning around the last element."""
    items = list(values)
    _quick(items, _last_partition)
    return items


def quick_sort_first_pivot(values: Iterable[Any]) -> list[Any]:
    """Quicksort that counts its way to the final place of the first element."""
    items = list(values)
    _quick(items, _first_partition)
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers.

    Raises ValueError for a negative value.
    """
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // place) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        place *= 10
    return items


def _sift_down(items: MutableSequence[Any], size: int, root: int) -> None:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and moving its top to the end repeatedly."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by shifting each element left past the larger ones before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(first: list[Any], second: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by passes that carry the largest remaining element to the end."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each time."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def wave_sort(values: Iterable[Any]) -> list[Any]:
    """Arrange the values so that every odd position is at least its neighbours."""
    items = list(values)
    for i in range(1, len(items), 2):
        if items[i - 1] > items[i]:
            items[i], items[i - 1] = items[i - 1], items[i]
        if i < len(items) - 1 and items[i] < items[i + 1]:
            items[i], items[i + 1] = items[i + 1], items[i]
    return items


def merge_k_sorted(arrays: Iterable[Iterable[Any]]) -> list[Any]:
    """Merge any number of ascending sequences into one ascending list."""
    return list(heapq.merge(*(list(array) for array in arrays)))