"""Integer-keyed hash tables: separate chaining and open addressing with quadratic probing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

__all__ = ["ChainedHashTable", "QuadraticProbingMap"]


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class ChainedHashTable:
    """A hash table whose buckets hold chains of (key, value) pairs.

    Inserting a key that is already present adds another pair for it.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._buckets: list[list[tuple[int, Any]]] = [[] for _ in range(capacity)]

    def insert(self, key: int, value: Any) -> None:
        """Append the pair to the chain of its bucket."""
        self._buckets[key % self.capacity].append((key, value))

    def delete(self, key: int) -> bool:
        """Remove the first pair with ``key``; return whether one was found."""
        chain = self._buckets[key % self.capacity]
        for index, (stored, _) in enumerate(chain):
            if stored == key:
                del chain[index]
                return True
        return False

    def render(self) -> str:
        """Return one line per bucket, such as ``0 : (10,100)->NULL``."""
        return "\n".join(
            f"{index} : " + "".join(f"({k},{v})->" for k, v in chain) + "NULL"
            for index, chain in enumerate(self._buckets)
        )

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)


_TOMBSTONE = object()


class QuadraticProbingMap:
    """An open-addressing map probing ``hash + i*i`` with tombstones for deletions.

    Inserting a key that is already present keeps the stored value.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._size = 0

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self.capacity
        for step in range(self.capacity):
            yield (start + step * step) % self.capacity

    def insert(self, key: int, value: Any) -> None:
        """Store the pair in the first empty or deleted slot of its probe sequence.

        Raises OverflowError when the probe sequence finds no free slot.
        """
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot is _TOMBSTONE:
                self._slots[index] = (key, value)
                self._size += 1
                return
            if slot[0] == key:
                return
        raise OverflowError(f"no free slot for key {key}")

    def _find(self, key: int) -> Optional[int]:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _TOMBSTONE and slot[0] == key:
                return index
        return None

    def delete(self, key: int) -> bool:
        """Replace the pair with a tombstone; return whether the key was present."""
        index = self._find(key)
        if index is None:
            return False
        self._slots[index] = _TOMBSTONE
        self._size -= 1
        return True

    def get(self, key: int) -> Any:
        """Return the value stored for ``key``, or None when it is absent."""
        index = self._find(key)
        return None if index is None else self._slots[index][1]

    def render(self) -> str:
        """Return one line per slot: ``NULL``, ``(-1,-1)`` for a deleted slot, or ``key->value``."""
        lines = []
        for index, slot in enumerate(self._slots):
            if slot is None:
                text = "NULL"
            elif slot is _TOMBSTONE:
                text = "(-1,-1)"
            else:
                text = f"{slot[0]}->{slot[1]}"
            lines.append(f"{index} : {text}")
        return "\n".join(lines)

    def __len__(self) -> int:
        return self._size