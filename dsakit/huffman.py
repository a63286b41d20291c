"""Huffman trees and the prefix codes read off them."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["HuffmanNode", "build_tree", "huffman_codes"]


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry no symbol."""

    frequency: int
    symbol: Any = None
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(symbols: Iterable[Any], frequencies: Iterable[int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly joining the two least frequent nodes.

    The first node taken becomes the left child. Raises ValueError when there
    are no symbols, the two sequences differ in length, or a frequency is negative.
    """
    symbols = list(symbols)
    frequencies = list(frequencies)
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies differ in length")
    if not symbols:
        raise ValueError("at least one symbol is needed")
    if any(frequency < 0 for frequency in frequencies):
        raise ValueError("frequencies must not be negative")

    order = itertools.count()
    heap = [
        (frequency, next(order), HuffmanNode(frequency, symbol))
        for symbol, frequency in zip(symbols, frequencies)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        joined = HuffmanNode(left.frequency + right.frequency, None, left, right)
        heapq.heappush(heap, (joined.frequency, next(order), joined))
    return heap[0][2]


def _walk(node: Optional[HuffmanNode], prefix: str) -> Iterator[tuple[Any, str]]:
    if node is None:
        return
    if node.is_leaf:
        yield node.symbol, prefix
        return
    yield from _walk(node.left, prefix + "0")
    yield from _walk(node.right, prefix + "1")


def huffman_codes(symbols: Iterable[Any], frequencies: Iterable[int]) -> dict[Any, str]:
    """Return each symbol's code, in the tree's preorder; left is 0 and right is 1.

    A lone symbol gets the empty code.
    """
    return dict(_walk(build_tree(symbols, frequencies), ""))