"""Assorted problems on arrays of numbers."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from itertools import accumulate, combinations

__all__ = [
    "has_pair_with_sum",
    "kth_largest_subarray_sum",
    "has_subset_sum",
    "matrix_chain_cost",
    "minimal_badness",
]


def has_pair_with_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether two elements at different positions add up to ``target``."""
    return any(a + b == target for a, b in combinations(list(values), 2))


def kth_largest_subarray_sum(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th largest sum among all contiguous subarrays.

    Raises ValueError when ``k`` is not between 1 and the number of subarrays.
    """
    items = list(values)
    sums = sorted(
        total
        for start in range(len(items))
        for total in accumulate(items[start:])
    )
    if not 1 <= k <= len(sums):
        raise ValueError(f"k must be between 1 and {len(sums)}, got {k}")
    return sums[len(sums) - k]


def has_subset_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether some subset of ``values`` adds up to ``target``.

    Elements larger than what is still to be reached are skipped; the empty
    subset reaches zero.
    """
    items = tuple(values)

    @lru_cache(maxsize=None)
    def reachable(count: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if count == 0:
            return False
        last = items[count - 1]
        if last > remaining:
            return reachable(count - 1, remaining)
        return reachable(count - 1, remaining) or reachable(count - 1, remaining - last)

    return reachable(len(items), target)


def matrix_chain_cost(dimensions: Iterable[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply a chain.

    Matrix ``i`` has shape ``dimensions[i-1] x dimensions[i]``. Raises
    ValueError when fewer than two dimensions are given.
    """
    dims = list(dimensions)
    if len(dims) < 2:
        raise ValueError("at least two dimensions are needed")
    count = len(dims) - 1
    cost = [[0] * (count + 1) for _ in range(count + 1)]
    for length in range(2, count + 1):
        for i in range(1, count - length + 2):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return cost[1][count]


def minimal_badness(preferred_ranks: Iterable[int]) -> int:
    """Return the least total distance between preferred and assigned ranks.

    Teams are ranked 1..n, each given the nearest rank still free in order of
    preference. Raises ValueError for a rank below one.
    """
    ranks = sorted(preferred_ranks)
    if ranks and ranks[0] < 1:
        raise ValueError("ranks start at 1")
    return sum(abs(actual - wanted) for actual, wanted in enumerate(ranks, start=1))