"""Directed graphs on adjacency lists, and Euler-path checks on adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = ["Digraph", "is_connected", "has_eulerian_path"]


class Digraph:
    """A directed graph on the vertices ``0 .. vertex_count - 1``.

    Neighbours are visited in the order their edges were added.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(
                f"vertex {vertex} outside 0..{self.vertex_count - 1}"
            )

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = [False] * self.vertex_count
        visited[start] = True
        queue = deque([start])
        order = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first preorder."""
        self._check(start)
        visited = [False] * self.vertex_count
        visited[start] = True
        order = [start]
        stack = [iter(self._adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    stack.append(iter(self._adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def topological_order(self) -> list[int]:
        """Return a topological order found by repeatedly removing sources.

        Vertices on a cycle, and those reachable only through one, never lose
        all their incoming edges and are left out.
        """
        indegree = [0] * self.vertex_count
        for targets in self._adjacency:
            for target in targets:
                indegree[target] += 1
        queue = deque(v for v in range(self.vertex_count) if indegree[v] == 0)
        order = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for target in self._adjacency[vertex]:
                indegree[target] -= 1
                if indegree[target] == 0:
                    queue.append(target)
        return order


def _size(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    return size


def _reachable(matrix: Sequence[Sequence[int]], start: int) -> set[int]:
    seen = {start}
    stack = [start]
    while stack:
        vertex = stack.pop()
        for neighbour, linked in enumerate(matrix[vertex]):
            if linked and neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return seen


def is_connected(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether every vertex reaches every other one along nonzero entries."""
    size = _size(matrix)
    return all(len(_reachable(matrix, start)) == size for start in range(size))


def has_eulerian_path(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether an undirected graph has an Euler path or circuit.

    The graph must be connected and have at most two vertices of odd degree.
    """
    if not is_connected(matrix):
        return False
    odd = sum(1 for row in matrix if sum(1 for entry in row if entry) % 2)
    return odd <= 2