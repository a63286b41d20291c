"""Maximum matching in bipartite graphs by the Hopcroft-Karp algorithm."""

from __future__ import annotations

import math
from collections import deque

__all__ = ["BipartiteGraph"]

_NIL = 0


class BipartiteGraph:
    """A bipartite graph with left vertices ``1..left`` and right vertices ``1..right``."""

    def __init__(self, left: int, right: int) -> None:
        if left < 0 or right < 0:
            raise ValueError("vertex counts must not be negative")
        self.left = left
        self.right = right
        self._adjacency: list[list[int]] = [[] for _ in range(left + 1)]

    def add_edge(self, u: int, v: int) -> None:
        """Join left vertex ``u`` to right vertex ``v``."""
        if not 1 <= u <= self.left:
            raise ValueError(f"left vertex {u} outside 1..{self.left}")
        if not 1 <= v <= self.right:
            raise ValueError(f"right vertex {v} outside 1..{self.right}")
        self._adjacency[u].append(v)

    def maximum_matching(self) -> int:
        """Return the size of a maximum matching."""
        adjacency = self._adjacency
        pair_u = [_NIL] * (self.left + 1)
        pair_v = [_NIL] * (self.right + 1)
        dist = [0.0] * (self.left + 1)

        def layered() -> bool:
            queue = deque()
            for u in range(1, self.left + 1):
                if pair_u[u] == _NIL:
                    dist[u] = 0
                    queue.append(u)
                else:
                    dist[u] = math.inf
            dist[_NIL] = math.inf
            while queue:
                u = queue.popleft()
                if dist[u] < dist[_NIL]:
                    for v in adjacency[u]:
                        partner = pair_v[v]
                        if dist[partner] == math.inf:
                            dist[partner] = dist[u] + 1
                            queue.append(partner)
            return dist[_NIL] != math.inf

        def augment(u: int) -> bool:
            if u == _NIL:
                return True
            for v in adjacency[u]:
                partner = pair_v[v]
                if dist[partner] == dist[u] + 1 and augment(partner):
                    pair_v[v] = u
                    pair_u[u] = v
                    return True
            dist[u] = math.inf
            return False

        result = 0
        while layered():
            for u in range(1, self.left + 1):
                if pair_u[u] == _NIL and augment(u):
                    result += 1
        return result