"""All-pairs shortest paths by the Floyd-Warshall algorithm."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["INF", "floyd_warshall", "format_distances"]

INF = math.inf


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the shortest distance between every pair of vertices.

    ``INF`` marks a missing edge. The input is left unchanged. Raises
    ValueError when the matrix is not square.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the distance matrix must be square")
    dist = [list(row) for row in matrix]
    for k in range(size):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == INF:
                continue
            for j in range(size):
                candidate = via + through[j]
                if candidate < row[j]:
                    row[j] = candidate
    return dist


def format_distances(matrix: Sequence[Sequence[float]]) -> str:
    """Render the matrix one row per line, tab separated, with ``INF`` for no path."""
    return "\n".join(
        "\t".join("INF" if value == INF else str(value) for value in row)
        for row in matrix
    )