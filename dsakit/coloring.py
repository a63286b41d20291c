"""Vertex colouring by trying colours in order, one vertex after another."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["color_graph"]


def color_graph(vertex_count: int, edges: Iterable[tuple[int, int]]) -> dict[int, int]:
    """Colour the vertices ``1..vertex_count`` of an undirected graph.

    Colours ``1..vertex_count - 1`` are available. Each vertex in turn takes
    the smallest colour none of its neighbours has; a vertex with a loop on
    itself never finds one. At the first vertex that cannot be coloured the
    search stops, leaving it and all later vertices at colour 0.
    Raises ValueError for an edge naming a vertex outside the graph.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    neighbours: dict[int, set[int]] = {v: set() for v in range(1, vertex_count + 1)}
    for a, b in edges:
        for vertex in (a, b):
            if vertex not in neighbours:
                raise ValueError(f"vertex {vertex} outside 1..{vertex_count}")
        neighbours[a].add(b)
        neighbours[b].add(a)

    colors = dict.fromkeys(neighbours, 0)
    palette = range(1, vertex_count)
    for vertex in range(1, vertex_count + 1):
        if vertex in neighbours[vertex]:
            break
        used = {colors[other] for other in neighbours[vertex]}
        choice = next((color for color in palette if color not in used), 0)
        if choice == 0:
            break
        colors[vertex] = choice
    return colors