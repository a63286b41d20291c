import pytest

from dsakit.matching import BipartiteGraph


def build(left, right, edges):
    graph = BipartiteGraph(left, right)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_worked_example():
    graph = build(4, 4, [(1, 2), (1, 3), (2, 1), (3, 2), (4, 2), (4, 4)])
    assert graph.maximum_matching() == 4


def test_complete_bipartite_matches_smaller_side():
    edges = [(u, v) for u in range(1, 4) for v in range(1, 6)]
    assert build(3, 5, edges).maximum_matching() == 3


def test_star_matches_once():
    graph = build(1, 4, [(1, v) for v in range(1, 5)])
    assert graph.maximum_matching() == 1


def test_no_edges():
    assert build(3, 3, []).maximum_matching() == 0


def test_shared_right_vertex():
    graph = build(3, 2, [(1, 1), (2, 1), (3, 1)])
    assert graph.maximum_matching() == 1


def test_repeated_calls_agree():
    graph = build(3, 3, [(1, 1), (1, 2), (2, 1), (3, 3)])
    first = graph.maximum_matching()
    assert graph.maximum_matching() == first
    assert first <= 3


def test_bad_vertices_rejected():
    graph = BipartiteGraph(2, 2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 1)
    with pytest.raises(ValueError):
        graph.add_edge(1, 3)
    with pytest.raises(ValueError):
        BipartiteGraph(-1, 2)