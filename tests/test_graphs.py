import pytest

from dsakit.graphs import Digraph, has_eulerian_path, is_connected


@pytest.fixture
def sample():
    graph = Digraph(4)
    for source, target in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        graph.add_edge(source, target)
    return graph


EULER_PATH = [
    [0, 1, 1, 1, 0],
    [1, 0, 1, 0, 0],
    [1, 1, 0, 0, 0],
    [1, 0, 0, 0, 1],
    [0, 0, 0, 1, 0],
]
EULER_CIRCUIT = [
    [0, 1, 1, 1, 1],
    [1, 0, 1, 0, 0],
    [1, 1, 0, 0, 0],
    [1, 0, 0, 0, 1],
    [1, 0, 0, 1, 0],
]
NOT_EULERIAN = [
    [0, 1, 1, 1, 0],
    [1, 0, 1, 1, 0],
    [1, 1, 0, 0, 0],
    [1, 1, 0, 0, 1],
    [0, 0, 0, 1, 0],
]


def test_bfs_from_two(sample):
    assert sample.bfs(2) == [2, 0, 3, 1]


def test_dfs_from_two(sample):
    assert sample.dfs(2) == [2, 0, 1, 3]


def test_traversal_stays_in_reachable_part():
    graph = Digraph(3)
    graph.add_edge(1, 2)
    assert graph.bfs(0) == [0]
    assert graph.dfs(0) == [0]


def test_topological_order_respects_edges():
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    graph = Digraph(6)
    for source, target in edges:
        graph.add_edge(source, target)
    order = graph.topological_order()
    assert sorted(order) == list(range(6))
    position = {vertex: index for index, vertex in enumerate(order)}
    for source, target in edges:
        assert position[source] < position[target]


def test_topological_order_leaves_out_cycles():
    graph = Digraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 0)
    assert graph.topological_order() == [2]


def test_bad_vertex_rejected():
    graph = Digraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2)
    with pytest.raises(ValueError):
        graph.bfs(-1)
    with pytest.raises(ValueError):
        Digraph(-1)


def test_eulerian_matrices():
    assert has_eulerian_path(EULER_PATH) is True
    assert has_eulerian_path(EULER_CIRCUIT) is True
    assert has_eulerian_path(NOT_EULERIAN) is False


def test_disconnected_graph():
    matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    assert is_connected(matrix) is False
    assert has_eulerian_path(matrix) is False
    assert is_connected(EULER_PATH) is True


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        is_connected([[0, 1], [1]])