import pytest

from classic_algorithms.errors import InvalidRangeError, InvalidTypeError, VertexNotFoundError
from classic_algorithms.graph.basic.bfs import bfs, bfs_shortest_path
from classic_algorithms.graph.basic.dfs import dfs, dfs_iterative
from classic_algorithms.utils import Graph


def test_bfs_order(sample_graph):
    assert bfs(sample_graph, "A") == ["A", "B", "C", "D", "E"]


def test_dfs_recursive_order(sample_graph):
    assert dfs(sample_graph, "A") == ["A", "B", "D", "C", "E"]


def test_dfs_iterative_matches_recursive_with_reversed_push(sample_graph):
    assert dfs_iterative(sample_graph, "A") == dfs(sample_graph, "A")


@pytest.mark.parametrize("traverse", [dfs, dfs_iterative, bfs])
def test_traversal_visits_each_reachable_vertex_once(traverse, sample_graph):
    visited = traverse(sample_graph, "C")
    assert visited[0] == "C"
    assert sorted(visited) == ["A", "B", "C", "D", "E"]


@pytest.mark.parametrize("traverse", [dfs, dfs_iterative, bfs])
def test_traversal_only_reaches_connected_component(traverse):
    graph = {"A": ["B"], "B": ["A"], "C": []}
    assert traverse(graph, "A") == ["A", "B"]
    assert traverse(graph, "C") == ["C"]


@pytest.mark.parametrize("traverse", [dfs, dfs_iterative, bfs])
def test_traversal_skips_dangling_neighbours(traverse):
    graph = {"A": ["B", "X"], "B": ["Y"]}
    assert traverse(graph, "A") == ["A", "B"]


@pytest.mark.parametrize("traverse", [dfs, dfs_iterative, bfs])
def test_traversal_missing_start(traverse, sample_graph):
    with pytest.raises(VertexNotFoundError) as excinfo:
        traverse(sample_graph, "Z")
    assert excinfo.value.vertex == "Z"
    assert isinstance(excinfo.value, InvalidRangeError)


@pytest.mark.parametrize("traverse", [dfs, dfs_iterative, bfs])
def test_traversal_rejects_non_mapping(traverse):
    with pytest.raises(InvalidTypeError):
        traverse([["A", "B"]], "A")


def test_traversal_accepts_graph_objects():
    graph = Graph()
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 4)
    assert bfs(graph, 1) == [1, 2, 3, 4]
    assert dfs(graph, 1) == [1, 2, 4, 3]
    assert dfs_iterative(graph, 1) == [1, 2, 4, 3]


def test_shortest_path(sample_graph):
    path = bfs_shortest_path(sample_graph, "A", "E")
    assert len(path) == 4
    assert path[0] == "A" and path[-1] == "E"
    for u, v in zip(path, path[1:]):
        assert v in sample_graph[u]


def test_shortest_path_same_vertex(sample_graph):
    assert bfs_shortest_path(sample_graph, "A", "A") == ["A"]


def test_shortest_path_adjacent(sample_graph):
    assert bfs_shortest_path(sample_graph, "A", "B") == ["A", "B"]


def test_shortest_path_unreachable():
    graph = {"A": ["B"], "B": [], "C": []}
    assert bfs_shortest_path(graph, "A", "C") is None


def test_shortest_path_directed():
    graph = {"A": ["B"], "B": ["C"], "C": []}
    assert bfs_shortest_path(graph, "A", "C") == ["A", "B", "C"]
    assert bfs_shortest_path(graph, "C", "A") is None


def test_shortest_path_missing_vertices(sample_graph):
    with pytest.raises(VertexNotFoundError):
        bfs_shortest_path(sample_graph, "Z", "A")
    with pytest.raises(VertexNotFoundError):
        bfs_shortest_path(sample_graph, "A", "Z")


def test_add_vertex_keeps_existing_edges():
    graph = Graph()
    graph.add_vertex("solo")
    graph.add_edge("A", "B")
    graph.add_vertex("A")
    assert "solo" in graph
    assert len(graph) == 3
    assert graph.neighbors("A") == ["B"]
    assert dfs(graph, "solo") == ["solo"]
    assert bfs(graph, "solo") == ["solo"]


def test_recursive_dfs_on_long_path_reports_depth_limit():
    path = {i: [i + 1] for i in range(5000)}
    path[5000] = []
    with pytest.raises(InvalidRangeError, match="dfs_iterative"):
        dfs(path, 0)
    assert dfs_iterative(path, 0) == list(range(5001))
