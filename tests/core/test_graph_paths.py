"""
Tests for breadth-first shortest paths.
"""

import pytest

from digraph.config import PathFindingConfig
from digraph.core.exceptions import PathNotFoundError, VertexNotFoundError
from digraph.core.graph import DirectedGraph
from digraph.core.graph_paths import BreadthFirstSearch, PathResult


def test_diamond_tie_break(diamond_graph):
    """Test that insertion order decides between equal-length paths."""
    assert diamond_graph.shortest_path("A", "C") == ["A", "B", "C"]


def test_diamond_tie_break_follows_insertion_order():
    """Test that adding A->D before A->B flips the tie-break."""
    graph = DirectedGraph()
    for vertex in "ABCD":
        graph.add_vertex(vertex)
    graph.add_edge("A", "D")
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    graph.add_edge("D", "C")

    assert graph.shortest_path("A", "C") == ["A", "D", "C"]


def test_path_to_self(diamond_graph):
    """Test that a vertex reaches itself through a single-vertex path."""
    for vertex in ("A", "B", "C", "D"):
        assert diamond_graph.shortest_path(vertex, vertex) == [vertex]


def test_path_to_self_without_edges(empty_graph):
    """Test the single-vertex path on an isolated vertex."""
    empty_graph.add_vertex("solo")
    assert empty_graph.shortest_path("solo", "solo") == ["solo"]


def test_unreachable_returns_none(diamond_graph):
    """Test that edges are followed in their direction only."""
    assert diamond_graph.shortest_path("C", "A") is None
    assert diamond_graph.shortest_path("B", "D") is None


def test_missing_vertex_returns_none(diamond_graph):
    """Test that absent endpoints return None rather than raising."""
    assert diamond_graph.shortest_path("A", "Z") is None
    assert diamond_graph.shortest_path("Z", "A") is None


def test_shortcut_is_preferred(chain_graph):
    """Test that the path with the fewest edges wins over an earlier longer one."""
    assert chain_graph.shortest_path(1, 4) == [1, 3, 4]
    assert chain_graph.shortest_path(1, 5) is None
    assert chain_graph.shortest_path(2, 4) == [2, 3, 4]


def test_weights_are_ignored(empty_graph):
    """Test that fewer edges beat lower total weight."""
    for vertex in "SXYT":
        empty_graph.add_vertex(vertex)
    empty_graph.add_edge("S", "X", 1)
    empty_graph.add_edge("X", "Y", 1)
    empty_graph.add_edge("Y", "T", 1)
    empty_graph.add_edge("S", "T", 100)

    assert empty_graph.shortest_path("S", "T") == ["S", "T"]


def test_path_through_cycle(empty_graph):
    """Test searching a graph with cycles terminates with the shortest path."""
    for vertex in "ABCD":
        empty_graph.add_vertex(vertex)
    empty_graph.add_edge("A", "B")
    empty_graph.add_edge("B", "C")
    empty_graph.add_edge("C", "A")
    empty_graph.add_edge("C", "D")

    assert empty_graph.shortest_path("A", "D") == ["A", "B", "C", "D"]
    assert empty_graph.shortest_path("B", "A") == ["B", "C", "A"]


def test_path_after_vertex_removal(diamond_graph):
    """Test that searches see structural changes."""
    diamond_graph.remove_vertex("B")
    assert diamond_graph.shortest_path("A", "C") == ["A", "D", "C"]

    diamond_graph.remove_edge("D", "C")
    assert diamond_graph.shortest_path("A", "C") is None


def test_repeated_searches_are_independent(diamond_graph):
    """Test that no search state leaks between calls."""
    assert diamond_graph.shortest_path("C", "A") is None
    assert diamond_graph.shortest_path("A", "C") == ["A", "B", "C"]
    assert diamond_graph.shortest_path("D", "C") == ["D", "C"]
    assert diamond_graph.shortest_path("A", "C") == ["A", "B", "C"]


def test_find_path_result(diamond_graph):
    """Test the PathResult returned by find_path."""
    result = diamond_graph.find_path("A", "C")

    assert result.found
    path = result.unwrap()
    assert isinstance(path, PathResult)
    assert path.vertices == ["A", "B", "C"]
    assert path.length == len(path) == 2
    assert path.total_weight == 3
    assert list(path) == ["A", "B", "C"]
    path.validate(diamond_graph)


def test_find_path_misses(diamond_graph):
    """Test the misses reported by find_path."""
    unreachable = diamond_graph.find_path("C", "A")
    assert not unreachable
    with pytest.raises(PathNotFoundError):
        unreachable.unwrap()

    missing = diamond_graph.find_path("A", "Z")
    assert isinstance(missing.error, VertexNotFoundError)


def test_search_does_not_touch_nodes_by_default(diamond_graph):
    """Test that node markers stay clear unless annotation is configured."""
    diamond_graph.shortest_path("A", "C")

    for vertex in diamond_graph:
        node = diamond_graph.get_node(vertex)
        assert not node.visited
        assert node.parent is None


def test_annotate_nodes():
    """Test mirroring the finished search onto the nodes."""
    graph = DirectedGraph(config=PathFindingConfig(annotate_nodes=True))
    for vertex in "ABCDE":
        graph.add_vertex(vertex)
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    graph.add_edge("A", "D")
    graph.add_edge("D", "C")

    graph.shortest_path("A", "C")

    assert all(graph.get_node(v).visited for v in "ABCD")
    assert not graph.get_node("E").visited
    assert graph.get_node("A").parent is None
    assert graph.get_node("B").parent is graph.get_node("A")
    assert graph.get_node("C").parent is graph.get_node("B")
    assert graph.get_node("D").parent is graph.get_node("A")

    # A new search resets markers from the previous one
    graph.shortest_path("D", "C")
    assert not graph.get_node("A").visited
    assert graph.get_node("B").parent is None
    assert graph.get_node("C").parent is graph.get_node("D")

    graph.reset_traversal_state()
    assert not any(graph.get_node(v).visited for v in "ABCDE")


def test_bfs_run_order(diamond_graph):
    """Test the processing order and parents of a raw search."""
    state = BreadthFirstSearch(diamond_graph).run("A")

    assert state.order == ["A", "B", "D", "C"]
    assert state.visited == {"A", "B", "C", "D"}
    assert state.parent_of("C") == "B"
    assert state.parent_of("A") is None


def test_bfs_run_unknown_start(diamond_graph):
    """Test that a raw search from an absent vertex raises."""
    with pytest.raises(VertexNotFoundError):
        BreadthFirstSearch(diamond_graph).run("Z")


def test_bfs_explores_whole_component(chain_graph):
    """Test that the search does not stop early at the target."""
    chain_graph.shortest_path(1, 2)

    metrics = chain_graph.last_metrics
    assert metrics is not None
    assert metrics.operation == "shortest_path"
    assert metrics.nodes_explored == 4
    assert metrics.path_length == 1
    assert metrics.duration >= 0


def test_metrics_disabled():
    """Test that metrics are not recorded when tracking is off."""
    graph = DirectedGraph(config=PathFindingConfig(track_metrics=False))
    graph.add_vertex("A")
    graph.shortest_path("A", "A")

    assert graph.last_metrics is None


def test_memory_tracking(diamond_graph):
    """Test that memory tracking records a peak."""
    graph = DirectedGraph(config=PathFindingConfig(track_memory=True))
    graph.add_vertex("A")
    graph.add_vertex("B")
    graph.add_edge("A", "B")

    graph.shortest_path("A", "B")

    assert graph.last_metrics.max_memory_used > 0
    assert diamond_graph.last_metrics is None
