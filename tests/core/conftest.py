"""Shared test fixtures."""

import pytest

from digraph.core.graph import DirectedGraph


@pytest.fixture
def empty_graph() -> DirectedGraph:
    """Fixture providing a graph without vertices."""
    return DirectedGraph()


@pytest.fixture
def diamond_graph() -> DirectedGraph:
    """
    Fixture providing the A/B/C/D diamond.

    Edges are added A->B, B->C, A->D, D->C, so both A-B-C and A-D-C are
    shortest paths from A to C.
    """
    graph = DirectedGraph()
    for vertex in ("A", "B", "C", "D"):
        graph.add_vertex(vertex)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "D", 3)
    graph.add_edge("D", "C", 4)
    return graph


@pytest.fixture
def chain_graph() -> DirectedGraph:
    """Fixture providing 1 -> 2 -> 3 -> 4 plus a shortcut 1 -> 3 and an isolated 5."""
    graph = DirectedGraph()
    for vertex in range(1, 6):
        graph.add_vertex(vertex)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    graph.add_edge(3, 4)
    graph.add_edge(1, 3)
    return graph
