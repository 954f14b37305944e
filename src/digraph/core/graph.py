"""
Core graph data structure with an adjacency list representation.

This module provides the DirectedGraph class. Each vertex is stored as a Node
that owns its outgoing edges, and the graph maps vertex identities to those
nodes. Vertices may be any hashable value.

The graph is not thread-safe. Searches and mutations must be serialized by
the caller when a graph is shared between threads.
"""

import logging
from types import MappingProxyType
from typing import Dict, Generic, Iterator, List, Mapping, Optional

from ..config import PathFindingConfig
from .exceptions import EdgeNotFoundError, UnknownVertexError, VertexNotFoundError
from .graph_paths.bfs import BreadthFirstSearch
from .graph_paths.models import PathResult, PerformanceMetrics
from .graph_paths.utils import timer
from .models import Edge, Node
from .results import LookupResult
from .types import T

logger = logging.getLogger(__name__)


class DirectedGraph(Generic[T]):
    """
    Directed graph with weighted edges and unweighted shortest paths.

    At most one edge exists per ordered pair of vertices. Adding an edge that
    already exists is rejected and keeps the original weight.

    Attributes:
        config (PathFindingConfig): Settings applied to shortest path searches
        last_metrics (Optional[PerformanceMetrics]): Metrics of the latest search
    """

    def __init__(self, config: Optional[PathFindingConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[PathFindingConfig]): Search settings, defaults
                are used when omitted
        """
        self.config = config or PathFindingConfig()
        self._vertices: Dict[T, Node[T]] = {}
        self._last_metrics: Optional[PerformanceMetrics] = None

    @property
    def adjacency(self) -> Mapping[T, Node[T]]:
        """Read-only view of the vertex to node mapping."""
        return MappingProxyType(self._vertices)

    @property
    def last_metrics(self) -> Optional[PerformanceMetrics]:
        return self._last_metrics

    def get_node(self, vertex: T) -> Optional[Node[T]]:
        """Get the node stored for a vertex, if any."""
        return self._vertices.get(vertex)

    # Mutation

    def add_vertex(self, vertex: T) -> bool:
        """
        Add a vertex to the graph.

        Returns:
            bool: False if the vertex was already present
        """
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = Node(vertex)
        logger.debug("Added vertex %r", vertex)
        return True

    def add_edge(self, vertex1: T, vertex2: T, weight: int = 0) -> bool:
        """
        Add a directed edge from ``vertex1`` to ``vertex2``.

        Args:
            vertex1: Vertex where the edge begins
            vertex2: Vertex where the edge ends
            weight: Edge weight (default: 0)

        Returns:
            bool: False if the edge already existed; its weight is unchanged

        Raises:
            UnknownVertexError: If either vertex is not in the graph
        """
        if vertex1 not in self._vertices:
            raise UnknownVertexError(vertex1)
        if vertex2 not in self._vertices:
            raise UnknownVertexError(vertex2)

        added = self._vertices[vertex1].add_edge(self._vertices[vertex2], weight)
        if added:
            logger.debug("Added edge %r -> %r (weight %s)", vertex1, vertex2, weight)
        else:
            logger.debug("Edge %r -> %r already exists, weight kept", vertex1, vertex2)
        return added

    def remove_vertex(self, vertex: T) -> bool:
        """
        Remove a vertex along with every edge into or out of it.

        Returns:
            bool: False if no such vertex was found
        """
        to_remove = self._vertices.get(vertex)
        if to_remove is None:
            return False

        # Incoming edges first, then the node and its outgoing edges.
        for node in self._vertices.values():
            node.remove_edge(to_remove)
        del self._vertices[vertex]
        logger.debug("Removed vertex %r", vertex)
        return True

    def remove_edge(self, vertex1: T, vertex2: T) -> bool:
        """
        Remove the directed edge from ``vertex1`` to ``vertex2``.

        Returns:
            bool: False if either vertex or the edge does not exist
        """
        node1 = self._vertices.get(vertex1)
        node2 = self._vertices.get(vertex2)
        if node1 is None or node2 is None:
            return False
        removed = node1.remove_edge(node2)
        if removed:
            logger.debug("Removed edge %r -> %r", vertex1, vertex2)
        return removed

    # Queries

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return sum(node.edge_count() for node in self._vertices.values())

    def contains_vertex(self, vertex: T) -> bool:
        return vertex in self._vertices

    def contains_edge(self, vertex1: T, vertex2: T) -> bool:
        node1 = self._vertices.get(vertex1)
        node2 = self._vertices.get(vertex2)
        if node1 is None or node2 is None:
            return False
        return node1.has_edge(node2)

    def find_edge(self, vertex1: T, vertex2: T) -> LookupResult[Edge[T]]:
        """
        Look up the edge from ``vertex1`` to ``vertex2``.

        Scans the outgoing edges of ``vertex1`` for a target whose vertex
        equals ``vertex2``.
        """
        node1 = self._vertices.get(vertex1)
        if node1 is None:
            return LookupResult.miss(VertexNotFoundError(f"Vertex '{vertex1}' not found"))
        if vertex2 not in self._vertices:
            return LookupResult.miss(VertexNotFoundError(f"Vertex '{vertex2}' not found"))

        for edge in node1.edges:
            target = edge.to_node
            if target is not None and target.vertex == vertex2:
                return LookupResult.hit(edge)
        return LookupResult.miss(
            EdgeNotFoundError(f"No edge exists from '{vertex1}' to '{vertex2}'")
        )

    def find_edge_weight(self, vertex1: T, vertex2: T) -> LookupResult[int]:
        found = self.find_edge(vertex1, vertex2)
        if not found:
            return LookupResult.miss(
                EdgeNotFoundError(f"No edge exists from '{vertex1}' to '{vertex2}'")
            )
        return LookupResult.hit(found.unwrap().weight)

    def edge_if_exist(self, vertex1: T, vertex2: T) -> Optional[Edge[T]]:
        """Get the edge between two vertices, or None."""
        return self.find_edge(vertex1, vertex2).value_or(None)

    def edge_weight_if_exist(self, vertex1: T, vertex2: T) -> int:
        """
        Get the weight of the edge between two vertices.

        Raises:
            EdgeNotFoundError: If there is no edge from ``vertex1`` to ``vertex2``
        """
        return self.find_edge_weight(vertex1, vertex2).unwrap()

    def get_vertices(self) -> Iterator[T]:
        """Iterate over vertices in insertion order."""
        return iter(list(self._vertices))

    def get_edges(self) -> Iterator[Edge[T]]:
        """Iterate over all edges, grouped by source vertex."""
        for node in list(self._vertices.values()):
            yield from node.edges

    def get_neighbors(self, vertex: T) -> List[T]:
        """Get the targets of a vertex's outgoing edges, in insertion order."""
        node = self._vertices.get(vertex)
        if node is None:
            return []
        return [neighbor.vertex for neighbor in node.neighbors()]

    # Paths

    def find_path(self, start_vertex: T, end_vertex: T) -> LookupResult[PathResult[T]]:
        """
        Find the path with the fewest edges between two vertices.

        Edge weights are ignored. The search always explores the whole
        component reachable from ``start_vertex``.
        """
        with timer(f"shortest_path {start_vertex!r} -> {end_vertex!r}"):
            finder: BreadthFirstSearch[T] = BreadthFirstSearch(self, self.config)
            result = finder.find_path(start_vertex, end_vertex)
        if finder.last_metrics is not None:
            self._last_metrics = finder.last_metrics
        return result

    def shortest_path(self, start_vertex: T, end_vertex: T) -> Optional[List[T]]:
        """
        Get the shortest path from ``start_vertex`` to ``end_vertex``.

        Returns:
            Optional[List[T]]: Vertices from start to end, both inclusive, or
            None if either vertex is missing or end is unreachable
        """
        result = self.find_path(start_vertex, end_vertex)
        if not result:
            return None
        return result.unwrap().vertices

    def reset_traversal_state(self) -> None:
        """Clear ``visited`` and ``parent`` on every node."""
        for node in self._vertices.values():
            node.reset_traversal()

    # Python protocols

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __iter__(self) -> Iterator[T]:
        return self.get_vertices()

    def __str__(self) -> str:
        lines = []
        for node in self._vertices.values():
            line = str(node)
            if node.edge_count():
                line += ":"
            for edge in node.edges:
                line += f" -> {edge.to_node}"
                if edge.weight != 0:
                    line += f" ({edge.weight})"
            lines.append(line)
        return "\n".join(lines)
