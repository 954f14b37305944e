"""
Breadth-first search and unweighted shortest paths.

The search keeps its transient state (visited set, discovery parents) in a
``SearchState`` created for each call, so nothing leaks between searches and
the nodes stored in the graph are left untouched unless
``PathFindingConfig.annotate_nodes`` asks for the state to be mirrored onto
them.

Edge weights are ignored: the shortest path is the one with the fewest edges.
Ties are broken by adjacency insertion order, because neighbours are enqueued
in that order and each vertex keeps the first parent that discovered it.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from time import time
from typing import Deque, Dict, Generic, List, Optional, Set

from ...config import PathFindingConfig
from ..exceptions import PathNotFoundError, VertexNotFoundError
from ..models import Edge, Node
from ..results import LookupResult
from ..types import GraphProtocol, T
from .models import PathResult, PerformanceMetrics
from .utils import MemoryManager

logger = logging.getLogger(__name__)


@dataclass
class SearchState(Generic[T]):
    """
    Transient state of one breadth-first search.

    Attributes:
        start: Root vertex of the search
        visited: Vertices dequeued so far
        parent_edges: For each discovered vertex except the root, the edge it
            was first discovered through
        order: Vertices in the order they were dequeued
    """

    start: T
    visited: Set[T] = field(default_factory=set)
    parent_edges: Dict[T, Edge[T]] = field(default_factory=dict)
    order: List[T] = field(default_factory=list)

    def is_discovered(self, vertex: T) -> bool:
        return vertex == self.start or vertex in self.parent_edges

    def parent_of(self, vertex: T) -> Optional[T]:
        edge = self.parent_edges.get(vertex)
        if edge is None or edge.from_node is None:
            return None
        return edge.from_node.vertex

    def path_to(self, end: T) -> Optional[PathResult[T]]:
        """
        Reconstruct the path from the root to ``end``.

        Walks parent edges backwards from ``end`` until the root is reached.
        A missing parent on the way means ``end`` was never reached.
        """
        vertices = [end]
        edges: List[Edge[T]] = []
        current = end
        while current != self.start:
            edge = self.parent_edges.get(current)
            if edge is None or edge.from_node is None:
                return None
            edges.append(edge)
            current = edge.from_node.vertex
            vertices.append(current)
        vertices.reverse()
        edges.reverse()
        return PathResult(vertices=vertices, edges=edges)


class PathFinder(ABC, Generic[T]):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: GraphProtocol, config: Optional[PathFindingConfig] = None):
        """Initialize finder with graph and configuration."""
        self.graph = graph
        self.config = config or PathFindingConfig()
        self.last_metrics: Optional[PerformanceMetrics] = None

    @abstractmethod
    def find_path(self, start_vertex: T, end_vertex: T) -> LookupResult[PathResult[T]]:
        """Find a path between two vertices."""

    def check_vertices(
        self, start_vertex: T, end_vertex: T
    ) -> Optional[LookupResult[PathResult[T]]]:
        """Return a miss if either vertex is absent, None otherwise."""
        if self.graph.get_node(start_vertex) is None:
            error = VertexNotFoundError(f"Start vertex '{start_vertex}' not found")
            return LookupResult.miss(error)
        if self.graph.get_node(end_vertex) is None:
            error = VertexNotFoundError(f"End vertex '{end_vertex}' not found")
            return LookupResult.miss(error)
        return None


class BreadthFirstSearch(PathFinder[T]):
    """Unweighted shortest paths by breadth-first search."""

    def __init__(self, graph: GraphProtocol, config: Optional[PathFindingConfig] = None):
        super().__init__(graph, config)
        self._memory_peak: Optional[int] = None

    def run(self, start_vertex: T) -> SearchState[T]:
        """
        Explore every vertex reachable from ``start_vertex``.

        The root is enqueued first and, like every other node, marked visited
        when it is dequeued. The whole reachable component is explored.

        Raises:
            VertexNotFoundError: If the start vertex is not in the graph
        """
        start_node = self.graph.get_node(start_vertex)
        if start_node is None:
            raise VertexNotFoundError(f"Start vertex '{start_vertex}' not found")

        memory = None
        if self.config.track_memory:
            memory = MemoryManager(self.config.memory_check_interval)
        state: SearchState[T] = SearchState(start=start_vertex)
        queue: Deque[Node[T]] = deque([start_node])

        while queue:
            node = queue.popleft()
            state.visited.add(node.vertex)
            state.order.append(node.vertex)
            if memory is not None:
                memory.check_memory()

            for edge in node.edges:
                neighbor = edge.to_node
                if neighbor is None:
                    continue
                if neighbor.vertex in state.visited or state.is_discovered(neighbor.vertex):
                    continue
                state.parent_edges[neighbor.vertex] = edge
                queue.append(neighbor)

        self._memory_peak = None
        if memory is not None:
            memory.check_memory(force=True)
            self._memory_peak = memory.peak_memory

        if self.config.annotate_nodes:
            self.annotate_nodes(state)

        logger.debug(
            "BFS from %r explored %d of %d vertices",
            start_vertex,
            len(state.order),
            sum(1 for _ in self.graph.get_vertices()),
        )
        return state

    def annotate_nodes(self, state: SearchState[T]) -> None:
        """Reset every node's markers, then copy ``state`` onto them."""
        for vertex in self.graph.get_vertices():
            node = self.graph.get_node(vertex)
            if node is not None:
                node.reset_traversal()
        for vertex in state.visited:
            node = self.graph.get_node(vertex)
            if node is not None:
                node.visited = True
        for vertex, edge in state.parent_edges.items():
            node = self.graph.get_node(vertex)
            if node is not None:
                node.parent = edge.from_node

    def find_path(self, start_vertex: T, end_vertex: T) -> LookupResult[PathResult[T]]:
        """
        Find the path with the fewest edges from ``start_vertex`` to ``end_vertex``.

        Returns:
            LookupResult[PathResult]: A hit with the path, or a miss carrying
            ``VertexNotFoundError`` or ``PathNotFoundError``
        """
        missing = self.check_vertices(start_vertex, end_vertex)
        if missing is not None:
            return missing

        metrics = PerformanceMetrics(operation="shortest_path", start_time=time())
        state = self.run(start_vertex)
        path = state.path_to(end_vertex)

        metrics.end_time = time()
        metrics.nodes_explored = len(state.order)
        metrics.path_length = path.length if path is not None else None
        metrics.max_memory_used = self._memory_peak
        if self.config.track_metrics:
            self.last_metrics = metrics

        if path is None:
            logger.debug("No path from %r to %r", start_vertex, end_vertex)
            return LookupResult.miss(
                PathNotFoundError(f"No path exists between {start_vertex} and {end_vertex}")
            )
        return LookupResult.hit(path)
