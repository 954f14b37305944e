"""
Data models for graph path finding.

This module provides the data structures returned by path finding:
- PathResult: Vertex and edge sequence of a found path with validation
- PerformanceMetrics: Container for search performance metrics

Example:
    >>> result = graph.find_path("A", "C").unwrap()
    >>> result.vertices
    ['A', 'B', 'C']
    >>> result.length
    2
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Generic, Iterator, List, Optional, Union

from ..exceptions import PathValidationError
from ..models import Edge
from ..types import T

if TYPE_CHECKING:
    from ..types import GraphProtocol


@dataclass
class PathResult(Generic[T]):
    """
    Container for path finding results.

    Attributes:
        vertices: Vertex sequence from start to end, both inclusive
        edges: Edges traversed, one fewer than vertices

    Example:
        >>> result = PathResult(vertices=["A"], edges=[])
        >>> len(result)
        0
    """

    vertices: List[T]
    edges: List[Edge[T]] = field(default_factory=list)

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.vertices, list):
            raise TypeError("vertices must be a list")
        if not self.vertices:
            raise ValueError("a path contains at least one vertex")
        if not all(isinstance(edge, Edge) for edge in self.edges):
            raise TypeError("edges must contain only Edge objects")
        if len(self.edges) != len(self.vertices) - 1:
            raise PathValidationError(
                f"Path of {len(self.vertices)} vertices needs {len(self.vertices) - 1} edges, "
                f"got {len(self.edges)}"
            )

    def __len__(self) -> int:
        """Return the number of edges in the path."""
        return len(self.edges)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the vertices in path order."""
        return iter(self.vertices)

    @property
    def nodes(self) -> List[T]:
        return list(self.vertices)

    @property
    def length(self) -> int:
        return len(self.edges)

    @property
    def total_weight(self) -> int:
        """Sum of edge weights along the path. Weights do not affect the search."""
        return sum(edge.weight for edge in self.edges)

    def validate(self, graph: "GraphProtocol") -> None:
        """
        Validate the path against the graph.

        Checks:
        - each edge starts where the previous one ended
        - edge endpoints match the vertex sequence
        - every edge is still present in the graph

        Raises:
            PathValidationError: If any validation check fails
        """
        for index, edge in enumerate(self.edges):
            source = edge.from_node
            target = edge.to_node
            if source is None or target is None:
                raise PathValidationError(f"Edge {index} refers to a removed vertex")
            if source.vertex != self.vertices[index]:
                raise PathValidationError(
                    f"Path discontinuity at edge {index}: "
                    f"{source.vertex} != {self.vertices[index]}"
                )
            if target.vertex != self.vertices[index + 1]:
                raise PathValidationError(
                    f"Path discontinuity at edge {index}: "
                    f"{target.vertex} != {self.vertices[index + 1]}"
                )
            if not graph.contains_edge(source.vertex, target.vertex):
                raise PathValidationError(
                    f"Edge from {source.vertex} to {target.vertex} not found in graph"
                )


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Edge count of the found path (if any)
        nodes_explored: Number of nodes dequeued during the search
        max_memory_used: Peak process memory during the operation (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="shortest_path", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if not isinstance(self.end_time, (int, float)):
            raise TypeError("end_time must be a numeric value")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

        if self.nodes_explored is not None and self.nodes_explored < 0:
            raise ValueError("nodes_explored cannot be negative")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }
