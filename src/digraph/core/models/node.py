"""
Node model for the directed graph.

A node represents one vertex. It owns the vertex's outgoing edges, kept in
insertion order, and carries two traversal markers (``visited`` and
``parent``) that callers and the path finder may use as bookkeeping.
"""

from __future__ import annotations

import weakref
from typing import Generic, Iterator, List, Optional, Tuple

from ..types import T
from .edge import Edge


class Node(Generic[T]):
    """
    A single vertex with its outgoing adjacency.

    Attributes:
        vertex (T): Vertex identity, read-only after creation
        edges (Tuple[Edge[T], ...]): Outgoing edges in insertion order
        visited (bool): Traversal marker
        parent (Optional[Node[T]]): Traversal predecessor, weakly referenced
    """

    __slots__ = ("_vertex", "_edges", "_visited", "_parent_ref", "__weakref__")

    def __init__(self, vertex: T):
        self._vertex = vertex
        self._edges: List[Edge[T]] = []
        self._visited = False
        self._parent_ref: Optional[weakref.ref] = None

    @property
    def vertex(self) -> T:
        return self._vertex

    @property
    def edges(self) -> Tuple[Edge[T], ...]:
        """Read-only view of the outgoing edges in insertion order."""
        return tuple(self._edges)

    def add_edge(self, target: Node[T], weight: int = 0) -> bool:
        """
        Add an outgoing edge to ``target``.

        An existing edge to the same target is left untouched, including its
        weight, and False is returned.

        Args:
            target: Node the new edge points to
            weight: Edge weight (default: 0)

        Returns:
            bool: True if a new edge was appended
        """
        if self.has_edge(target):
            return False
        self._edges.append(Edge(self, target, weight))
        return True

    def remove_edge(self, target: Node[T]) -> bool:
        """Remove the first outgoing edge to ``target``."""
        for index, edge in enumerate(self._edges):
            if edge.is_between(self, target):
                del self._edges[index]
                return True
        return False

    def has_edge(self, target: Node[T]) -> bool:
        return any(edge.is_between(self, target) for edge in self._edges)

    def edge_count(self) -> int:
        return len(self._edges)

    def neighbors(self) -> Iterator[Node[T]]:
        """Yield target nodes in edge insertion order."""
        for edge in self._edges:
            target = edge.to_node
            if target is not None:
                yield target

    # Traversal bookkeeping

    @property
    def visited(self) -> bool:
        return self._visited

    @visited.setter
    def visited(self, value: bool) -> None:
        self._visited = value

    @property
    def parent(self) -> Optional[Node[T]]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node: Optional[Node[T]]) -> None:
        self._parent_ref = weakref.ref(node) if node is not None else None

    def reset_traversal(self) -> None:
        """Clear both traversal markers."""
        self._visited = False
        self._parent_ref = None

    def __str__(self) -> str:
        return str(self._vertex)

    def __repr__(self) -> str:
        return f"Node({self._vertex!r}, edges={len(self._edges)})"
