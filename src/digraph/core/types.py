"""
Core type definitions and protocols.

This module provides the vertex type variable and the protocol that path
finding code relies on, so that the search algorithms do not need to import
the concrete graph class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Iterator, Optional, Protocol, TypeVar

if TYPE_CHECKING:
    from .models.node import Node

# Vertex identity: any hashable value with a stable equality.
T = TypeVar("T", bound=Hashable)


class GraphProtocol(Protocol):
    """Protocol defining the graph operations used by path finding."""

    def get_node(self, vertex) -> Optional["Node"]:
        """Get the node stored for a vertex, if any."""
        ...

    def get_vertices(self) -> Iterator:
        """Iterate over vertices in insertion order."""
        ...

    def contains_edge(self, vertex1, vertex2) -> bool:
        """Check if an edge exists between two vertices."""
        ...
