"""
Edge model for the directed graph.

An edge is a directed, weighted arc between two nodes. Edges never own the
nodes they connect: both endpoints are held through weak references so that
the node -> edge -> node chain does not form reference cycles.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Generic, Optional

from ..types import T

if TYPE_CHECKING:
    from .node import Node


class Edge(Generic[T]):
    """
    Directed, weighted arc from one node to another.

    Attributes:
        from_node (Optional[Node[T]]): Source node, None once it is collected
        to_node (Optional[Node[T]]): Target node, None once it is collected
        weight (int): Edge weight, 0 for unweighted edges
    """

    __slots__ = ("_from_ref", "_to_ref", "_weight")

    def __init__(self, from_node: Node[T], to_node: Node[T], weight: int = 0):
        self._from_ref = weakref.ref(from_node)
        self._to_ref = weakref.ref(to_node)
        self._weight = weight

    @property
    def from_node(self) -> Optional[Node[T]]:
        return self._from_ref()

    @property
    def to_node(self) -> Optional[Node[T]]:
        return self._to_ref()

    @property
    def weight(self) -> int:
        return self._weight

    def is_between(self, node_a: Node[T], node_b: Node[T]) -> bool:
        """
        Check whether this edge runs from ``node_a`` to ``node_b``.

        Nodes are compared by identity, not by vertex value, so callers must
        pass the exact Node instances held by the graph.
        """
        return self.from_node is node_a and self.to_node is node_b

    def __str__(self) -> str:
        source = self.from_node
        target = self.to_node
        source_label = source.vertex if source is not None else "?"
        target_label = target.vertex if target is not None else "?"
        return f"{source_label} -> {target_label} ({self._weight})"

    def __repr__(self) -> str:
        return f"Edge({self})"
