"""
digraph - Generic in-memory directed graph

This package provides an adjacency-list directed graph over arbitrary hashable
vertices. It includes:

- Vertex and edge mutation with cascading edge removal
- Membership and edge queries returning recoverable lookup results
- Unweighted shortest paths by breadth-first search
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("digraph requires Python 3.10 or higher")

from .core.exceptions import (
    EdgeNotFoundError,
    GraphOperationError,
    UnknownVertexError,
    VertexNotFoundError,
)
from .core.graph import DirectedGraph
from .core.models import Edge, Node
from .core.results import LookupResult
from .config import PathFindingConfig

__all__ = [
    "DirectedGraph",
    "Edge",
    "EdgeNotFoundError",
    "GraphOperationError",
    "LookupResult",
    "Node",
    "PathFindingConfig",
    "UnknownVertexError",
    "VertexNotFoundError",
]
