"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    PathNotFoundError,
    PathValidationError,
    PreconditionError,
    ResourceNotFoundError,
    UnknownVertexError,
    VertexNotFoundError,
)
from .models import Edge, Node
from .results import LookupResult
from .types import GraphProtocol
from .graph import DirectedGraph
from .graph_paths import BreadthFirstSearch, PathResult, PerformanceMetrics

__all__ = [
    "BreadthFirstSearch",
    "ConfigurationError",
    "DirectedGraph",
    "Edge",
    "EdgeNotFoundError",
    "GraphOperationError",
    "GraphProtocol",
    "LookupResult",
    "Node",
    "PathNotFoundError",
    "PathResult",
    "PathValidationError",
    "PerformanceMetrics",
    "PreconditionError",
    "ResourceNotFoundError",
    "UnknownVertexError",
    "VertexNotFoundError",
]
