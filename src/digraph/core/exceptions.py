"""
Custom exceptions for the directed graph library.

This module defines the hierarchy of exceptions raised by the graph container.
Two families are kept apart on purpose:

- ``GraphOperationError`` and its subclasses signal malformed calls. They are
  never caught inside the library and always reach the caller.
- ``ResourceNotFoundError`` and its subclasses describe lookup misses. Query
  operations carry them inside a ``LookupResult`` and only raise them when the
  caller explicitly unwraps a miss.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when an operation on the graph structure is
    invalid, such as connecting vertices that were never added.

    Examples:
        * Edge creation against a missing endpoint
        * Path validation failures
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class PreconditionError(GraphOperationError):
    """
    Raised when a call violates a precondition of the operation.

    Precondition violations abort the call instead of returning a sentinel.
    """


class UnknownVertexError(PreconditionError):
    """
    Raised when an edge is added between vertices that are not in the graph.

    Attributes:
        vertex: The first endpoint found missing
    """

    def __init__(self, vertex: object):
        self.vertex = vertex
        super().__init__(f"Vertex '{vertex}' does not exist")


class PathValidationError(GraphOperationError):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Discontinuities in the path (vertices not properly connected)
    - Edges that are no longer present in the graph
    - Vertex and edge sequences of mismatching length
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when unwrapping a lookup that found nothing.

    Examples:
        * Vertex not found
        * Edge not found
        * No path between two vertices
    """


class VertexNotFoundError(ResourceNotFoundError):
    """Raised when a requested vertex is not found."""


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    This exception is a specialized version of ResourceNotFoundError for
    lookups such as ``edge_weight_if_exist`` where no edge connects the
    requested ordered pair.
    """


class PathNotFoundError(ResourceNotFoundError):
    """Raised when the end vertex cannot be reached from the start vertex."""


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Negative sampling intervals
        * Unparseable environment overrides
    """
