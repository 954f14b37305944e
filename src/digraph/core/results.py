"""
Recoverable results for graph queries.

Query operations that may legitimately find nothing return a ``LookupResult``
instead of mixing booleans, ``None`` and exceptions. A miss carries the
``ResourceNotFoundError`` describing what was missing; it is raised only when
the caller asks for the value with ``unwrap``.

Example:
    >>> result = graph.find_edge_weight("A", "B")
    >>> if result:
    ...     print(result.value)
    >>> weight = result.value_or(0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import ResourceNotFoundError

V = TypeVar("V")


@dataclass(frozen=True)
class LookupResult(Generic[V]):
    """
    Value-or-miss container returned by graph queries.

    Attributes:
        value: The found value, None on a miss
        error: The error describing a miss, None on a hit
    """

    value: Optional[V] = None
    error: Optional[ResourceNotFoundError] = None

    def __post_init__(self):
        """Validate that exactly one of value/error describes the outcome."""
        if self.error is not None and self.value is not None:
            raise ValueError("a lookup miss cannot carry a value")

    @classmethod
    def hit(cls, value: V) -> "LookupResult[V]":
        return cls(value=value)

    @classmethod
    def miss(cls, error: ResourceNotFoundError) -> "LookupResult[V]":
        if not isinstance(error, ResourceNotFoundError):
            raise TypeError("error must be a ResourceNotFoundError")
        return cls(error=error)

    @property
    def found(self) -> bool:
        return self.error is None

    def unwrap(self) -> V:
        """
        Return the found value.

        Raises:
            ResourceNotFoundError: The stored miss, if nothing was found
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: Optional[V] = None) -> Optional[V]:
        return self.value if self.found else default

    def __bool__(self) -> bool:
        return self.found
