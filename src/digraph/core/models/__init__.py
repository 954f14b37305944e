"""
Core domain models package for the directed graph.

This package provides the node and edge structures that make up the
adjacency list of a graph.
"""

from .edge import Edge
from .node import Node

__all__ = [
    "Edge",
    "Node",
]
