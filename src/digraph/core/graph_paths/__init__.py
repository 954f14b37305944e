"""Graph path finding functionality."""

from .bfs import BreadthFirstSearch, PathFinder, SearchState
from .models import PathResult, PerformanceMetrics
from .utils import MemoryManager, get_memory_usage, timer

__all__ = [
    "BreadthFirstSearch",
    "MemoryManager",
    "PathFinder",
    "PathResult",
    "PerformanceMetrics",
    "SearchState",
    "get_memory_usage",
    "timer",
]
