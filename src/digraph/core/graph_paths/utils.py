"""
Utility functions for path finding operations.
"""

import logging
import os
import time
from contextlib import contextmanager
from typing import Generator

import psutil

logger = logging.getLogger(__name__)


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


class MemoryManager:
    """
    Peak memory tracking for graph searches.

    Samples are rate limited by ``check_interval``. Memory is only observed;
    a search is never interrupted because of it.
    """

    def __init__(self, check_interval: float = 0.1):
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._check_interval = check_interval
        self._last_check = time.monotonic()

    def check_memory(self, force: bool = False) -> None:
        """Sample memory usage if the check interval has elapsed."""
        now = time.monotonic()
        if not force and now - self._last_check < self._check_interval:
            return
        self._last_check = now
        self._peak_memory = max(self._peak_memory, get_memory_usage())

    @property
    def peak_memory(self) -> int:
        """Peak memory usage in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        return self._peak_memory / 1024 / 1024

    def reset_peak_memory(self) -> None:
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.monotonic()


@contextmanager
def timer(label: str = "") -> Generator[None, None, None]:
    """Context manager logging the duration of the wrapped block."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        if label:
            logger.debug("%s: %.1fms", label, duration * 1000)
