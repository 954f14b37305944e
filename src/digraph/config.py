"""
Configuration for path finding.

Defaults are defined as module constants. ``PathFindingConfig.from_env`` lets
a deployment override them through ``DIGRAPH_*`` environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.exceptions import ConfigurationError

# =============================================================================
# Defaults
# =============================================================================

# Record PerformanceMetrics for every search
DEFAULT_TRACK_METRICS = True

# Sample process memory (psutil) while searching
DEFAULT_TRACK_MEMORY = False

# Minimum seconds between two memory samples
DEFAULT_MEMORY_CHECK_INTERVAL = 0.1

# Mirror search state onto Node.visited / Node.parent after each search
DEFAULT_ANNOTATE_NODES = False

ENV_PREFIX = "DIGRAPH_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _parse_float(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class PathFindingConfig:
    """
    Settings applied to every search run by a graph.

    Attributes:
        track_metrics (bool): Record PerformanceMetrics for each search
        track_memory (bool): Sample process RSS during searches
        memory_check_interval (float): Minimum seconds between memory samples
        annotate_nodes (bool): Mirror the finished search onto the nodes
    """

    track_metrics: bool = DEFAULT_TRACK_METRICS
    track_memory: bool = DEFAULT_TRACK_MEMORY
    memory_check_interval: float = DEFAULT_MEMORY_CHECK_INTERVAL
    annotate_nodes: bool = DEFAULT_ANNOTATE_NODES

    def __post_init__(self):
        """Validate configuration values."""
        for name in ("track_metrics", "track_memory", "annotate_nodes"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be a boolean")
        if not isinstance(self.memory_check_interval, (int, float)):
            raise ConfigurationError("memory_check_interval must be a numeric value")
        if self.memory_check_interval < 0:
            raise ConfigurationError("memory_check_interval cannot be negative")

    @classmethod
    def from_env(
        cls, prefix: str = ENV_PREFIX, environ: Optional[Mapping[str, str]] = None
    ) -> "PathFindingConfig":
        """
        Build a configuration from environment variables.

        Unset variables keep their defaults.

        Args:
            prefix: Variable name prefix (default: ``DIGRAPH_``)
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        kwargs = {}
        for field_name in ("track_metrics", "track_memory", "annotate_nodes"):
            key = f"{prefix}{field_name.upper()}"
            if key in env:
                kwargs[field_name] = _parse_bool(key, env[key])
        interval_key = f"{prefix}MEMORY_CHECK_INTERVAL"
        if interval_key in env:
            kwargs["memory_check_interval"] = _parse_float(interval_key, env[interval_key])
        return cls(**kwargs)
