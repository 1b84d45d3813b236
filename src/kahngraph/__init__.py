"""Directed graphs with Kahn's-algorithm topological sorting."""

__all__ = [
    "ConfigError",
    "CycleDetectedError",
    "Graph",
    "GraphConfig",
    "GraphError",
    "SortStrategy",
    "find_pyproject_toml",
    "get_config",
    "load_config",
]

from ._config import GraphConfig, SortStrategy, find_pyproject_toml, get_config, load_config
from ._errors import ConfigError, CycleDetectedError, GraphError
from ._graph import Graph
