"""Exceptions raised by kahngraph."""


class GraphError(Exception):
    """Base class for kahngraph errors."""


class CycleDetectedError(GraphError):
    """The graph contains at least one directed cycle and cannot be sorted."""

    def __init__(self, msg: str = "cycle detected") -> None:
        super().__init__(msg)


class ConfigError(GraphError):
    """Error in kahngraph configuration."""
