"""Graph module providing the directed graph container.

This module contains:
- Graph[T]: A generic, mutable directed graph with topological sorting
- The adjacency-level copy, reverse and Kahn's algorithm variants it uses
"""

from ._graph import Graph

__all__ = ["Graph"]
