"""Generic mutable directed graph with topological sorting."""

import logging
from collections.abc import Hashable, Iterable, Iterator
from typing import Self

from kahngraph._config import GraphConfig, SortStrategy
from kahngraph._errors import CycleDetectedError

from ._algorithms import copy_adjacency, reverse_adjacency, sort_by_indegree, sort_by_reversal

logger = logging.getLogger(__name__)

_SORTERS = {
    SortStrategy.INDEGREE: sort_by_indegree,
    SortStrategy.REVERSE: sort_by_reversal,
}


class Graph[T: Hashable]:
    """A directed graph mapping each node to the set of nodes it points to.

    Nodes are created implicitly: adding an edge creates both endpoints.
    There is no way to remove a node or an edge once added, and cycles are
    only detected when sorting.

    Example:
        >>> graph = Graph[str]()
        >>> graph.add("b", ["c"])
        >>> graph.edge("c", "a")
        >>> graph.sort()
        ['b', 'c', 'a']

    The graph is not safe for concurrent mutation. Sorting reads the graph
    without modifying it.

    """

    __slots__ = ("_config", "_nodes")

    def __init__(self, *, config: GraphConfig | None = None) -> None:
        self._nodes: dict[T, set[T]] = {}
        self._config = config if config is not None else GraphConfig()

    @classmethod
    def _from_adjacency(cls, nodes: dict[T, set[T]], config: GraphConfig) -> Self:
        graph = cls(config=config)
        graph._nodes = nodes
        return graph

    @property
    def config(self) -> GraphConfig:
        """Settings used by this graph and the graphs derived from it."""
        return self._config

    def _node(self, key: T) -> set[T]:
        edges = self._nodes.get(key)
        if edges is None:
            edges = self._nodes[key] = set()
        return edges

    def node(self, key: T) -> frozenset[T]:
        """Ensure a node exists and return its outgoing edges.

        Args:
            key: The node to create if missing.

        Returns:
            The nodes that ``key`` points to.

        """
        return frozenset(self._node(key))

    def edge(self, from_: T, to: T) -> None:
        """Add an edge ``from_ -> to``, creating either node if missing."""
        self._node(to)
        self._node(from_).add(to)

    def add(self, node: T, edges: Iterable[T]) -> None:
        """Add a node together with edges to each of ``edges``.

        Args:
            node: The source node, created if missing.
            edges: Target nodes, each created if missing.

        """
        source = self._node(node)
        for target in edges:
            self._node(target)
            source.add(target)

    def reverse(self) -> Self:
        """Return a new graph with every edge reversed."""
        return self._from_adjacency(reverse_adjacency(self._nodes), self._config)

    def copy(self) -> Self:
        """Return a new graph with the same nodes and edges."""
        return self._from_adjacency(copy_adjacency(self._nodes), self._config)

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, object]) -> Self:
        return self.copy()

    def sort(self, strategy: SortStrategy | None = None) -> list[T]:
        """Return the nodes in topological order using Kahn's algorithm.

        For every edge ``a -> b``, ``a`` comes before ``b``. The order among
        nodes that become ready at the same time is unspecified.

        Args:
            strategy: Overrides ``config.strategy`` for this call.

        Returns:
            Every node exactly once.

        Raises:
            CycleDetectedError: If the graph contains a cycle.

        """
        strategy = strategy or self._config.strategy
        logger.debug(
            "Sorting %d nodes and %d edges with %s strategy",
            len(self._nodes),
            sum(len(edges) for edges in self._nodes.values()),
            strategy,
        )
        return _SORTERS[strategy](self._nodes)

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle."""
        try:
            self.sort()
        except CycleDetectedError:
            return True
        return False

    @property
    def nodes(self) -> frozenset[T]:
        """All nodes in the graph."""
        return frozenset(self._nodes)

    def successors(self, key: T) -> frozenset[T]:
        """Get the nodes ``key`` points to, without creating ``key``."""
        return frozenset(self._nodes.get(key, ()))

    def edges(self) -> Iterator[tuple[T, T]]:
        """Iterate over all ``(from, to)`` pairs."""
        for source, targets in self._nodes.items():
            for target in targets:
                yield source, target

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        """Check if a node is in the graph."""
        return key in self._nodes

    def __iter__(self) -> Iterator[T]:
        return iter(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._nodes!r})"
