"""Adjacency-level algorithms behind Graph.

Everything here works on plain ``dict[T, set[T]]`` successor mappings where
every edge target is also a key.
"""

import logging
from collections import deque
from collections.abc import Hashable, Mapping, Set

from kahngraph._errors import CycleDetectedError

logger = logging.getLogger(__name__)


def copy_adjacency[T: Hashable](successors: Mapping[T, Set[T]]) -> dict[T, set[T]]:
    """Return an independent copy of a successor mapping."""
    return {node: set(edges) for node, edges in successors.items()}


def reverse_adjacency[T: Hashable](successors: Mapping[T, Set[T]]) -> dict[T, set[T]]:
    """Return the successor mapping with every edge flipped.

    Nodes without incoming edges in the source still appear in the result.
    """
    reversed_: dict[T, set[T]] = {node: set() for node in successors}
    for node, edges in successors.items():
        for target in edges:
            reversed_[target].add(node)
    return reversed_


def sort_by_reversal[T: Hashable](successors: Mapping[T, Set[T]]) -> list[T]:
    """Sort topologically by consuming a working copy and a reversed copy.

    ``work`` answers "who does n point to", ``incoming`` answers "does n have
    any incoming edge left". Both are destroyed as edges are consumed; a node
    left in ``work`` once the queue drains sits on a cycle.

    Raises:
        CycleDetectedError: If the graph contains a cycle.

    """
    work = copy_adjacency(successors)
    incoming = reverse_adjacency(successors)

    queue = deque(node for node, edges in incoming.items() if not edges)
    order: list[T] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        edges = work[node]
        while edges:
            target = edges.pop()
            incoming[target].discard(node)
            if not incoming[target]:
                queue.append(target)
        del work[node]
        del incoming[node]

    if work:
        logger.debug("%d node(s) left unsorted", len(work))
        raise CycleDetectedError

    return order


def sort_by_indegree[T: Hashable](successors: Mapping[T, Set[T]]) -> list[T]:
    """Sort topologically using an incoming-edge counter per node.

    Raises:
        CycleDetectedError: If the graph contains a cycle.

    """
    indegree: dict[T, int] = dict.fromkeys(successors, 0)
    for edges in successors.values():
        for target in edges:
            indegree[target] += 1

    queue = deque(node for node, deg in indegree.items() if deg == 0)
    order: list[T] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for target in successors[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)

    if len(order) != len(indegree):
        logger.debug("%d node(s) left unsorted", len(indegree) - len(order))
        raise CycleDetectedError

    return order
