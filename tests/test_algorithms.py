"""Tests for the adjacency-level graph algorithms."""

import pytest

from kahngraph import CycleDetectedError
from kahngraph._graph._algorithms import (
    copy_adjacency,
    reverse_adjacency,
    sort_by_indegree,
    sort_by_reversal,
)

SORTERS = [sort_by_indegree, sort_by_reversal]


class TestCopyAdjacency:
    def test_copy_is_independent(self) -> None:
        source = {"a": {"b"}, "b": set()}
        copied = copy_adjacency(source)
        copied["a"].add("c")
        assert source == {"a": {"b"}, "b": set()}

    def test_empty(self) -> None:
        assert copy_adjacency({}) == {}


class TestReverseAdjacency:
    def test_flips_edges(self) -> None:
        assert reverse_adjacency({"a": {"b", "c"}, "b": {"c"}, "c": set()}) == {
            "a": set(),
            "b": {"a"},
            "c": {"a", "b"},
        }

    def test_keeps_isolated_nodes(self) -> None:
        assert reverse_adjacency({"x": set()}) == {"x": set()}

    def test_self_loop(self) -> None:
        assert reverse_adjacency({"a": {"a"}}) == {"a": {"a"}}


@pytest.mark.parametrize("sorter", SORTERS)
class TestSorters:
    """Both Kahn variants share one contract."""

    def test_empty_graph(self, sorter) -> None:
        assert sorter({}) == []

    def test_single_node(self, sorter) -> None:
        assert sorter({"a": set()}) == ["a"]

    def test_linear_chain(self, sorter) -> None:
        assert sorter({"c": set(), "b": {"c"}, "a": {"b"}}) == ["a", "b", "c"]

    def test_multiple_roots(self, sorter) -> None:
        result = sorter({"a": {"c"}, "b": {"c"}, "c": set()})
        assert result[-1] == "c"
        assert set(result[:2]) == {"a", "b"}

    def test_input_is_not_consumed(self, sorter) -> None:
        successors = {"a": {"b"}, "b": {"c"}, "c": set()}
        sorter(successors)
        assert successors == {"a": {"b"}, "b": {"c"}, "c": set()}

    def test_cycle_detection(self, sorter) -> None:
        with pytest.raises(CycleDetectedError, match="cycle"):
            sorter({"a": {"b"}, "b": {"a"}})

    def test_self_loop_detection(self, sorter) -> None:
        with pytest.raises(CycleDetectedError):
            sorter({"a": {"a"}})

    def test_cycle_behind_acyclic_prefix(self, sorter) -> None:
        # root -> a -> b -> a
        with pytest.raises(CycleDetectedError):
            sorter({"root": {"a"}, "a": {"b"}, "b": {"a"}})

    def test_works_with_tuples(self, sorter) -> None:
        assert sorter({("a", 1): {("b", 2)}, ("b", 2): set()}) == [("a", 1), ("b", 2)]
