"""Tests for the topological_sort algorithm."""

import copy
import pickle

import pytest

from topo import GraphCycleError, topological_sort


class TestTopologicalSort:
    """Tests for the stack-driven topological sort."""

    def test_empty_graph(self) -> None:
        result = topological_sort({})
        assert result == []

    def test_single_node(self) -> None:
        result = topological_sort({"a": []})
        assert result == ["a"]

    def test_linear_chain(self) -> None:
        result = topological_sort({"a": ["b"], "b": ["c"], "c": []})
        assert result == ["a", "b", "c"]

    def test_most_recently_released_node_comes_first(self) -> None:
        # b and c are released by a in that order; c is popped first
        result = topological_sort({"a": ["b", "c"], "b": [], "c": []})
        assert result == ["a", "c", "b"]

    def test_diamond_dependency(self) -> None:
        result = topological_sort({"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": []})
        assert result[0] == "a"
        assert result[-1] == "d"
        assert result.index("b") < result.index("d")
        assert result.index("c") < result.index("d")

    def test_multiple_roots_are_seeded_in_ascending_order(self) -> None:
        # Seeds are pushed a, b, c, so c is popped first
        result = topological_sort({"b": [], "c": [], "a": []})
        assert result == ["c", "b", "a"]

    def test_seed_order_ignores_mapping_order(self) -> None:
        first = topological_sort({"x": ["z"], "y": ["z"], "z": []})
        second = topological_sort({"z": [], "y": ["z"], "x": ["z"]})
        assert first == second

    def test_duplicate_edges_count_separately(self) -> None:
        result = topological_sort({"a": ["b", "b"], "b": []})
        assert result == ["a", "b"]

    def test_edges_to_unknown_nodes_are_ignored(self) -> None:
        result = topological_sort({"a": ["ghost", "b"], "b": []})
        assert result == ["a", "b"]

    def test_cycle_detection(self) -> None:
        with pytest.raises(GraphCycleError, match=r"graph cycle involving nodes: \[a, b\]"):
            topological_sort({"a": ["b"], "b": ["a"]})

    def test_self_loop_detection(self) -> None:
        with pytest.raises(GraphCycleError) as exc_info:
            topological_sort({"a": ["a"]})
        assert exc_info.value.nodes == ("a",)

    def test_cycle_report_includes_downstream_nodes(self) -> None:
        with pytest.raises(GraphCycleError) as exc_info:
            topological_sort({"a": ["b"], "b": ["c"], "c": ["b", "d"], "d": []})
        # a resolves; b and c form the cycle; d only hangs off it
        assert exc_info.value.nodes == ("b", "c", "d")

    def test_cycle_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="graph cycle"):
            topological_sort({"a": ["b"], "b": ["c"], "c": ["a"]})


class TestGraphCycleError:
    """Tests for the cycle error type."""

    def test_message_sorts_nodes(self) -> None:
        error = GraphCycleError(["b", "a"])
        assert str(error) == "graph cycle involving nodes: [a, b]"
        assert error.nodes == ("a", "b")

    def test_survives_pickling(self) -> None:
        error = GraphCycleError(["b", "a"])
        restored = pickle.loads(pickle.dumps(error))
        assert str(restored) == str(error)
        assert restored.nodes == ("a", "b")

    def test_survives_copy(self) -> None:
        error = GraphCycleError(["c", "a", "b"])
        assert str(copy.copy(error)) == str(error)
        assert copy.deepcopy(error).nodes == ("a", "b", "c")
