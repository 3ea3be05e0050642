"""Tests for WeightedDirectedGraph."""

from __future__ import annotations

import pytest

from graphpoet.domain.graph import GraphFrozenError, InvalidWeightError, WeightedDirectedGraph


@pytest.fixture
def graph() -> WeightedDirectedGraph[str]:
    return WeightedDirectedGraph()


class TestVertices:
    def test_new_graph_is_empty(self, graph: WeightedDirectedGraph[str]) -> None:
        assert graph.vertices() == set()
        assert len(graph) == 0
        assert graph.number_of_edges() == 0

    def test_add_new_vertex(self, graph: WeightedDirectedGraph[str]) -> None:
        assert graph.add("a") is True
        assert graph.vertices() == {"a"}

    def test_add_existing_vertex_is_noop(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.add("a")
        graph.add("b")
        assert graph.add("a") is False
        assert graph.vertices() == {"a", "b"}

    def test_vertices_is_a_snapshot(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.add("a")
        snapshot = graph.vertices()
        snapshot.add("intruder")
        assert graph.vertices() == {"a"}

    def test_remove_missing_vertex(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.add("a")
        assert graph.remove("b") is False
        assert graph.vertices() == {"a"}

    def test_remove_existing_vertex(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.add("a")
        graph.add("b")
        assert graph.remove("b") is True
        assert graph.vertices() == {"a"}

    def test_remove_cascades_edges(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "b", 1)
        graph.set("b", "c", 2)
        graph.set("c", "a", 3)
        graph.remove("b")
        assert "b" not in graph
        assert graph.targets("a") == {}
        assert graph.sources("c") == {}
        assert graph.targets("c") == {"a": 3}
        assert graph.number_of_edges() == 1

    def test_vertex_without_edges_is_member(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.add("lonely")
        assert "lonely" in graph
        assert graph.targets("lonely") == {}
        assert graph.sources("lonely") == {}


class TestSet:
    def test_new_edge_adds_both_endpoints(self, graph: WeightedDirectedGraph[str]) -> None:
        assert graph.set("a", "b", 1) == 0
        assert graph.vertices() == {"a", "b"}
        assert graph.targets("a") == {"b": 1}
        assert graph.sources("b") == {"a": 1}

    def test_new_edge_existing_target(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.add("b")
        assert graph.set("a", "b", 4) == 0
        assert len(graph) == 2
        assert graph.sources("b") == {"a": 4}

    def test_new_edge_existing_source(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.add("a")
        assert graph.set("a", "b", 4) == 0
        assert len(graph) == 2
        assert graph.targets("a") == {"b": 4}

    def test_overwrite_returns_previous(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "b", 1)
        assert graph.set("a", "b", 2) == 1
        assert graph.targets("a") == {"b": 2}
        assert graph.sources("b") == {"a": 2}
        assert graph.number_of_edges() == 1

    def test_same_weight_twice_returns_weight(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "b", 7)
        assert graph.set("a", "b", 7) == 7

    def test_zero_deletes_edge_keeps_vertices(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "b", 3)
        assert graph.set("a", "b", 0) == 3
        assert "b" not in graph.targets("a")
        assert "a" not in graph.sources("b")
        assert graph.vertices() == {"a", "b"}

    def test_zero_on_missing_edge_is_noop(self, graph: WeightedDirectedGraph[str]) -> None:
        assert graph.set("a", "b", 0) == 0
        assert graph.vertices() == set()

    def test_direction_matters(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "b", 1)
        assert graph.targets("b") == {}
        assert graph.sources("a") == {}

    def test_self_loop(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "a", 2)
        assert graph.targets("a") == {"a": 2}
        assert graph.sources("a") == {"a": 2}
        assert graph.vertices() == {"a"}

    def test_negative_weight_rejected(self, graph: WeightedDirectedGraph[str]) -> None:
        with pytest.raises(InvalidWeightError):
            graph.set("a", "b", -1)
        assert graph.vertices() == set()

    @pytest.mark.parametrize("weight", [1.5, "2", True, None])
    def test_non_int_weight_rejected(
        self, graph: WeightedDirectedGraph[str], weight: object
    ) -> None:
        with pytest.raises(InvalidWeightError):
            graph.set("a", "b", weight)  # type: ignore[arg-type]

    def test_invalid_weight_is_value_error(self) -> None:
        assert issubclass(InvalidWeightError, ValueError)


class TestNeighbors:
    def test_missing_vertex_has_no_neighbors(self, graph: WeightedDirectedGraph[str]) -> None:
        assert graph.targets("ghost") == {}
        assert graph.sources("ghost") == {}

    def test_targets_and_sources_agree(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("v1", "v2", 1)
        graph.set("v1", "v3", 2)
        graph.set("v2", "v3", 3)
        assert graph.targets("v1") == {"v2": 1, "v3": 2}
        assert graph.sources("v3") == {"v1": 2, "v2": 3}
        for source in graph.vertices():
            for target, weight in graph.targets(source).items():
                assert graph.sources(target)[source] == weight

    def test_neighbor_maps_are_snapshots(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "b", 1)
        graph.targets("a")["c"] = 9
        graph.sources("b")["z"] = 9
        assert graph.targets("a") == {"b": 1}
        assert graph.sources("b") == {"a": 1}

    def test_total_weight(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "b", 2)
        graph.set("b", "c", 5)
        assert graph.total_weight() == 7

    def test_non_string_labels(self) -> None:
        g: WeightedDirectedGraph[int] = WeightedDirectedGraph()
        g.set(1, 2, 3)
        assert g.targets(1) == {2: 3}
        assert set(g) == {1, 2}


class TestFreeze:
    def test_not_frozen_initially(self, graph: WeightedDirectedGraph[str]) -> None:
        assert graph.frozen is False

    def test_frozen_graph_rejects_mutation(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "b", 1)
        graph.freeze()
        assert graph.frozen is True
        with pytest.raises(GraphFrozenError):
            graph.add("c")
        with pytest.raises(GraphFrozenError):
            graph.remove("a")
        with pytest.raises(GraphFrozenError):
            graph.set("a", "b", 2)
        assert graph.targets("a") == {"b": 1}

    def test_frozen_graph_still_answers_queries(self, graph: WeightedDirectedGraph[str]) -> None:
        graph.set("a", "b", 1)
        graph.freeze()
        assert graph.vertices() == {"a", "b"}
        assert graph.sources("b") == {"a": 1}
        assert "frozen" in repr(graph)
