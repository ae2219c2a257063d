"""Unit tests for the place graph and its builder."""

import pytest

from poi_routing.domain.entities import (
    Coordinate,
    Edge,
    GraphContractError,
    Node,
    PlacePoint,
)
from poi_routing.domain.graph import Graph, build_graph


class TestBuildGraph:
    def test_connects_only_points_within_threshold(self):
        points = [
            PlacePoint("A", 0.0, 0.0),
            PlacePoint("B", 0.0, 0.001),
            PlacePoint("C", 10.0, 10.0),
        ]
        graph = build_graph(points, 0.5)

        assert len(graph) == 3
        assert graph.edge_count == 2
        assert [e.target for e in graph.neighbors("A")] == ["B"]
        assert [e.target for e in graph.neighbors("B")] == ["A"]
        assert graph.neighbors("C") == ()

    def test_both_directions_have_equal_weight(self):
        graph = build_graph([PlacePoint("A", 0.0, 0.0), PlacePoint("B", 0.0, 0.001)])
        (ab,) = graph.neighbors("A")
        (ba,) = graph.neighbors("B")
        assert ab.weight == ba.weight
        assert ab.weight == pytest.approx(0.111, abs=1e-3)

    def test_default_threshold_is_half_km(self):
        points = [PlacePoint("A", 0.0, 0.0), PlacePoint("B", 0.0, 0.005)]  # ~0.56 km
        assert build_graph(points).edge_count == 0

    def test_threshold_is_inclusive(self):
        points = [PlacePoint("A", 0.0, 0.0), PlacePoint("B", 0.0, 0.001)]
        exact = build_graph(points, 10.0).neighbors("A")[0].weight
        assert build_graph(points, exact).edge_count == 2

    def test_identical_coordinates_give_zero_weight_edge(self):
        graph = build_graph([PlacePoint("A", 1.0, 1.0), PlacePoint("B", 1.0, 1.0)])
        assert graph.neighbors("A")[0].weight == 0.0

    def test_no_self_loops(self, city_graph):
        for node_id in city_graph.nodes:
            assert all(e.target != node_id for e in city_graph.neighbors(node_id))

    def test_edges_are_owned_by_their_source(self, city_graph):
        for node_id, edges in city_graph.edges.items():
            for edge in edges:
                assert edge.source == node_id
                assert edge.target in city_graph

    def test_duplicate_ids_rejected(self):
        with pytest.raises(GraphContractError):
            build_graph([PlacePoint("A", 0.0, 0.0), PlacePoint("A", 0.0, 0.001)])

    def test_empty_input(self):
        graph = build_graph([])
        assert len(graph) == 0
        assert graph.edge_count == 0


class TestGraphContract:
    def setup_method(self):
        self.graph = Graph()
        self.graph.add_node(Node("a", Coordinate(0.0, 0.0)))
        self.graph.add_node(Node("b", Coordinate(0.0, 0.001)))

    def test_edge_to_unknown_node_rejected(self):
        with pytest.raises(GraphContractError):
            self.graph.add_edge(Edge("a", "zzz", 1.0))

    def test_edge_from_unknown_node_rejected(self):
        with pytest.raises(GraphContractError):
            self.graph.add_edge(Edge("zzz", "a", 1.0))

    def test_negative_weight_rejected(self):
        with pytest.raises(GraphContractError):
            self.graph.add_edge(Edge("a", "b", -0.1))

    def test_nan_weight_rejected(self):
        with pytest.raises(GraphContractError):
            self.graph.add_edge(Edge("a", "b", float("nan")))

    def test_neighbors_returns_copy(self):
        self.graph.add_edge(Edge("a", "b", 0.1))
        neighbors = self.graph.neighbors("a")
        assert isinstance(neighbors, tuple)
        self.graph.add_edge(Edge("a", "b", 0.2))
        assert len(neighbors) == 1
        assert len(self.graph.neighbors("a")) == 2

    def test_unknown_node_lookup(self):
        assert self.graph.node("zzz") is None
        assert self.graph.neighbors("zzz") == ()
        assert "zzz" not in self.graph
