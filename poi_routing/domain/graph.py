"""
Point-of-interest graph
=======================

The graph owns its nodes (``id -> Node``) and an adjacency mapping
(``id -> [Edge]``).  Edges are directed; the builder inserts both
directions with the same weight, so the graph behaves as undirected.

Builder
-------
Every ordered pair of distinct points whose great-circle distance is
``<= max_connection_distance_km`` is connected.  Points without a neighbour
in range are kept as isolated nodes.

Complexity
----------
* ``build_graph``: O(n^2) distance calls for n points.  Input is a small
  curated list of places, not a street network.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from .distance import distance_km
from .entities import Edge, GraphContractError, Node, PlacePoint

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONNECTION_KM = 0.5


class Graph:
    def __init__(self) -> None:
        self.nodes: dict[str, Node] = {}
        self.edges: dict[str, list[Edge]] = {}

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(adj) for adj in self.edges.values())

    def node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def add_node(self, node: Node) -> None:
        if node.id in self.nodes:
            raise GraphContractError(f"Duplicate node id: {node.id!r}")
        self.nodes[node.id] = node
        self.edges[node.id] = []

    def add_edge(self, edge: Edge) -> None:
        """Append *edge* to its source's adjacency list."""
        for endpoint in (edge.source, edge.target):
            if endpoint not in self.nodes:
                raise GraphContractError(f"Edge references unknown node {endpoint!r}")
        if math.isnan(edge.weight) or edge.weight < 0:
            raise GraphContractError(
                f"Edge {edge.source!r}->{edge.target!r} has invalid weight {edge.weight}"
            )
        self.edges[edge.source].append(edge)

    def neighbors(self, node_id: str) -> tuple[Edge, ...]:
        """Outgoing edges of *node_id* (a copy; empty when unknown)."""
        return tuple(self.edges.get(node_id, ()))


def build_graph(
    points: Iterable[PlacePoint],
    max_connection_distance_km: float = DEFAULT_MAX_CONNECTION_KM,
) -> Graph:
    """Connect every pair of places within *max_connection_distance_km*."""
    points = list(points)
    graph = Graph()

    for p in points:
        graph.add_node(Node(p.id, p.coordinate))

    for p1 in points:
        for p2 in points:
            if p1.id == p2.id:
                continue
            d = distance_km(p1.coordinate, p2.coordinate)
            if d <= max_connection_distance_km:
                graph.add_edge(Edge(p1.id, p2.id, d))

    logger.debug(
        "Graph built: %d nodes, %d edges (threshold=%.3f km)",
        len(graph),
        graph.edge_count,
        max_connection_distance_km,
    )
    return graph
