"""
Shortest-path search over the place graph
=========================================

Two interchangeable algorithms share one contract::

    search(graph, start_id, goal_id) -> PathResult | SearchFailure

1. **A***       -- frontier ordered by ``f = g + h`` where ``h`` is the
   great-circle distance to the goal.  Edge weights are great-circle
   distances too, so ``h`` is admissible and consistent and the first time
   the goal is popped its g-score is optimal.
2. **Dijkstra** -- frontier ordered by ``g`` alone.  Same optimality, no
   heuristic, so it usually expands more nodes.

Tie-break
---------
Frontier entries are ``(score, node_id)`` tuples on a binary heap, so
among equal scores the lexicographically lowest node id is expanded first.
This only decides *which* of several equal-cost paths is returned.

Complexity
----------
O((V + E) log V) per run.  ``max_expansions`` caps the number of expanded
nodes; hitting it yields ``SearchFailureReason.EXHAUSTED``.
"""

from __future__ import annotations

import heapq
import logging
import math
from typing import Optional, Union

from .distance import distance_km, estimate_travel_time
from .entities import Node, PathResult, SearchFailure
from .enums import SearchAlgorithm, SearchFailureReason, TransportMode
from .graph import Graph

logger = logging.getLogger(__name__)

SearchOutcome = Union[PathResult, SearchFailure]


def a_star(
    graph: Graph,
    start_id: str,
    goal_id: str,
    *,
    mode: TransportMode = TransportMode.WALKING,
    max_expansions: Optional[int] = None,
) -> SearchOutcome:
    failure = _check_endpoints(graph, start_id, goal_id)
    if failure is not None:
        return failure

    goal = graph.nodes[goal_id]

    g_score: dict[str, float] = {start_id: 0.0}
    came_from: dict[str, str] = {}
    closed: set[str] = set()
    open_heap: list[tuple[float, str]] = [
        (_heuristic(graph.nodes[start_id], goal), start_id)
    ]
    expanded = 0

    while open_heap:
        _, current = heapq.heappop(open_heap)
        if current in closed:
            continue  # stale entry

        if current == goal_id:
            return _reconstruct_path(graph, came_from, current, g_score[current], mode)

        if max_expansions is not None and expanded >= max_expansions:
            return _exhausted(start_id, goal_id, expanded)

        closed.add(current)
        expanded += 1

        for edge in graph.neighbors(current):
            neighbor_id = edge.target
            if neighbor_id in closed:
                continue

            tentative = g_score[current] + edge.weight
            if tentative < g_score.get(neighbor_id, math.inf):
                came_from[neighbor_id] = current
                g_score[neighbor_id] = tentative
                f = tentative + _heuristic(graph.nodes[neighbor_id], goal)
                heapq.heappush(open_heap, (f, neighbor_id))

    logger.debug("A*: no path %s -> %s after %d expansions", start_id, goal_id, expanded)
    return SearchFailure(SearchFailureReason.NOT_FOUND, start_id, goal_id)


def dijkstra(
    graph: Graph,
    start_id: str,
    goal_id: str,
    *,
    mode: TransportMode = TransportMode.WALKING,
    max_expansions: Optional[int] = None,
) -> SearchOutcome:
    failure = _check_endpoints(graph, start_id, goal_id)
    if failure is not None:
        return failure

    distances: dict[str, float] = {start_id: 0.0}
    previous: dict[str, str] = {}
    visited: set[str] = set()
    heap: list[tuple[float, str]] = [(0.0, start_id)]
    expanded = 0

    while heap:
        dist, current = heapq.heappop(heap)
        if current in visited:
            continue
        if current == goal_id:
            break

        if max_expansions is not None and expanded >= max_expansions:
            return _exhausted(start_id, goal_id, expanded)

        visited.add(current)
        expanded += 1

        for edge in graph.neighbors(current):
            if edge.target in visited:
                continue
            alt = dist + edge.weight
            if alt < distances.get(edge.target, math.inf):
                distances[edge.target] = alt
                previous[edge.target] = current
                heapq.heappush(heap, (alt, edge.target))

    if goal_id not in previous and start_id != goal_id:
        logger.debug(
            "Dijkstra: no path %s -> %s after %d expansions", start_id, goal_id, expanded
        )
        return SearchFailure(SearchFailureReason.NOT_FOUND, start_id, goal_id)

    return _reconstruct_path(graph, previous, goal_id, distances[goal_id], mode)


_ALGORITHMS = {
    SearchAlgorithm.ASTAR: a_star,
    SearchAlgorithm.DIJKSTRA: dijkstra,
}


def find_path(
    graph: Graph,
    start_id: str,
    goal_id: str,
    algorithm: SearchAlgorithm = SearchAlgorithm.ASTAR,
    *,
    mode: TransportMode = TransportMode.WALKING,
    max_expansions: Optional[int] = None,
) -> SearchOutcome:
    """Run the search selected by *algorithm*."""
    search = _ALGORITHMS[SearchAlgorithm(algorithm)]
    return search(graph, start_id, goal_id, mode=mode, max_expansions=max_expansions)


# ── Internals ─────────────────────────────────────────────────────────


def _heuristic(node: Node, goal: Node) -> float:
    return distance_km(node.coordinate, goal.coordinate)


def _check_endpoints(
    graph: Graph, start_id: str, goal_id: str
) -> Optional[SearchFailure]:
    missing = [nid for nid in (start_id, goal_id) if nid not in graph]
    if not missing:
        return None
    return SearchFailure(
        SearchFailureReason.UNKNOWN_NODE,
        start_id,
        goal_id,
        detail=f"Unknown node(s): {', '.join(missing)}",
    )


def _exhausted(start_id: str, goal_id: str, expanded: int) -> SearchFailure:
    logger.info("Search %s -> %s exhausted after %d expansions", start_id, goal_id, expanded)
    return SearchFailure(
        SearchFailureReason.EXHAUSTED,
        start_id,
        goal_id,
        detail=f"Expansion budget reached after {expanded} nodes",
    )


def _reconstruct_path(
    graph: Graph,
    came_from: dict[str, str],
    current: str,
    total_distance_km: float,
    mode: TransportMode,
) -> PathResult:
    """Walk predecessors back from *current*; return nodes start -> goal."""
    ids = [current]
    while current in came_from:
        current = came_from[current]
        ids.append(current)
    ids.reverse()

    return PathResult(
        path=tuple(graph.nodes[nid] for nid in ids),
        total_distance_km=total_distance_km,
        estimated_time_min=estimate_travel_time(total_distance_km, mode),
        mode=mode,
    )
