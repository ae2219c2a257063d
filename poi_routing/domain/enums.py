"""Domain enumerations and per-mode travel constants."""

import enum


class TransportMode(str, enum.Enum):
    WALKING = "walking"
    CYCLING = "cycling"
    DRIVING = "driving"


class SearchAlgorithm(str, enum.Enum):
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"


class SearchFailureReason(str, enum.Enum):
    UNKNOWN_NODE = "UNKNOWN_NODE"
    NOT_FOUND = "NOT_FOUND"
    EXHAUSTED = "EXHAUSTED"


class RouteSource(str, enum.Enum):
    GRAPH = "GRAPH"
    EXTERNAL = "EXTERNAL"


# Average speeds used for graph-search time estimates (km/h)
AVERAGE_SPEED_KMH: dict[TransportMode, float] = {
    TransportMode.WALKING: 5.0,
    TransportMode.CYCLING: 15.0,
    TransportMode.DRIVING: 40.0,
}
