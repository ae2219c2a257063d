"""
Domain value objects for route search.

Patterns used
-------------
- Every type here is an immutable value object (``frozen=True``); a search
  run builds its result once and hands it to the caller.
- ``SearchFailure`` is returned, not raised: failing to find a route is an
  expected outcome (isolated points, too strict a connection threshold).
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import RouteSource, SearchFailureReason, TransportMode


class GraphContractError(ValueError):
    """Raised when a graph would break its node/edge invariants."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float


@dataclass(frozen=True)
class PlacePoint:
    """A named point of interest supplied by the caller."""

    id: str
    lat: float
    lon: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lon)


@dataclass(frozen=True)
class Node:
    id: str
    coordinate: Coordinate


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: float  # km


# ── Search outcomes ───────────────────────────────────────────────────


@dataclass(frozen=True)
class PathResult:
    path: tuple[Node, ...]
    total_distance_km: float
    estimated_time_min: float
    mode: TransportMode = TransportMode.WALKING

    @property
    def node_ids(self) -> list[str]:
        return [node.id for node in self.path]


@dataclass(frozen=True)
class SearchFailure:
    reason: SearchFailureReason
    start_id: str
    goal_id: str
    detail: str = ""

    def __bool__(self) -> bool:
        return False


# ── Display-layer shapes ──────────────────────────────────────────────


@dataclass(frozen=True)
class ExternalPolyline:
    """A line returned by a street-routing service, already in m / s."""

    distance_meters: float
    duration_seconds: float
    geometry: tuple[Coordinate, ...]
    mode: TransportMode = TransportMode.WALKING


@dataclass(frozen=True)
class RouteResult:
    distance_meters: float
    duration_seconds: float
    geometry: tuple[Coordinate, ...]
    mode: TransportMode
    source: RouteSource
