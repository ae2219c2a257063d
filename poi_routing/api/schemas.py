"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from poi_routing.domain.entities import Coordinate, PlacePoint, RouteResult
from poi_routing.domain.enums import RouteSource, SearchAlgorithm, TransportMode
from poi_routing.domain.formatters import format_distance, format_duration


# ── Shared ────────────────────────────────────────────────────────────


class CoordinateSchema(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    def to_domain(self) -> Coordinate:
        return Coordinate(self.lat, self.lon)


class PlaceSchema(CoordinateSchema):
    id: str = Field(..., min_length=1, max_length=128)

    def to_point(self) -> PlacePoint:
        return PlacePoint(self.id, self.lat, self.lon)


# ── Requests ──────────────────────────────────────────────────────────


class GraphRouteRequest(BaseModel):
    points: list[PlaceSchema] = Field(..., min_length=1)
    start_id: str
    goal_id: str
    algorithm: SearchAlgorithm = SearchAlgorithm.ASTAR
    mode: TransportMode = TransportMode.WALKING
    max_connection_distance_km: Optional[float] = Field(
        None,
        gt=0,
        description="Maximum distance between two connected places. "
        "Defaults to the server setting.",
    )


class StreetRouteRequest(BaseModel):
    origin: CoordinateSchema
    destination: CoordinateSchema
    mode: TransportMode = TransportMode.WALKING


class WaypointsRouteRequest(BaseModel):
    waypoints: list[CoordinateSchema] = Field(..., min_length=2)
    mode: TransportMode = TransportMode.WALKING


# ── Responses ─────────────────────────────────────────────────────────


class RouteResponse(BaseModel):
    distance_meters: float
    duration_seconds: float
    distance_text: str
    duration_text: str
    geometry: list[CoordinateSchema]
    mode: TransportMode
    source: RouteSource
    algorithm: Optional[SearchAlgorithm] = None
    path_ids: list[str] = []

    @classmethod
    def from_result(
        cls,
        result: RouteResult,
        algorithm: Optional[SearchAlgorithm] = None,
        path_ids: Optional[list[str]] = None,
    ) -> "RouteResponse":
        return cls(
            distance_meters=result.distance_meters,
            duration_seconds=result.duration_seconds,
            distance_text=format_distance(result.distance_meters),
            duration_text=format_duration(result.duration_seconds),
            geometry=[CoordinateSchema(lat=c.lat, lon=c.lon) for c in result.geometry],
            mode=result.mode,
            source=result.source,
            algorithm=algorithm,
            path_ids=path_ids or [],
        )


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
