"""
Route result adapter.

Normalises a graph-search ``PathResult`` (km / minutes / nodes) and a
street-routing ``ExternalPolyline`` (m / s / coordinates) into the single
``RouteResult`` shape the display layer consumes.  Pure formatting, no
error conditions.
"""

from __future__ import annotations

from typing import Optional, Union

from .entities import ExternalPolyline, PathResult, RouteResult
from .enums import RouteSource, TransportMode


def to_route_result(
    source: Union[PathResult, ExternalPolyline],
    mode: Optional[TransportMode] = None,
) -> RouteResult:
    if isinstance(source, PathResult):
        return RouteResult(
            distance_meters=source.total_distance_km * 1000.0,
            duration_seconds=source.estimated_time_min * 60.0,
            geometry=tuple(node.coordinate for node in source.path),
            mode=mode or source.mode,
            source=RouteSource.GRAPH,
        )
    if isinstance(source, ExternalPolyline):
        return RouteResult(
            distance_meters=source.distance_meters,
            duration_seconds=source.duration_seconds,
            geometry=tuple(source.geometry),
            mode=mode or source.mode,
            source=RouteSource.EXTERNAL,
        )
    raise TypeError(f"Cannot build a route from {type(source).__name__}")
