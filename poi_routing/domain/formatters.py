"""Human-readable route statistics and map polyline shape."""

from __future__ import annotations

import math
from typing import Iterable

from .entities import Coordinate


def _round_half_up(value: float, digits: int = 0) -> float:
    # round() rounds halves to even; display text rounds them up
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def format_duration(seconds: float) -> str:
    if seconds < 60:
        return f"{int(_round_half_up(seconds))} sec"
    if seconds < 3600:
        return f"{int(_round_half_up(seconds / 60))} min"
    hours = int(seconds // 3600)
    minutes = int(_round_half_up((seconds % 3600) / 60))
    return f"{hours}h {minutes}min"


def format_distance(meters: float) -> str:
    if meters < 1000:
        return f"{int(_round_half_up(meters))} m"
    return f"{_round_half_up(meters / 1000, 1):.1f} km"


def to_polyline_coordinates(geometry: Iterable[Coordinate]) -> list[dict[str, float]]:
    """Map coordinates to the ``{latitude, longitude}`` shape map views draw."""
    return [{"latitude": c.lat, "longitude": c.lon} for c in geometry]
