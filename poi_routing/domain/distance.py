"""
Distance and travel-time calculation using the Haversine formula.

Assumption
----------
Great-circle distance is used both as the edge weight of the point graph
and as the A* heuristic.  Because both come from the same metric, the
heuristic never overestimates the remaining cost (triangle inequality).

Travel time is a linear speed model: no terrain, elevation or traffic.

Complexity: O(1) per call.
"""

import math

from .entities import Coordinate
from .enums import AVERAGE_SPEED_KMH, TransportMode

EARTH_RADIUS_KM = 6_371.0
WALKING_SPEED_KMH = AVERAGE_SPEED_KMH[TransportMode.WALKING]


def haversine_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return haversine_km(a.lat, a.lon, b.lat, b.lon)


def estimate_walking_time(distance_km: float) -> float:
    """Minutes needed to walk *distance_km* at 5 km/h."""
    return distance_km / WALKING_SPEED_KMH * 60.0


def estimate_travel_time(
    distance_km: float, mode: TransportMode = TransportMode.WALKING
) -> float:
    """Minutes needed to cover *distance_km* at the average speed of *mode*."""
    if mode == TransportMode.WALKING:
        return estimate_walking_time(distance_km)
    return distance_km / AVERAGE_SPEED_KMH[mode] * 60.0
