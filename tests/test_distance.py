"""Unit tests for great-circle distance and travel-time estimates."""

import math

import pytest

from poi_routing.domain.distance import (
    distance_km,
    estimate_travel_time,
    estimate_walking_time,
    haversine_km,
)
from poi_routing.domain.entities import Coordinate
from poi_routing.domain.enums import TransportMode


class TestHaversine:
    def test_same_point_is_zero(self):
        c = Coordinate(10.4235, -75.5491)
        assert distance_km(c, c) == 0.0

    def test_known_distance(self):
        # 0.001 deg of longitude on the equator ~ 111 m
        d = haversine_km(0.0, 0.0, 0.0, 0.001)
        assert d == pytest.approx(0.1112, abs=1e-3)

    def test_long_distance(self):
        # Bogota -> Cartagena ~ 660 km
        d = haversine_km(4.7110, -74.0721, 10.3910, -75.4794)
        assert 600 < d < 700

    def test_symmetric(self):
        a = Coordinate(19.0, 72.0)
        b = Coordinate(20.0, 73.0)
        assert abs(distance_km(a, b) - distance_km(b, a)) < 1e-9

    @pytest.mark.parametrize(
        "a, b, c",
        [
            ((0.0, 0.0), (0.0, 0.002), (0.0015, 0.002)),
            ((10.42, -75.55), (10.48, -75.51), (4.71, -74.07)),
            ((-33.9, 18.4), (51.5, -0.1), (40.7, -74.0)),
        ],
    )
    def test_triangle_inequality(self, a, b, c):
        a, b, c = Coordinate(*a), Coordinate(*b), Coordinate(*c)
        assert distance_km(a, c) <= distance_km(a, b) + distance_km(b, c) + 1e-9

    def test_nan_propagates(self):
        assert math.isnan(haversine_km(float("nan"), 0.0, 0.0, 0.0))


class TestTravelTime:
    def test_walking_five_km_is_one_hour(self):
        assert estimate_walking_time(5.0) == 60.0

    def test_zero_distance(self):
        assert estimate_walking_time(0.0) == 0.0

    def test_walking_mode_matches_walking_model(self):
        assert estimate_travel_time(2.3) == estimate_walking_time(2.3)

    def test_cycling_faster_than_walking(self):
        walk = estimate_travel_time(3.0, TransportMode.WALKING)
        bike = estimate_travel_time(3.0, TransportMode.CYCLING)
        assert bike == pytest.approx(12.0)  # 15 km/h
        assert bike < walk

    def test_driving(self):
        assert estimate_travel_time(20.0, TransportMode.DRIVING) == pytest.approx(30.0)
