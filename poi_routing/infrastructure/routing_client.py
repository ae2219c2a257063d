"""
Street-routing client.

OpenRouteService is tried first when an API key is configured; on a
missing key, a non-2xx response, an empty feature list or a transport
error the request falls back to the public OSRM server.  OSRM has no
cycling profile, so cycling requests use its driving profile with the
duration scaled by ``CYCLING_DURATION_FACTOR``.

The API key is injected by the caller.  No retries.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import httpx

from poi_routing.domain.entities import Coordinate, ExternalPolyline, RouteResult
from poi_routing.domain.enums import TransportMode
from poi_routing.domain.route_adapter import to_route_result

logger = logging.getLogger(__name__)

DEFAULT_ORS_BASE_URL = "https://api.openrouteservice.org/v2/directions"
DEFAULT_OSRM_BASE_URL = "https://router.project-osrm.org/route/v1"

ORS_PROFILES: dict[TransportMode, str] = {
    TransportMode.WALKING: "foot-walking",
    TransportMode.CYCLING: "cycling-regular",
    TransportMode.DRIVING: "driving-car",
}

OSRM_PROFILES: dict[TransportMode, str] = {
    TransportMode.WALKING: "foot",
    TransportMode.CYCLING: "driving",
    TransportMode.DRIVING: "driving",
}

# OSRM driving duration -> rough cycling duration
CYCLING_DURATION_FACTOR = 2.5

_ORS_ACCEPT = (
    "application/json, application/geo+json, application/gpx+xml, "
    "img/png; charset=utf-8"
)


class RoutingClient:
    def __init__(
        self,
        api_key: str = "",
        *,
        ors_base_url: str = DEFAULT_ORS_BASE_URL,
        osrm_base_url: str = DEFAULT_OSRM_BASE_URL,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.ors_base_url = ors_base_url.rstrip("/")
        self.osrm_base_url = osrm_base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)
        self._owns_client = client is None

    # ── Public API ────────────────────────────────────────────────

    async def route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        mode: TransportMode = TransportMode.WALKING,
    ) -> Optional[RouteResult]:
        """Street route between two points, or ``None`` when both services fail."""
        if not self.api_key:
            logger.debug("No OpenRouteService key configured, using OSRM")
            return await self._osrm_route([origin, destination], mode)

        result = await self._ors_route(origin, destination, mode)
        if result is None:
            return await self._osrm_route([origin, destination], mode)
        return result

    async def route_with_waypoints(
        self,
        waypoints: Sequence[Coordinate],
        mode: TransportMode = TransportMode.WALKING,
    ) -> Optional[RouteResult]:
        """Street route through *waypoints* in order (OSRM only)."""
        if len(waypoints) < 2:
            return None
        return await self._osrm_route(list(waypoints), mode)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "RoutingClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    # ── Providers ─────────────────────────────────────────────────

    async def _ors_route(
        self, origin: Coordinate, destination: Coordinate, mode: TransportMode
    ) -> Optional[RouteResult]:
        url = f"{self.ors_base_url}/{ORS_PROFILES[mode]}"
        try:
            resp = await self._client.get(
                url,
                params={
                    "start": _lon_lat(origin),
                    "end": _lon_lat(destination),
                },
                headers={"Accept": _ORS_ACCEPT, "Authorization": self.api_key},
            )
        except httpx.HTTPError as exc:
            logger.warning("OpenRouteService request failed (%s), falling back to OSRM", exc)
            return None

        if resp.is_error:
            logger.warning(
                "OpenRouteService returned %d, falling back to OSRM", resp.status_code
            )
            return None

        try:
            payload = resp.json()
            features = payload.get("features") if isinstance(payload, dict) else None
            if not features:
                logger.warning("OpenRouteService returned no route, falling back to OSRM")
                return None
            feature = features[0]
            summary = feature["properties"]["summary"]
            polyline = ExternalPolyline(
                distance_meters=float(summary.get("distance", 0.0)),
                duration_seconds=float(summary.get("duration", 0.0)),
                geometry=_geometry(feature["geometry"]["coordinates"]),
                mode=mode,
            )
        except (AttributeError, IndexError, KeyError, TypeError, ValueError):
            logger.warning("Malformed OpenRouteService response, falling back to OSRM")
            return None

        return to_route_result(polyline)

    async def _osrm_route(
        self, waypoints: list[Coordinate], mode: TransportMode
    ) -> Optional[RouteResult]:
        coords = ";".join(_lon_lat(c) for c in waypoints)
        url = f"{self.osrm_base_url}/{OSRM_PROFILES[mode]}/{coords}"
        try:
            resp = await self._client.get(
                url, params={"overview": "full", "geometries": "geojson"}
            )
            data = resp.json()
        except (httpx.HTTPError, ValueError):
            logger.exception("OSRM request failed")
            return None

        if not isinstance(data, dict) or data.get("code") != "Ok" or not data.get("routes"):
            code = data.get("code") if isinstance(data, dict) else None
            logger.info("OSRM found no route (status=%d, code=%s)", resp.status_code, code)
            return None

        try:
            route = data["routes"][0]
            duration = float(route["duration"])
            if mode == TransportMode.CYCLING:
                duration *= CYCLING_DURATION_FACTOR

            polyline = ExternalPolyline(
                distance_meters=float(route["distance"]),
                duration_seconds=duration,
                geometry=_geometry(route["geometry"]["coordinates"]),
                mode=mode,
            )
        except (KeyError, IndexError, TypeError, ValueError):
            logger.warning("Malformed OSRM response")
            return None
        return to_route_result(polyline)


# ── Helpers ───────────────────────────────────────────────────────────


def _lon_lat(c: Coordinate) -> str:
    return f"{c.lon},{c.lat}"


def _geometry(coordinates: list[list[Any]]) -> tuple[Coordinate, ...]:
    """GeoJSON ``[lon, lat]`` pairs -> ``Coordinate(lat, lon)``."""
    return tuple(Coordinate(float(lat), float(lon)) for lon, lat, *_ in coordinates)
