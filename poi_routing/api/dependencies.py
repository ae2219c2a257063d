"""FastAPI dependency injection helpers."""

from typing import AsyncIterator

from poi_routing.config import settings
from poi_routing.infrastructure.routing_client import RoutingClient


async def get_routing_client() -> AsyncIterator[RoutingClient]:
    """Yield a street-routing client configured from settings; close it afterwards."""
    async with RoutingClient(
        settings.ors_api_key,
        ors_base_url=settings.ors_base_url,
        osrm_base_url=settings.osrm_base_url,
        timeout_seconds=settings.routing_timeout_seconds,
    ) as client:
        yield client
