"""Shared test fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from poi_routing.domain.graph import Graph, build_graph
from tests.fixtures_data import CITY_POINTS, TWO_ROUTE_POINTS, TWO_ROUTE_THRESHOLD_KM


# ── Places ────────────────────────────────────────────────────────────


@pytest.fixture
def two_route_graph() -> Graph:
    return build_graph(TWO_ROUTE_POINTS, TWO_ROUTE_THRESHOLD_KM)


@pytest.fixture
def city_graph() -> Graph:
    return build_graph(CITY_POINTS, 0.5)


# ── API ───────────────────────────────────────────────────────────────


@pytest.fixture
def app() -> FastAPI:
    from poi_routing.api.app import create_app

    return create_app()


@pytest_asyncio.fixture
async def api_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
