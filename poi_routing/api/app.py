"""
FastAPI application factory.

* Registers routes for route search and admin.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from poi_routing.api.middleware import limiter
from poi_routing.api.routes import admin, navigation
from poi_routing.config import settings

logging.basicConfig(level=settings.log_level)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Tourist Route Pathfinding API",
        description=(
            "Finds walking, cycling and driving routes between points of "
            "interest.  Shortest paths over a place graph (A* or Dijkstra) "
            "and street routes from an external routing service share one "
            "response shape."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(navigation.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
