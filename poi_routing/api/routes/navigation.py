"""
Route endpoints
===============

POST /api/v1/routes/graph     -- shortest path over a set of places (A* / Dijkstra)
POST /api/v1/routes/street    -- street route from the external routing service
POST /api/v1/routes/waypoints -- street route through ordered waypoints
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from poi_routing.api.dependencies import get_routing_client
from poi_routing.api.middleware import limiter
from poi_routing.api.schemas import (
    ErrorResponse,
    GraphRouteRequest,
    RouteResponse,
    StreetRouteRequest,
    WaypointsRouteRequest,
)
from poi_routing.config import settings
from poi_routing.domain.entities import GraphContractError, SearchFailure
from poi_routing.domain.enums import SearchFailureReason
from poi_routing.domain.graph import build_graph
from poi_routing.domain.pathfinding import find_path
from poi_routing.domain.route_adapter import to_route_result
from poi_routing.infrastructure.routing_client import RoutingClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes", tags=["routes"])

_FAILURE_STATUS = {
    SearchFailureReason.UNKNOWN_NODE: 404,
    SearchFailureReason.NOT_FOUND: 404,
    SearchFailureReason.EXHAUSTED: 422,
}


@router.post(
    "/graph",
    response_model=RouteResponse,
    summary="Shortest path between two places",
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def graph_route(request: Request, body: GraphRouteRequest):
    threshold = body.max_connection_distance_km or settings.max_connection_distance_km
    try:
        graph = build_graph((p.to_point() for p in body.points), threshold)
    except GraphContractError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    outcome = find_path(
        graph,
        body.start_id,
        body.goal_id,
        body.algorithm,
        mode=body.mode,
        max_expansions=settings.max_search_expansions,
    )
    if isinstance(outcome, SearchFailure):
        logger.info(
            "No graph route %s -> %s: %s", body.start_id, body.goal_id, outcome.reason.value
        )
        detail = outcome.detail or (
            f"No route between {body.start_id} and {body.goal_id} "
            f"within {threshold} km hops"
        )
        raise HTTPException(status_code=_FAILURE_STATUS[outcome.reason], detail=detail)

    return RouteResponse.from_result(
        to_route_result(outcome),
        algorithm=body.algorithm,
        path_ids=outcome.node_ids,
    )


@router.post(
    "/street",
    response_model=RouteResponse,
    summary="Street route from the external routing service",
    responses={503: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def street_route(
    request: Request,
    body: StreetRouteRequest,
    client: RoutingClient = Depends(get_routing_client),
):
    result = await client.route(
        body.origin.to_domain(), body.destination.to_domain(), body.mode
    )
    if result is None:
        raise HTTPException(status_code=503, detail="Routing service unavailable")
    return RouteResponse.from_result(result)


@router.post(
    "/waypoints",
    response_model=RouteResponse,
    summary="Street route through ordered waypoints",
    responses={503: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def waypoints_route(
    request: Request,
    body: WaypointsRouteRequest,
    client: RoutingClient = Depends(get_routing_client),
):
    result = await client.route_with_waypoints(
        [w.to_domain() for w in body.waypoints], body.mode
    )
    if result is None:
        raise HTTPException(status_code=503, detail="Routing service unavailable")
    return RouteResponse.from_result(result)
