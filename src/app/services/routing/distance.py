"""Road distance resolution with a straight-line fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

import httpx

from ...models.domain import Waypoint
from ..geospatial import path_length_km
from ..rounding import round_half_up
from .osrm_client import OSRMClient

logger = logging.getLogger(__name__)

DistanceSource = Literal["osrm", "haversine", "none"]


@dataclass(frozen=True, slots=True)
class RouteDistance:
    distance_km: int
    source: DistanceSource


def fallback_distance_km(waypoints: Sequence[Waypoint]) -> int:
    """Great-circle length of the path through the waypoints, to the nearest km."""
    return round_half_up(path_length_km([waypoint.as_tuple() for waypoint in waypoints]))


def resolve_route(waypoints: Sequence[Waypoint], client: OSRMClient | None = None) -> RouteDistance:
    """Resolve the road distance through the waypoints in order.

    Queries OSRM once. Any failure (unreachable, timeout, error status, non-"Ok"
    code or malformed body) falls back to the haversine path length.
    Fewer than two waypoints resolve to zero.
    """
    if len(waypoints) < 2:
        return RouteDistance(distance_km=0, source="none")

    coordinates = [waypoint.as_tuple() for waypoint in waypoints]
    try:
        osrm = client or OSRMClient()
        meters = osrm.route_distance_meters(coordinates)
        return RouteDistance(distance_km=round_half_up(meters / 1000), source="osrm")
    except (httpx.HTTPError, ConnectionError, ValueError, KeyError, TypeError) as exc:
        logger.warning(f"OSRM routing failed, falling back to haversine: {exc}")

    return RouteDistance(distance_km=fallback_distance_km(waypoints), source="haversine")


def resolve_distance(waypoints: Sequence[Waypoint], client: OSRMClient | None = None) -> int:
    """Return the road distance in whole kilometers through the ordered waypoints."""
    return resolve_route(waypoints, client=client).distance_km
