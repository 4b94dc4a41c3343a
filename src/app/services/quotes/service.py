"""Trip quote orchestration: resolve distances, then price."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...config import settings
from ...models.domain import TripShape, Waypoint
from ...schemas.quotes import PriceQuoteRequest, TripQuoteRequest
from ..pricing.engine import compute_quote
from ..pricing.models import QuoteResult
from ..routing.distance import resolve_route

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TripQuote:
    quote: QuoteResult
    route_distance_source: str
    hub_distance_source: str
    waypoint_count: int

    @property
    def metadata(self) -> dict:
        return {
            "route_distance_source": self.route_distance_source,
            "hub_distance_source": self.hub_distance_source,
            "waypoint_count": self.waypoint_count,
        }


def hub_waypoint() -> Waypoint:
    return Waypoint(latitude=settings.hub_latitude, longitude=settings.hub_longitude)


def build_waypoints(payload: TripQuoteRequest) -> list[Waypoint]:
    """Order the known locations as pickup, stops, then the final destination."""
    waypoints: list[Waypoint] = []
    if payload.pickup:
        waypoints.append(payload.pickup.to_waypoint())
    if payload.delivery_type == TripShape.MULTIPLE:
        waypoints.extend(stop.to_waypoint() for stop in payload.stops)
        if payload.end:
            waypoints.append(payload.end.to_waypoint())
    elif payload.drop:
        waypoints.append(payload.drop.to_waypoint())
    return waypoints


def count_stops(payload: TripQuoteRequest) -> int:
    if payload.delivery_type == TripShape.SINGLE:
        return 1
    # The end location is the last stop
    return len(payload.stops) + 1


def price_quote(payload: PriceQuoteRequest) -> QuoteResult:
    return compute_quote(
        distance_km=payload.distance_km,
        hub_distance_km=payload.hub_distance_km,
        stops=payload.stops,
        weight_kg=payload.weight_kg,
        waiting_hours=payload.waiting_hours,
        trip_shape=payload.delivery_type,
    )


def quote_trip(payload: TripQuoteRequest) -> TripQuote:
    waypoints = build_waypoints(payload)

    if len(waypoints) >= 2:
        route = resolve_route(waypoints)
        route_km, route_source = route.distance_km, route.source
    else:
        route_km, route_source = settings.default_route_distance_km, "default"

    hub_km, hub_source = 0, "none"
    if payload.pickup:
        hub = resolve_route([payload.pickup.to_waypoint(), hub_waypoint()])
        hub_km, hub_source = hub.distance_km, hub.source

    logger.info(
        f"Resolved trip distances: route {route_km} km ({route_source}), "
        f"hub {hub_km} km ({hub_source}), {len(waypoints)} waypoints"
    )

    quote = compute_quote(
        distance_km=route_km,
        hub_distance_km=hub_km,
        stops=count_stops(payload),
        weight_kg=payload.weight_kg,
        waiting_hours=payload.waiting_hours,
        trip_shape=payload.delivery_type,
    )
    return TripQuote(
        quote=quote,
        route_distance_source=route_source,
        hub_distance_source=hub_source,
        waypoint_count=len(waypoints),
    )
