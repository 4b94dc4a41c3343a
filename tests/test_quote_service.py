import pytest

from src.app.config import settings
from src.app.models.domain import TripShape, Waypoint
from src.app.schemas.quotes import PriceQuoteRequest, TripQuoteRequest
from src.app.services.quotes import service as quote_service
from src.app.services.routing.distance import RouteDistance

PICKUP = {"lat": 9.17, "lng": 77.86}
DROP = {"lat": 9.25, "lng": 77.95}
STOP_1 = {"lat": 9.19, "lng": 77.88}
STOP_2 = {"lat": 9.21, "lng": 77.9}


class FakeResolver:
    """Returns the hub distance for two-point lookups that end at the hub, the route distance otherwise."""

    def __init__(self, route_km: int, hub_km: int, source: str = "osrm"):
        self.route_km = route_km
        self.hub_km = hub_km
        self.source = source
        self.calls: list[list[Waypoint]] = []

    def __call__(self, waypoints):
        self.calls.append(list(waypoints))
        hub = Waypoint(settings.hub_latitude, settings.hub_longitude)
        if waypoints[-1] == hub:
            return RouteDistance(self.hub_km, self.source)
        return RouteDistance(self.route_km, self.source)


@pytest.fixture
def resolver(monkeypatch):
    fake = FakeResolver(route_km=4, hub_km=2)
    monkeypatch.setattr(quote_service, "resolve_route", fake)
    return fake


def test_single_trip_resolves_route_and_hub(resolver):
    payload = TripQuoteRequest(delivery_type="single", pickup=PICKUP, drop=DROP, stops=[STOP_1], weight_kg=40)
    result = quote_service.quote_trip(payload)

    assert resolver.calls[0] == [Waypoint(9.17, 77.86), Waypoint(9.25, 77.95)]
    assert resolver.calls[1] == [Waypoint(9.17, 77.86), quote_service.hub_waypoint()]
    assert result.quote.distance == 4
    assert result.quote.pickup_radius == 2
    assert result.quote.stops == 1
    assert result.quote.dedicated.model == "Dedicated - Single Drop"
    assert result.metadata == {
        "route_distance_source": "osrm",
        "hub_distance_source": "osrm",
        "waypoint_count": 2,
    }


def test_multiple_trip_visits_stops_then_end(resolver):
    payload = TripQuoteRequest(
        delivery_type=TripShape.MULTIPLE,
        pickup=PICKUP,
        drop=DROP,
        stops=[STOP_1, STOP_2],
        end=DROP,
        weight_kg=100,
        waiting_hours=2,
    )
    result = quote_service.quote_trip(payload)

    assert resolver.calls[0] == [
        Waypoint(9.17, 77.86),
        Waypoint(9.19, 77.88),
        Waypoint(9.21, 77.9),
        Waypoint(9.25, 77.95),
    ]
    assert result.quote.stops == 3
    assert result.quote.dedicated.model == "Dedicated - Medium"
    assert result.quote.dedicated.distance_charge == 4 * 15
    assert result.waypoint_count == 4


def test_missing_destination_uses_default_distance(resolver):
    payload = TripQuoteRequest(delivery_type="single", pickup=PICKUP)
    result = quote_service.quote_trip(payload)

    assert len(resolver.calls) == 1
    assert result.quote.distance == settings.default_route_distance_km
    assert result.route_distance_source == "default"


def test_missing_pickup_has_zero_hub_distance(resolver):
    payload = TripQuoteRequest(delivery_type="multiple", stops=[STOP_1], end=DROP)
    result = quote_service.quote_trip(payload)

    assert result.quote.pickup_radius == 0
    assert result.hub_distance_source == "none"
    assert resolver.calls == [[Waypoint(9.19, 77.88), Waypoint(9.25, 77.95)]]


def test_count_stops():
    assert quote_service.count_stops(TripQuoteRequest(delivery_type="single", stops=[STOP_1, STOP_2])) == 1
    assert quote_service.count_stops(TripQuoteRequest(delivery_type="multiple", stops=[STOP_1, STOP_2])) == 3
    assert quote_service.count_stops(TripQuoteRequest(delivery_type="multiple")) == 1


def test_price_quote_passes_inputs_through():
    quote = quote_service.price_quote(
        PriceQuoteRequest(
            distance_km=15,
            hub_distance_km=8,
            stops=4,
            weight_kg=200,
            waiting_hours=2,
            delivery_type="multiple",
        )
    )

    assert quote.dedicated.total == 575
    assert quote.scheduled.total == 440
