import httpx
import pytest

from src.app.services.routing.osrm_client import OSRMClient, check_health

COORDS = [(9.1714, 77.8614), (9.2, 77.9)]


def _client(handler) -> OSRMClient:
    return OSRMClient(base_url="http://osrm.test/", profile="driving", transport=httpx.MockTransport(handler))


def test_route_request_uses_lon_lat_order():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"code": "Ok", "routes": [{"distance": 4321.0}]})

    meters = _client(handler).route_distance_meters(COORDS)

    assert meters == 4321.0
    assert seen["path"] == "/route/v1/driving/77.8614,9.1714;77.9,9.2"
    assert seen["params"] == {"overview": "false", "steps": "false"}


def test_non_ok_code_raises_value_error():
    client = _client(lambda request: httpx.Response(200, json={"code": "NoRoute", "message": "Impossible route"}))

    with pytest.raises(ValueError, match="Impossible route"):
        client.route(COORDS)


@pytest.mark.parametrize(
    "body",
    [
        {"code": "Ok", "routes": []},
        {"code": "Ok", "routes": [{"duration": 10}]},
        {"code": "Ok", "routes": [{"distance": "far"}]},
        {"code": "Ok", "routes": [{"distance": -5000}]},
    ],
)
def test_malformed_body_raises_value_error(body):
    client = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(ValueError):
        client.route_distance_meters(COORDS)


def test_infinite_distance_raises_value_error():
    client = _client(lambda request: httpx.Response(200, content=b'{"code": "Ok", "routes": [{"distance": 1e400}]}'))

    with pytest.raises(ValueError):
        client.route_distance_meters(COORDS)


def test_non_json_body_raises_value_error():
    client = _client(lambda request: httpx.Response(200, text="<html>busy</html>"))

    with pytest.raises(ValueError):
        client.route(COORDS)


def test_error_status_is_raised():
    client = _client(lambda request: httpx.Response(502))

    with pytest.raises(httpx.HTTPStatusError):
        client.route(COORDS)


def test_connect_error_becomes_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ConnectionError):
        _client(handler).route(COORDS)


def test_timeout_is_raised():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(httpx.TimeoutException):
        _client(handler).route(COORDS)


def test_route_needs_two_coordinates():
    with pytest.raises(ValueError):
        _client(lambda request: httpx.Response(200)).route(COORDS[:1])


def test_missing_base_url_raises(monkeypatch):
    from src.app.services.routing import osrm_client

    monkeypatch.setattr(osrm_client.settings, "osrm_base_url", None)

    with pytest.raises(ValueError):
        OSRMClient()


def test_check_health():
    ok = httpx.MockTransport(lambda request: httpx.Response(200, json={"code": "Ok", "routes": [{"distance": 1.0}]}))
    down = httpx.MockTransport(lambda request: httpx.Response(503))

    assert check_health("http://osrm.test", transport=ok) is True
    assert check_health("http://osrm.test", transport=down) is False
