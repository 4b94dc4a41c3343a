"""HTTP client for interacting with OSRM services."""

from __future__ import annotations

import logging
import math
from typing import Sequence

import httpx

from ...config import settings

logger = logging.getLogger(__name__)


class OSRMClient:
    def __init__(
        self,
        base_url: str | None = None,
        profile: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.osrm_base_url or "").rstrip("/")
        if not self.base_url:
            raise ValueError("OSRM base URL is not configured.")
        self.profile = profile or settings.osrm_profile
        self.timeout = timeout if timeout is not None else settings.osrm_timeout_seconds
        self.transport = transport

    def _get_client(self) -> httpx.Client:
        """Create a short-lived HTTP client for a single request."""
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 10.0)),
            transport=self.transport,
        )

    def route(self, coordinates: Sequence[tuple[float, float]]) -> dict:
        """Request a driving route through the coordinates in the given order.

        Makes exactly one request; failures are raised to the caller rather than retried.

        Args:
            coordinates: Sequence of (lat, lon) tuples for the route waypoints

        Returns:
            The decoded OSRM response, guaranteed to have ``code == "Ok"`` and a non-empty ``routes`` list.

        Raises:
            ValueError: OSRM answered with a non-"Ok" code or an unexpected body.
            ConnectionError: OSRM could not be reached.
            httpx.HTTPStatusError: OSRM answered with an error status.
            httpx.TimeoutException: OSRM did not answer within the timeout.
        """
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required for OSRM route.")

        # OSRM route endpoint expects coordinates as "lon,lat;lon,lat;..."
        coordinate_str = ";".join(f"{lon},{lat}" for lat, lon in coordinates)
        params = {"overview": "false", "steps": "false"}
        url = f"{self.base_url}/route/v1/{self.profile}/{coordinate_str}"

        client = self._get_client()
        try:
            try:
                response = client.get(url, params=params)
            except httpx.TimeoutException:
                raise
            except (httpx.ConnectError, httpx.NetworkError, OSError) as e:
                raise ConnectionError(f"Failed to connect to OSRM service at {self.base_url}: {e}") from e
            response.raise_for_status()
            try:
                data = response.json()
            except ValueError as e:
                raise ValueError("OSRM route response is not valid JSON.") from e
        finally:
            client.close()

        if not isinstance(data, dict):
            raise ValueError("OSRM route response is not a JSON object.")
        if data.get("code") != "Ok":
            error_msg = data.get("message") or data.get("code") or "Unknown OSRM route error"
            raise ValueError(f"OSRM route request failed: {error_msg}")
        if not data.get("routes"):
            raise ValueError("OSRM route response contains no routes.")
        return data

    def route_distance_meters(self, coordinates: Sequence[tuple[float, float]]) -> float:
        """Return the total driving distance in meters for the ordered coordinates."""
        data = self.route(coordinates)
        distance = data["routes"][0].get("distance")
        if isinstance(distance, bool) or not isinstance(distance, (int, float)):
            raise ValueError("OSRM route response is missing a numeric distance.")
        if not math.isfinite(distance) or distance < 0:
            raise ValueError(f"OSRM route response has an invalid distance: {distance}")
        return float(distance)


def check_health(base_url: str | None = None, transport: httpx.BaseTransport | None = None) -> bool:
    """Check OSRM service health by routing between two nearby points.

    Public OSRM endpoints may not have a /health endpoint, so we test
    connectivity by making a minimal route request around the hub.
    """
    base = base_url or settings.osrm_base_url
    if not base:
        return False
    hub = (settings.hub_latitude, settings.hub_longitude)
    nearby = (settings.hub_latitude + 0.01, settings.hub_longitude + 0.01)
    try:
        OSRMClient(base_url=base, transport=transport).route([hub, nearby])
        return True
    except (httpx.HTTPError, ConnectionError, ValueError) as exc:
        logger.info(f"OSRM health check failed: {exc}")
        return False
