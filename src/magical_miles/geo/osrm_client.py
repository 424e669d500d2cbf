import logging
import time

import httpx
import polyline
from pydantic import BaseModel

from magical_miles.core.exceptions import (
    MalformedResponseError,
    NetworkError,
    ServiceUnavailableError,
    ValidationError,
)
from magical_miles.core.result import Failure, Result, Success
from magical_miles.telemetry import routing_latency, routing_requests

logger = logging.getLogger(__name__)


class RouteResponse(BaseModel):
    distance_meters: float
    duration_seconds: float
    geometry: list[tuple[float, float]]
    osrm_code: str


class NoRouteFoundError(ValidationError):
    """No route found between coordinates. Inherits from ValidationError (non-retryable)."""

    pass


class OSRMServiceError(ServiceUnavailableError):
    """OSRM service error (5xx or connection failure)."""

    pass


class OSRMTimeoutError(NetworkError):
    """OSRM request timeout."""

    pass


ROUTING_ERRORS = (NoRouteFoundError, OSRMServiceError, OSRMTimeoutError, MalformedResponseError)


def decode_polyline(encoded: str, precision: int = 5) -> list[tuple[float, float]]:
    """Decode polyline string to list of (lat, lon) tuples."""
    coords = polyline.decode(encoded, precision)
    return [(lat, lon) for lat, lon in coords]


class OSRMClient:
    def __init__(self, base_url: str, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _route_url(self, origin: tuple[float, float], destination: tuple[float, float]) -> str:
        # OSRM expects lon,lat pairs
        origin_lat, origin_lon = origin
        dest_lat, dest_lon = destination
        return (
            f"{self.base_url}/route/v1/driving/"
            f"{origin_lon},{origin_lat};{dest_lon},{dest_lat}"
        )

    async def get_route(
        self, origin: tuple[float, float], destination: tuple[float, float]
    ) -> RouteResponse:
        """Get route between two (lat, lon) coordinates using OSRM."""
        url = self._route_url(origin, destination)
        params = {"overview": "full", "geometries": "polyline"}

        start_time = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            routing_requests.add(1, {"outcome": "timeout"})
            raise OSRMTimeoutError(f"Request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            routing_requests.add(1, {"outcome": "server_error"})
            raise OSRMServiceError(f"Network error: {e}") from e

        if response.status_code >= 500:
            routing_requests.add(1, {"outcome": "server_error"})
            raise OSRMServiceError(f"OSRM server error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            routing_requests.add(1, {"outcome": "malformed"})
            raise MalformedResponseError("OSRM response is not valid JSON") from e

        code = data.get("code") if isinstance(data, dict) else None
        if code != "Ok" or not data.get("routes"):
            routing_requests.add(1, {"outcome": "no_route"})
            raise NoRouteFoundError(
                "No route found between coordinates", details={"osrm_code": code}
            )

        try:
            route = data["routes"][0]
            result = RouteResponse(
                distance_meters=float(route["distance"]),
                duration_seconds=float(route["duration"]),
                geometry=decode_polyline(route["geometry"]) if route.get("geometry") else [],
                osrm_code=code,
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            routing_requests.add(1, {"outcome": "malformed"})
            raise MalformedResponseError(f"Unexpected OSRM route payload: {e}") from e

        routing_requests.add(1, {"outcome": "ok"})
        routing_latency.record((time.perf_counter() - start_time) * 1000)
        return result

    async def try_route(
        self, origin: tuple[float, float], destination: tuple[float, float]
    ) -> Result[RouteResponse]:
        """Like get_route, but known routing failures come back as a Failure."""
        try:
            return Success(await self.get_route(origin, destination))
        except ROUTING_ERRORS as e:
            logger.warning(f"Routing unavailable, falling back to great-circle estimate: {e}")
            return Failure(reason=type(e).__name__, error=e)
