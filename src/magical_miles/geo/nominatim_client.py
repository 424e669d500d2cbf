"""OpenStreetMap Nominatim geocoding client.

Place search feeds the trip planner's autocomplete; reverse geocoding names
the rider's device location.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from magical_miles.core.exceptions import (
    MalformedResponseError,
    NetworkError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3


class PlaceResult(BaseModel):
    name: str
    short_name: str = Field(serialization_alias="shortName")
    lat: float
    lng: float
    place_id: int | str | None = Field(default=None, serialization_alias="placeId")
    type: str | None = None
    address: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True)


class GeocodingError(ServiceUnavailableError):
    """Nominatim unreachable or answering with an error status."""

    pass


class GeocodingTimeoutError(NetworkError):
    pass


def format_coordinates(lat: float, lng: float) -> str:
    return f"{lat:.4f}, {lng:.4f}"


def _to_place(raw: dict[str, Any]) -> PlaceResult:
    display_name = raw["display_name"]
    return PlaceResult(
        name=display_name,
        short_name=raw.get("name") or display_name.split(",")[0],
        lat=float(raw["lat"]),
        lng=float(raw["lon"]),
        place_id=raw.get("place_id"),
        type=raw.get("type"),
        address=raw.get("address"),
    )


class NominatimClient:
    def __init__(self, base_url: str, user_agent: str, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {"Accept": "application/json", "User-Agent": user_agent}

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers) as client:
                response = await client.get(f"{self.base_url}{path}", params=params)
        except httpx.TimeoutException as e:
            raise GeocodingTimeoutError(f"Request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise GeocodingError(f"Network error: {e}") from e

        if response.status_code >= 400:
            raise GeocodingError(f"Nominatim error: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError("Nominatim response is not valid JSON") from e

    async def search_places(self, query: str, limit: int = 5) -> list[PlaceResult]:
        """Search places by free text. Short queries return nothing."""
        if len(query.strip()) < MIN_QUERY_LENGTH:
            return []

        data = await self._get_json(
            "/search",
            {"format": "json", "q": query, "limit": limit, "addressdetails": 1},
        )
        if not isinstance(data, list):
            raise MalformedResponseError("Nominatim search did not return a list")

        try:
            return [_to_place(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponseError(f"Unexpected Nominatim place payload: {e}") from e

    async def reverse_geocode(self, lat: float, lng: float) -> str:
        """Return a display address for coordinates, or the formatted coordinates."""
        data = await self._get_json(
            "/reverse",
            {"format": "json", "lat": lat, "lon": lng, "addressdetails": 1},
        )
        if isinstance(data, dict) and data.get("display_name"):
            return str(data["display_name"])
        return format_coordinates(lat, lng)
