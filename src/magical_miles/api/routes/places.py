import logging

from fastapi import APIRouter, Depends, Query

from magical_miles.api.auth import verify_api_key
from magical_miles.api.dependencies import GeocoderDep
from magical_miles.core.exceptions import MalformedResponseError, TransientError
from magical_miles.geo.nominatim_client import PlaceResult, format_coordinates

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(verify_api_key)])


@router.get("/search", response_model=list[PlaceResult])
async def search_places(
    geocoder: GeocoderDep,
    q: str = Query(max_length=200),
    limit: int = Query(default=5, ge=1, le=10),
) -> list[PlaceResult]:
    """Autocomplete place search. Geocoder failures yield an empty list."""
    try:
        return await geocoder.search_places(q, limit=limit)
    except (TransientError, MalformedResponseError) as e:
        logger.warning(f"Place search failed: {e}")
        return []


@router.get("/reverse")
async def reverse_geocode(
    geocoder: GeocoderDep,
    lat: float = Query(ge=-90, le=90),
    lng: float = Query(ge=-180, le=180),
) -> dict[str, str]:
    """Name a coordinate pair, falling back to the coordinates themselves."""
    try:
        address = await geocoder.reverse_geocode(lat, lng)
    except (TransientError, MalformedResponseError) as e:
        logger.warning(f"Reverse geocoding failed: {e}")
        address = format_coordinates(lat, lng)
    return {"address": address}
