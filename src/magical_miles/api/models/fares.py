from typing import Any

from pydantic import Field

from magical_miles.api.models.base import CamelModel
from magical_miles.fare.models import MAX_FARE_AMOUNT, TripEndpoint, TripQuote


# Longest trip the service will price, in kilometers or minutes
MAX_TRIP_EXTENT = 20_000


class FareEstimateRequest(CamelModel):
    distance_km: float = Field(ge=0, le=MAX_TRIP_EXTENT, allow_inf_nan=False)
    duration_min: float = Field(ge=0, le=MAX_TRIP_EXTENT, allow_inf_nan=False)


class ShareRequest(CamelModel):
    total_fare: float = Field(ge=0, le=MAX_FARE_AMOUNT, allow_inf_nan=False)
    member_count: int = Field(ge=1, le=8)


class TripQuoteRequest(CamelModel):
    origin: TripEndpoint
    destination: TripEndpoint
    member_count: int | None = Field(default=None, ge=1, le=8)
    group_name: str = Field(default="Travel Group", max_length=80)
    use_ai: bool = True


class TripQuoteResponse(CamelModel):
    quote: TripQuote
    # tripData / fareInfo entries for the browser's session storage
    session: dict[str, Any]
