"""Fare engine records.

All records are immutable and serialize with the camelCase keys the web
front-end keeps in session storage (``totalFare``, ``sharePerPerson``, ...).
"""

from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from magical_miles.fare.rounding import CURRENCY_UNIT, round_currency

# Largest single amount the service accepts, in Galleons
MAX_FARE_AMOUNT = 1_000_000.0


class FareModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class DistanceSource(str, Enum):
    ROUTING = "routing"
    HAVERSINE = "haversine"


class FareTier(str, Enum):
    """Which step of the fallback chain priced the trip."""

    ROUTING = "routing"
    HAVERSINE = "haversine"
    DEFAULT = "default"


class FareSource(str, Enum):
    ESTIMATE = "estimate"
    AI = "ai"
    DEFAULT = "default"


class TripEndpoint(FareModel):
    """A named trip origin or destination.

    Coordinates are missing when the rider typed a place name without picking
    a search result.
    """

    name: str
    latitude: float | None = Field(default=None, alias="lat", ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, alias="lng", ge=-180.0, le=180.0)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def coordinates(self) -> tuple[float, float]:
        if self.latitude is None or self.longitude is None:
            raise ValueError(f"Endpoint {self.name!r} has no coordinates")
        return (self.latitude, self.longitude)


class DistanceMetrics(FareModel):
    meters: float
    kilometers: float
    duration_seconds: float
    duration_minutes: int
    source: DistanceSource
    geometry: list[tuple[float, float]] = Field(default_factory=list)

    @computed_field(alias="distanceText")  # type: ignore[prop-decorator]
    @property
    def distance_text(self) -> str:
        if self.meters >= 1000:
            return f"{self.meters / 1000:.1f} km"
        return f"{round(self.meters)} m"

    @computed_field(alias="durationText")  # type: ignore[prop-decorator]
    @property
    def duration_text(self) -> str:
        if self.duration_seconds >= 3600:
            hours = int(self.duration_seconds // 3600)
            minutes = round((self.duration_seconds % 3600) / 60)
            return f"{hours}h {minutes}min"
        return f"{self.duration_minutes} min"


class FareBreakdown(FareModel):
    base_fare: float
    distance_charge: float
    time_charge: float
    total_fare: float

    @property
    def component_sum(self) -> float:
        return self.base_fare + self.distance_charge + self.time_charge


class AIFareEstimate(FareBreakdown):
    """Fare proposed by the AI text model, validated before it may be shown."""

    base_fare: float = Field(ge=0, le=MAX_FARE_AMOUNT, allow_inf_nan=False)
    distance_charge: float = Field(ge=0, le=MAX_FARE_AMOUNT, allow_inf_nan=False)
    time_charge: float = Field(ge=0, le=MAX_FARE_AMOUNT, allow_inf_nan=False)
    total_fare: float = Field(ge=0, le=MAX_FARE_AMOUNT, allow_inf_nan=False)
    price_per_km: float | None = Field(default=None, allow_inf_nan=False)
    magical_note: str | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("base_fare", "distance_charge", "time_charge", "total_fare")
    @classmethod
    def round_amount(cls, v: float) -> float:
        return round_currency(v)

    @model_validator(mode="after")
    def check_total_matches_components(self) -> Self:
        # One cent of slack: the total is rounded from the unrounded sum.
        if abs(self.total_fare - self.component_sum) > CURRENCY_UNIT + 1e-9:
            raise ValueError(
                f"totalFare {self.total_fare} does not match "
                f"components sum {self.component_sum:.2f}"
            )
        return self

    def to_breakdown(self) -> FareBreakdown:
        return FareBreakdown(
            base_fare=self.base_fare,
            distance_charge=self.distance_charge,
            time_charge=self.time_charge,
            total_fare=self.total_fare,
        )


class FareQuote(FareModel):
    breakdown: FareBreakdown
    source: FareSource
    note: str | None = None


class GroupShare(FareModel):
    total_fare: float
    member_count: int
    share_per_person: float


class DistanceResolution(FareModel):
    tier: FareTier
    metrics: DistanceMetrics | None = None
    fallback_reason: str | None = None

    @model_validator(mode="after")
    def metrics_match_tier(self) -> Self:
        if (self.tier == FareTier.DEFAULT) != (self.metrics is None):
            raise ValueError("Default tier carries no metrics; other tiers require them")
        return self


class TripQuote(FareModel):
    origin: TripEndpoint
    destination: TripEndpoint
    tier: FareTier
    metrics: DistanceMetrics | None
    fare: FareQuote
    share: GroupShare
    fallback_reason: str | None = None
    currency: str = "Galleons"
