"""Fare estimation and group cost sharing."""

from .calculator import (
    DEFAULT_FARE_BREAKDOWN,
    DEFAULT_TARIFF,
    Tariff,
    build_group_share,
    calculate_share,
    estimate_fare,
)
from .models import (
    DistanceMetrics,
    DistanceResolution,
    FareBreakdown,
    FareQuote,
    FareTier,
    GroupShare,
    TripEndpoint,
    TripQuote,
)

__all__ = [
    "DEFAULT_FARE_BREAKDOWN",
    "DEFAULT_TARIFF",
    "DistanceMetrics",
    "DistanceResolution",
    "FareBreakdown",
    "FareQuote",
    "FareTier",
    "GroupShare",
    "Tariff",
    "TripEndpoint",
    "TripQuote",
    "build_group_share",
    "calculate_share",
    "estimate_fare",
]
