"""Distance resolution with a three-tier fallback.

1. Live routing metrics from the routing service.
2. Great-circle (Haversine) distance with a duration synthesized from an
   average speed, when routing fails.
3. No metrics at all when either endpoint lacks coordinates; the caller then
   prices the trip with ``DEFAULT_FARE_BREAKDOWN``.

Exactly one tier answers for any input.
"""

import logging
from typing import Protocol

from magical_miles.core.result import Failure, Result
from magical_miles.fare.models import (
    DistanceMetrics,
    DistanceResolution,
    DistanceSource,
    FareTier,
    TripEndpoint,
)
from magical_miles.fare.rounding import round_half_up
from magical_miles.geo.distance import haversine_distance_km
from magical_miles.geo.osrm_client import RouteResponse
from magical_miles.telemetry import fare_tiers

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_SPEED_KMH = 30.0


class RoutingCapability(Protocol):
    async def try_route(
        self, origin: tuple[float, float], destination: tuple[float, float]
    ) -> Result[RouteResponse]: ...


def metrics_from_route(route: RouteResponse) -> DistanceMetrics:
    return DistanceMetrics(
        meters=route.distance_meters,
        kilometers=route.distance_meters / 1000,
        duration_seconds=route.duration_seconds,
        duration_minutes=round_half_up(route.duration_seconds / 60),
        source=DistanceSource.ROUTING,
        geometry=route.geometry,
    )


def haversine_metrics(
    origin: tuple[float, float],
    destination: tuple[float, float],
    speed_kmh: float = DEFAULT_FALLBACK_SPEED_KMH,
) -> DistanceMetrics:
    """Estimate trip metrics from the great-circle distance.

    At the default 30 km/h the duration is two minutes per kilometer.
    """
    km = haversine_distance_km(origin[0], origin[1], destination[0], destination[1])
    seconds = km * 3600 / speed_kmh
    return DistanceMetrics(
        meters=km * 1000,
        kilometers=km,
        duration_seconds=seconds,
        duration_minutes=round_half_up(seconds / 60),
        source=DistanceSource.HAVERSINE,
    )


async def resolve_distance_metrics(
    origin: TripEndpoint,
    destination: TripEndpoint,
    routing: RoutingCapability | None,
    fallback_speed_kmh: float = DEFAULT_FALLBACK_SPEED_KMH,
) -> DistanceResolution:
    """Resolve trip distance and duration, falling back tier by tier."""
    if not (origin.has_coordinates and destination.has_coordinates):
        logger.info("Trip endpoints lack coordinates, using default fare")
        fare_tiers.add(1, {"tier": FareTier.DEFAULT.value})
        return DistanceResolution(
            tier=FareTier.DEFAULT,
            fallback_reason="missing_coordinates",
        )

    if routing is None:
        outcome: Result[RouteResponse] = Failure(reason="routing_disabled")
    else:
        outcome = await routing.try_route(origin.coordinates, destination.coordinates)

    if isinstance(outcome, Failure):
        metrics = haversine_metrics(
            origin.coordinates, destination.coordinates, speed_kmh=fallback_speed_kmh
        )
        logger.info(
            f"Estimated {metrics.kilometers:.2f} km from great-circle distance "
            f"({outcome.reason})"
        )
        fare_tiers.add(1, {"tier": FareTier.HAVERSINE.value})
        return DistanceResolution(
            tier=FareTier.HAVERSINE,
            metrics=metrics,
            fallback_reason=outcome.reason,
        )

    fare_tiers.add(1, {"tier": FareTier.ROUTING.value})
    return DistanceResolution(tier=FareTier.ROUTING, metrics=metrics_from_route(outcome.value))
