import logging

from magical_miles.ai.capability import TextGenerationCapability
from magical_miles.ai.parsing import parse_fare_estimate
from magical_miles.ai.prompts import fare_estimate_prompt
from magical_miles.core.result import Failure
from magical_miles.fare.calculator import (
    DEFAULT_FARE_BREAKDOWN,
    DEFAULT_TARIFF,
    Tariff,
    build_group_share,
    estimate_fare,
)
from magical_miles.fare.models import (
    DistanceMetrics,
    DistanceResolution,
    FareBreakdown,
    FareQuote,
    FareSource,
    FareTier,
    TripEndpoint,
    TripQuote,
)
from magical_miles.fare.resolver import (
    DEFAULT_FALLBACK_SPEED_KMH,
    RoutingCapability,
    resolve_distance_metrics,
)
from magical_miles.telemetry import ai_enrichment

logger = logging.getLogger(__name__)

ESTIMATE_NOTE = "Your portkey to adventure awaits!"
DEFAULT_NOTE = "Adventure awaits!"


class FareEngine:
    """Prices trips and splits fares between group members.

    Routing and AI text generation are optional, injected capabilities. When
    either is missing or fails the engine falls back to its own deterministic
    figures, so a quote is always produced.
    """

    def __init__(
        self,
        routing: RoutingCapability | None = None,
        ai: TextGenerationCapability | None = None,
        tariff: Tariff = DEFAULT_TARIFF,
        fallback_speed_kmh: float = DEFAULT_FALLBACK_SPEED_KMH,
        currency: str = "Galleons",
    ) -> None:
        self.routing = routing
        self.ai = ai
        self.tariff = tariff
        self.fallback_speed_kmh = fallback_speed_kmh
        self.currency = currency

    def estimate_fare(self, distance_km: float, duration_min: float) -> FareBreakdown:
        return estimate_fare(distance_km, duration_min, self.tariff)

    async def resolve_distance_metrics(
        self, origin: TripEndpoint, destination: TripEndpoint
    ) -> DistanceResolution:
        return await resolve_distance_metrics(
            origin, destination, self.routing, fallback_speed_kmh=self.fallback_speed_kmh
        )

    async def price_trip(
        self,
        metrics: DistanceMetrics,
        origin_name: str,
        destination_name: str,
        use_ai: bool = True,
    ) -> FareQuote:
        """Price resolved metrics, preferring a validated AI proposal when asked for one."""
        estimate = self.estimate_fare(metrics.kilometers, metrics.duration_minutes)
        fallback = FareQuote(breakdown=estimate, source=FareSource.ESTIMATE, note=ESTIMATE_NOTE)

        if not use_ai or self.ai is None:
            return fallback

        outcome = await self.ai.generate_text(
            fare_estimate_prompt(
                metrics.kilometers,
                metrics.duration_minutes,
                origin_name,
                destination_name,
                currency=self.currency,
            )
        )
        if isinstance(outcome, Failure):
            ai_enrichment.add(1, {"outcome": "unavailable"})
            return fallback

        parsed = parse_fare_estimate(outcome.value)
        if isinstance(parsed, Failure):
            logger.warning(f"Discarding AI fare estimate: {parsed.reason}")
            ai_enrichment.add(1, {"outcome": "rejected"})
            return fallback

        ai_enrichment.add(1, {"outcome": "used"})
        proposal = parsed.value
        return FareQuote(
            breakdown=proposal.to_breakdown(),
            source=FareSource.AI,
            note=proposal.magical_note or ESTIMATE_NOTE,
        )

    async def quote_trip(
        self,
        origin: TripEndpoint,
        destination: TripEndpoint,
        member_count: int,
        use_ai: bool = True,
    ) -> TripQuote:
        resolution = await self.resolve_distance_metrics(origin, destination)

        if resolution.tier == FareTier.DEFAULT or resolution.metrics is None:
            fare = FareQuote(
                breakdown=DEFAULT_FARE_BREAKDOWN, source=FareSource.DEFAULT, note=DEFAULT_NOTE
            )
        else:
            fare = await self.price_trip(
                resolution.metrics, origin.name, destination.name, use_ai=use_ai
            )

        logger.info(
            f"Quoted {fare.breakdown.total_fare:.2f} {self.currency} "
            f"for {member_count} member(s) (tier={resolution.tier.value}, "
            f"source={fare.source.value})"
        )
        return TripQuote(
            origin=origin,
            destination=destination,
            tier=resolution.tier,
            metrics=resolution.metrics,
            fare=fare,
            share=build_group_share(fare.breakdown.total_fare, member_count),
            fallback_reason=resolution.fallback_reason,
            currency=self.currency,
        )
