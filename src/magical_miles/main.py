"""
Magical Miles fare service entry point.

Wires the routing, geocoding and AI clients into the fare engine and serves
the HTTP API with uvicorn.
"""

import logging

import uvicorn

from magical_miles import __version__
from magical_miles.ai.advisor import TravelAdvisor
from magical_miles.ai.gemini_client import GeminiClient
from magical_miles.api.app import create_app
from magical_miles.app_logging import setup_logging
from magical_miles.fare.calculator import Tariff
from magical_miles.fare.engine import FareEngine
from magical_miles.geo.nominatim_client import NominatimClient
from magical_miles.geo.osrm_client import OSRMClient
from magical_miles.payment import MockPaymentProvider, PaymentService
from magical_miles.settings import Settings, get_settings
from magical_miles.telemetry import init_otel_sdk

logger = logging.getLogger(__name__)


def create_gemini_client(settings: Settings) -> GeminiClient | None:
    """Create the AI client, or None when AI features are switched off."""
    if not settings.gemini.enabled:
        logger.info("AI features disabled by configuration")
        return None
    client = GeminiClient(settings.gemini.api_key, model=settings.gemini.model)
    if not client.initialize():
        return None
    return client


def main() -> None:
    """Main entry point - initializes and runs the fare service."""
    settings = get_settings()

    setup_logging(
        level=settings.service.log_level,
        json_output=settings.service.log_format == "json",
        environment=settings.service.environment,
    )

    # Providers must exist before the app is created for auto-instrumentation
    if settings.service.otel_enabled:
        init_otel_sdk(
            settings.service.otel_endpoint,
            environment=settings.service.environment,
            service_version=__version__,
        )

    logger.info("Starting Magical Miles fare service...")

    osrm_client = OSRMClient(settings.osrm.base_url, timeout=settings.osrm.timeout)
    logger.info(f"OSRM client configured: {settings.osrm.base_url}")

    geocoder = NominatimClient(
        settings.nominatim.base_url,
        user_agent=settings.nominatim.user_agent,
        timeout=settings.nominatim.timeout,
    )

    gemini_client = create_gemini_client(settings)

    fare_engine = FareEngine(
        routing=osrm_client,
        ai=gemini_client,
        tariff=Tariff(
            base_fare=settings.fare.base_fare,
            per_km_rate=settings.fare.per_km_rate,
            per_min_rate=settings.fare.per_min_rate,
        ),
        fallback_speed_kmh=settings.fare.fallback_speed_kmh,
        currency=settings.fare.currency,
    )

    payment_service = PaymentService(
        {"mock": MockPaymentProvider(delay_seconds=settings.payment.mock_delay_seconds)}
    )

    app = create_app(
        fare_engine=fare_engine,
        geocoder=geocoder,
        advisor=TravelAdvisor(gemini_client),
        payment_service=payment_service,
        api_key=settings.api.key,
        cors_origins=settings.cors.origins,
        default_member_count=settings.fare.default_member_count,
        osrm_base_url=settings.osrm.base_url,
    )

    logger.info(f"Serving fare API on {settings.service.host}:{settings.service.port}")
    uvicorn.run(
        app,
        host=settings.service.host,
        port=settings.service.port,
        log_level=settings.service.log_level.lower(),
    )


if __name__ == "__main__":
    main()
