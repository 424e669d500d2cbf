"""FastAPI application factory for the Magical Miles fare service."""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Literal

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from slowapi.errors import RateLimitExceeded

from magical_miles import __version__
from magical_miles.api.models.health import DetailedHealthResponse, ServiceHealth
from magical_miles.api.rate_limit import limiter, rate_limit_exceeded_handler
from magical_miles.api.routes import advisor as advisor_routes
from magical_miles.api.routes import fares, payments, places
from magical_miles.api.validation import request_validation_handler
from magical_miles.core.correlation import with_correlation

if TYPE_CHECKING:
    from magical_miles.ai.advisor import TravelAdvisor
    from magical_miles.fare.engine import FareEngine
    from magical_miles.geo.nominatim_client import NominatimClient
    from magical_miles.payment import PaymentService

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Connaught Place to India Gate, New Delhi
HEALTH_CHECK_ROUTE = "77.2167,28.6315;77.2295,28.6129"


def _determine_status(
    latency_ms: float | None,
    threshold_degraded: float = 500,
    threshold_unhealthy: float = 2000,
) -> Literal["healthy", "degraded", "unhealthy"]:
    """Determine service status based on latency thresholds."""
    if latency_ms is None:
        return "unhealthy"
    if latency_ms < threshold_degraded:
        return "healthy"
    if latency_ms < threshold_unhealthy:
        return "degraded"
    return "unhealthy"


def create_app(
    fare_engine: FareEngine,
    geocoder: NominatimClient,
    advisor: TravelAdvisor,
    payment_service: PaymentService,
    api_key: str,
    cors_origins: str = "http://localhost:5173",
    default_member_count: int = 4,
    osrm_base_url: str | None = None,
) -> FastAPI:
    """Create FastAPI application with injected dependencies.

    Args:
        fare_engine: FareEngine used for estimates and trip quotes
        geocoder: Place search and reverse geocoding client
        advisor: AI travel companion with deterministic fallbacks
        payment_service: Pays fare shares through configured providers
        api_key: Key expected in the X-API-Key header
        cors_origins: Comma-separated allowed origins
        default_member_count: Group size used when a quote request omits it
        osrm_base_url: Routing server probed by /health/detailed (optional)
    """
    app = FastAPI(
        title="Magical Miles Fare API",
        version=__version__,
        description="Fare estimation and group cost sharing for Magical Miles trips",
    )

    # Auto-instrument FastAPI (generates traces for all HTTP requests)
    FastAPIInstrumentor.instrument_app(app)

    # Auto-instrument HTTPX (traces outbound calls to OSRM, Nominatim and Gemini)
    HTTPXClientInstrumentor().instrument()

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]

    # Set immediately (not in a lifespan) so they're available for testing
    app.state.fare_engine = fare_engine
    app.state.geocoder = geocoder
    app.state.advisor = advisor
    app.state.payment_service = payment_service
    app.state.api_key = api_key
    app.state.default_member_count = default_member_count
    app.state.osrm_base_url = osrm_base_url

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in cors_origins.split(",") if origin.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def correlation_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        with with_correlation(request_id):
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    app.include_router(fares.router, prefix="/fares", tags=["fares"])
    app.include_router(places.router, prefix="/places", tags=["places"])
    app.include_router(advisor_routes.router, tags=["advisor"])
    app.include_router(payments.router, prefix="/payments", tags=["payments"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint for monitoring (unauthenticated for infrastructure)."""
        return {"status": "healthy"}

    @app.get("/health/detailed", response_model=DetailedHealthResponse)
    async def detailed_health_check() -> DetailedHealthResponse:
        """Detailed health of the optional capabilities behind the fare engine."""

        async def check_osrm() -> ServiceHealth:
            """Check OSRM health via test route request."""
            base_url = app.state.osrm_base_url
            if not base_url:
                return ServiceHealth(status="degraded", message="Routing disabled")

            test_url = f"{base_url}/route/v1/driving/{HEALTH_CHECK_ROUTE}"
            try:
                start = time.perf_counter()
                async with httpx.AsyncClient(timeout=5.0) as client:
                    response = await client.get(test_url, params={"overview": "false"})
                latency_ms = (time.perf_counter() - start) * 1000
            except httpx.TimeoutException:
                return ServiceHealth(status="unhealthy", message="Request timed out")
            except httpx.HTTPError as e:
                return ServiceHealth(
                    status="unhealthy", message=f"Connection failed: {str(e)[:50]}"
                )

            if response.status_code == 200:
                return ServiceHealth(
                    status=_determine_status(latency_ms),
                    latency_ms=round(latency_ms, 2),
                    message="Routing available",
                )
            return ServiceHealth(
                status="degraded",
                latency_ms=round(latency_ms, 2),
                message=f"HTTP {response.status_code}",
            )

        def check_ai() -> ServiceHealth:
            ai = app.state.advisor.ai
            if ai is not None and ai.ready:
                return ServiceHealth(status="healthy", message="AI model configured")
            return ServiceHealth(status="degraded", message="AI disabled, using fixed fallbacks")

        osrm_health = await check_osrm()
        ai_health = check_ai()

        statuses = {osrm_health.status, ai_health.status}
        overall: Literal["healthy", "degraded", "unhealthy"]
        if statuses == {"healthy"}:
            overall = "healthy"
        else:
            # Quotes keep flowing through the fallback tiers whatever is down
            overall = "degraded"

        return DetailedHealthResponse(
            overall_status=overall,
            osrm=osrm_health,
            ai=ai_health,
            timestamp=datetime.now(UTC).isoformat(),
        )

    logger.info("Fare API created")
    return app
