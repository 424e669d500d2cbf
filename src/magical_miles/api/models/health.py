"""Health check models for service monitoring."""

from typing import Literal

from pydantic import BaseModel


class ServiceHealth(BaseModel):
    """Health status for a single dependency."""

    status: Literal["healthy", "degraded", "unhealthy"]
    latency_ms: float | None = None
    message: str | None = None


class DetailedHealthResponse(BaseModel):
    """Detailed health check response for all dependencies.

    The fare engine keeps quoting when these are down; "degraded" means
    quotes fall back to great-circle estimates or deterministic fares.
    """

    overall_status: Literal["healthy", "degraded", "unhealthy"]
    osrm: ServiceHealth
    ai: ServiceHealth
    timestamp: str
