"""Per-client rate limits for the endpoints that may call the AI model.

Gemini quota is the scarce resource, so only AI-backed routes carry
``@limiter.limit(AI_RATE_LIMIT)``. Clients are keyed by API key, falling
back to the remote address.
"""

from opentelemetry import metrics
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

AI_RATE_LIMIT = "20/minute"

meter = metrics.get_meter("magical_miles")

rate_limit_hits = meter.create_counter(
    name="api_rate_limit_hits_total",
    description="Requests rejected by the AI endpoint rate limit",
    unit="1",
)


def get_api_key_or_ip(request: Request) -> str:
    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"key:{api_key}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(key_func=get_api_key_or_ip)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Answer 429 with a Retry-After equal to the exceeded limit's window."""
    rate_limit_hits.add(1, {"endpoint": request.url.path})

    window_seconds = exc.limit.limit.get_expiry()
    response = JSONResponse(
        status_code=429,
        content={"error": f"Rate limit exceeded: {exc.detail}"},
    )
    response.headers["retry-after"] = str(window_seconds)
    return response
