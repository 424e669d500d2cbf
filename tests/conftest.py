import os

# The API key has no default (the service must fail without it).
# Provide a test value so Settings() can be constructed in tests.
os.environ.setdefault("API_KEY", "test-api-key")

import pytest

from magical_miles.core.result import Failure, Result, Success
from magical_miles.fare.models import TripEndpoint
from magical_miles.geo.osrm_client import RouteResponse


class StubRouting:
    """Routing capability answering every request with a fixed outcome."""

    def __init__(self, outcome: Result[RouteResponse]):
        self.outcome = outcome
        self.calls: list[tuple[tuple[float, float], tuple[float, float]]] = []

    async def try_route(
        self, origin: tuple[float, float], destination: tuple[float, float]
    ) -> Result[RouteResponse]:
        self.calls.append((origin, destination))
        return self.outcome


class StubAI:
    """Text generation capability answering every prompt with a fixed outcome."""

    def __init__(self, outcome: Result[str], ready: bool = True):
        self.outcome = outcome
        self._ready = ready
        self.prompts: list[str] = []

    @property
    def ready(self) -> bool:
        return self._ready

    async def generate_text(self, prompt: str) -> Result[str]:
        self.prompts.append(prompt)
        return self.outcome


@pytest.fixture
def delhi() -> TripEndpoint:
    return TripEndpoint(name="Connaught Place, New Delhi", lat=28.6139, lng=77.2090)


@pytest.fixture
def noida() -> TripEndpoint:
    return TripEndpoint(name="Sector 18, Noida", lat=28.5355, lng=77.3910)


@pytest.fixture
def failing_routing() -> StubRouting:
    return StubRouting(Failure(reason="OSRMServiceError"))


@pytest.fixture
def routing_12_5_km() -> StubRouting:
    return StubRouting(
        Success(
            RouteResponse(
                distance_meters=12500.0,
                duration_seconds=1500.0,
                geometry=[(28.6139, 77.2090), (28.5355, 77.3910)],
                osrm_code="Ok",
            )
        )
    )


@pytest.fixture
def stub_ai_factory():
    """Build a StubAI returning the given text, or a Failure when text is None."""

    def _make(text: str | None, ready: bool = True) -> StubAI:
        outcome: Result[str] = Success(text) if text is not None else Failure("ai_api_error")
        return StubAI(outcome, ready=ready)

    return _make
