from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from magical_miles.ai.advisor import TravelAdvisor
from magical_miles.api.app import create_app
from magical_miles.api.rate_limit import limiter
from magical_miles.fare.engine import FareEngine
from magical_miles.geo.nominatim_client import NominatimClient
from magical_miles.payment import MockPaymentProvider, PaymentService


@pytest.fixture(autouse=True)
def _fresh_rate_limiter():
    """Rate limit counters live on the module-level limiter; keep tests independent."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def mock_geocoder() -> Mock:
    geocoder = Mock(spec=NominatimClient)
    geocoder.search_places = AsyncMock(return_value=[])
    geocoder.reverse_geocode = AsyncMock(return_value="Connaught Place, New Delhi")
    return geocoder


@pytest.fixture
def payment_service() -> PaymentService:
    return PaymentService({"mock": MockPaymentProvider(delay_seconds=0)})


@pytest.fixture
def make_app(mock_geocoder, payment_service, routing_12_5_km):
    """Build the API around stub routing/AI capabilities."""

    def _make(routing=routing_12_5_km, ai=None, osrm_base_url=None) -> FastAPI:
        return create_app(
            fare_engine=FareEngine(routing=routing, ai=ai),
            geocoder=mock_geocoder,
            advisor=TravelAdvisor(ai),
            payment_service=payment_service,
            api_key="test-api-key",
            default_member_count=4,
            osrm_base_url=osrm_base_url,
        )

    return _make


@pytest.fixture
def test_client(make_app) -> TestClient:
    return TestClient(make_app())


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-API-Key": "test-api-key"}
