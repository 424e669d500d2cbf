"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from magical_miles.ai.advisor import TravelAdvisor
from magical_miles.fare.engine import FareEngine
from magical_miles.geo.nominatim_client import NominatimClient
from magical_miles.payment import PaymentService


def get_fare_engine(request: Request) -> FareEngine:
    """Retrieve FareEngine from app state."""
    engine: FareEngine = request.app.state.fare_engine
    return engine


def get_geocoder(request: Request) -> NominatimClient:
    geocoder: NominatimClient = request.app.state.geocoder
    return geocoder


def get_advisor(request: Request) -> TravelAdvisor:
    advisor: TravelAdvisor = request.app.state.advisor
    return advisor


def get_payment_service(request: Request) -> PaymentService:
    service: PaymentService = request.app.state.payment_service
    return service


FareEngineDep = Annotated[FareEngine, Depends(get_fare_engine)]
GeocoderDep = Annotated[NominatimClient, Depends(get_geocoder)]
AdvisorDep = Annotated[TravelAdvisor, Depends(get_advisor)]
PaymentServiceDep = Annotated[PaymentService, Depends(get_payment_service)]
