from fastapi import APIRouter, Depends, Request

from magical_miles.api.auth import verify_api_key
from magical_miles.api.dependencies import FareEngineDep
from magical_miles.api.models.fares import (
    FareEstimateRequest,
    ShareRequest,
    TripQuoteRequest,
    TripQuoteResponse,
)
from magical_miles.api.rate_limit import AI_RATE_LIMIT, limiter
from magical_miles.fare.calculator import build_group_share
from magical_miles.fare.models import FareBreakdown, GroupShare
from magical_miles.trip_context import TripContext

router = APIRouter(dependencies=[Depends(verify_api_key)])


@router.post("/estimate", response_model=FareBreakdown)
def estimate_fare(body: FareEstimateRequest, engine: FareEngineDep) -> FareBreakdown:
    """Price a trip from known distance and duration."""
    return engine.estimate_fare(body.distance_km, body.duration_min)


@router.post("/share", response_model=GroupShare)
def calculate_share(body: ShareRequest) -> GroupShare:
    """Split a total fare evenly between group members."""
    return build_group_share(body.total_fare, body.member_count)


@router.post("/quote", response_model=TripQuoteResponse)
@limiter.limit(AI_RATE_LIMIT)
async def quote_trip(
    request: Request, body: TripQuoteRequest, engine: FareEngineDep
) -> TripQuoteResponse:
    """Quote a trip end to end. Always answers with a fare, whatever is unreachable."""
    member_count = body.member_count or request.app.state.default_member_count
    quote = await engine.quote_trip(
        body.origin, body.destination, member_count, use_ai=body.use_ai
    )
    context = TripContext.start(body.origin, body.destination).with_quote(
        quote, group_name=body.group_name
    )
    return TripQuoteResponse(quote=quote, session=context.to_session())
