from fastapi import APIRouter, Depends, Path, Request

from magical_miles.ai.advisor import GroupSuggestions, TravelRecommendations
from magical_miles.api.auth import verify_api_key
from magical_miles.api.dependencies import AdvisorDep
from magical_miles.api.models.advisor import ChatReply, ChatRequest, GroupSuggestionsRequest
from magical_miles.api.rate_limit import AI_RATE_LIMIT, limiter

router = APIRouter(dependencies=[Depends(verify_api_key)])


@router.post("/groups/suggestions", response_model=GroupSuggestions)
@limiter.limit(AI_RATE_LIMIT)
async def group_suggestions(
    request: Request, body: GroupSuggestionsRequest, advisor: AdvisorDep
) -> GroupSuggestions:
    return await advisor.group_suggestions(body.origin, body.destination, body.group_size)


@router.get("/destinations/{name}/recommendations", response_model=TravelRecommendations)
@limiter.limit(AI_RATE_LIMIT)
async def destination_recommendations(
    request: Request, advisor: AdvisorDep, name: str = Path(max_length=200)
) -> TravelRecommendations:
    return await advisor.recommendations(name)


@router.post("/assistant/chat", response_model=ChatReply)
@limiter.limit(AI_RATE_LIMIT)
async def chat(request: Request, body: ChatRequest, advisor: AdvisorDep) -> ChatReply:
    return ChatReply(reply=await advisor.chat(body.message))
