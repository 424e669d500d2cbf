from pydantic import Field

from magical_miles.api.models.base import CamelModel


class GroupSuggestionsRequest(CamelModel):
    origin: str = "Unknown"
    destination: str = "Unknown"
    group_size: int = Field(default=1, ge=1, le=8)


class ChatRequest(CamelModel):
    message: str = Field(min_length=1, max_length=500)


class ChatReply(CamelModel):
    reply: str
