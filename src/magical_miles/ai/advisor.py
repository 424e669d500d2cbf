"""Themed travel companion features backed by the AI text model.

Every operation has a fixed fallback, so the rider always sees something
even with no API key configured.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from magical_miles.ai.capability import TextGenerationCapability
from magical_miles.ai.parsing import parse_model
from magical_miles.ai.prompts import (
    group_suggestions_prompt,
    travel_chat_prompt,
    travel_recommendations_prompt,
)
from magical_miles.core.result import Failure

logger = logging.getLogger(__name__)

CHAT_UNAVAILABLE_REPLY = "The magical oracle is currently unavailable. Please try again later!"
CHAT_ERROR_REPLY = "Merlin's beard! Something went wrong. Please try again!"


class AdvisorModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class GroupSuggestions(AdvisorModel):
    group_name: str
    match_quality: str = "Good"
    wizard_types: list[str] = Field(default_factory=list)
    shared_interests: list[str] = Field(default_factory=list)
    travel_advice: str = ""
    estimated_savings: str = ""


class TravelRecommendations(AdvisorModel):
    title: str
    magical_fact: str = ""
    tips: list[str] = Field(default_factory=list)
    best_time_to_travel: str = ""
    estimated_travel_class: str = "Standard"


def default_group_suggestions(group_size: int) -> GroupSuggestions:
    savings = round((1 - 1 / group_size) * 100) if group_size > 0 else 0
    return GroupSuggestions(
        group_name="The Fellowship of Travelers",
        match_quality="Good",
        wizard_types=["Adventurer", "Explorer"],
        shared_interests=["Travel", "New experiences"],
        travel_advice="Together we journey, together we save!",
        estimated_savings=f"{savings}%",
    )


def default_recommendations(destination: str) -> TravelRecommendations:
    return TravelRecommendations(
        title=destination,
        magical_fact="Every journey is a step towards adventure!",
        tips=["Travel light", "Stay alert", "Enjoy the ride"],
        best_time_to_travel="Anytime is magical",
        estimated_travel_class="Standard",
    )


class TravelAdvisor:
    def __init__(self, ai: TextGenerationCapability | None = None):
        self.ai = ai

    async def group_suggestions(
        self, origin: str, destination: str, group_size: int
    ) -> GroupSuggestions:
        if self.ai is None:
            return default_group_suggestions(group_size)

        outcome = await self.ai.generate_text(
            group_suggestions_prompt(origin, destination, group_size)
        )
        if isinstance(outcome, Failure):
            return default_group_suggestions(group_size)

        parsed = parse_model(outcome.value, GroupSuggestions)
        if isinstance(parsed, Failure):
            logger.warning(f"Discarding AI group suggestions: {parsed.reason}")
            return default_group_suggestions(group_size)
        return parsed.value

    async def recommendations(self, destination: str) -> TravelRecommendations:
        if self.ai is None:
            return default_recommendations(destination)

        outcome = await self.ai.generate_text(travel_recommendations_prompt(destination))
        if isinstance(outcome, Failure):
            return default_recommendations(destination)

        parsed = parse_model(outcome.value, TravelRecommendations)
        if isinstance(parsed, Failure):
            logger.warning(f"Discarding AI travel recommendations: {parsed.reason}")
            return default_recommendations(destination)
        return parsed.value

    async def chat(self, message: str) -> str:
        if self.ai is None or not self.ai.ready:
            return CHAT_UNAVAILABLE_REPLY

        outcome = await self.ai.generate_text(travel_chat_prompt(message))
        if isinstance(outcome, Failure):
            return CHAT_ERROR_REPLY
        return outcome.value.strip()
