import json

import pytest

from magical_miles.ai.advisor import (
    CHAT_ERROR_REPLY,
    CHAT_UNAVAILABLE_REPLY,
    TravelAdvisor,
    default_group_suggestions,
    default_recommendations,
)


@pytest.mark.unit
class TestDefaults:
    @pytest.mark.parametrize(("size", "savings"), [(1, "0%"), (2, "50%"), (3, "67%"), (4, "75%")])
    def test_group_savings(self, size, savings):
        assert default_group_suggestions(size).estimated_savings == savings

    def test_group_fallback_content(self):
        suggestions = default_group_suggestions(4)

        assert suggestions.group_name == "The Fellowship of Travelers"
        assert suggestions.match_quality == "Good"

    def test_recommendations_titled_with_destination(self):
        recommendations = default_recommendations("Diagon Alley")

        assert recommendations.title == "Diagon Alley"
        assert len(recommendations.tips) == 3

    def test_camel_case_keys(self):
        dumped = default_group_suggestions(2).model_dump(by_alias=True)

        assert "groupName" in dumped
        assert "estimatedSavings" in dumped


async def test_group_suggestions_without_ai():
    suggestions = await TravelAdvisor().group_suggestions("Delhi", "Noida", 3)

    assert suggestions == default_group_suggestions(3)


async def test_group_suggestions_from_ai(stub_ai_factory):
    payload = json.dumps(
        {
            "groupName": "The Order of the Open Road",
            "matchQuality": "Excellent",
            "wizardTypes": ["Seeker"],
            "sharedInterests": ["Quidditch"],
            "travelAdvice": "Keep your wands handy.",
            "estimatedSavings": "60%",
        }
    )
    ai = stub_ai_factory(payload)

    suggestions = await TravelAdvisor(ai).group_suggestions("Delhi", "Noida", 3)

    assert suggestions.group_name == "The Order of the Open Road"
    assert suggestions.wizard_types == ["Seeker"]
    assert "Current group size: 3" in ai.prompts[0]


async def test_group_suggestions_unparseable(stub_ai_factory):
    advisor = TravelAdvisor(stub_ai_factory("I solemnly swear I am up to no good."))

    suggestions = await advisor.group_suggestions("Delhi", "Noida", 2)

    assert suggestions == default_group_suggestions(2)


async def test_recommendations_ai_failure(stub_ai_factory):
    advisor = TravelAdvisor(stub_ai_factory(None))

    assert await advisor.recommendations("Hogsmeade") == default_recommendations("Hogsmeade")


async def test_recommendations_from_ai(stub_ai_factory):
    advisor = TravelAdvisor(
        stub_ai_factory(
            '{"title": "Hogsmeade", "tips": ["Visit Honeydukes"], "bestTimeToTravel": "Winter"}'
        )
    )

    recommendations = await advisor.recommendations("Hogsmeade")

    assert recommendations.tips == ["Visit Honeydukes"]
    assert recommendations.best_time_to_travel == "Winter"
    assert recommendations.estimated_travel_class == "Standard"


async def test_chat_reply(stub_ai_factory):
    advisor = TravelAdvisor(stub_ai_factory("  Take the Knight Bus!  \n"))

    assert await advisor.chat("How do I get to London?") == "Take the Knight Bus!"


async def test_chat_without_ai():
    assert await TravelAdvisor().chat("Hello") == CHAT_UNAVAILABLE_REPLY


async def test_chat_ai_not_ready(stub_ai_factory):
    ai = stub_ai_factory("unused", ready=False)

    assert await TravelAdvisor(ai).chat("Hello") == CHAT_UNAVAILABLE_REPLY
    assert ai.prompts == []


async def test_chat_failure(stub_ai_factory):
    assert await TravelAdvisor(stub_ai_factory(None)).chat("Hello") == CHAT_ERROR_REPLY
