"""Tests for the OpenAI-backed recommender and profile generator."""
import json
from unittest.mock import AsyncMock

import pytest

from garden_calendar.modules.planting_calendar.domain.services import RecommendationRequest
from garden_calendar.modules.planting_calendar.infrastructure.external.openai_chat import extract_content
from garden_calendar.modules.planting_calendar.infrastructure.external.openai_profile_generator import (
    OpenAIPlantProfileGenerator,
    parse_profile_response,
)
from garden_calendar.modules.planting_calendar.infrastructure.external.openai_recommender import (
    OpenAIPlantingDateRecommender,
)
from garden_calendar.shared.core.exceptions import ExternalAPIError

from conftest import make_plant


def _chat_response(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


# --------------------
# Chat helpers
# --------------------
def test_extract_content_reads_first_choice():
    assert extract_content(_chat_response("04-10")) == "04-10"


@pytest.mark.parametrize("response", [{}, {"choices": []}, {"choices": [{}]}, {"raw_response": "oops"}])
def test_extract_content_rejects_malformed_response(response):
    with pytest.raises(ExternalAPIError):
        extract_content(response)


# --------------------
# OpenAIPlantingDateRecommender
# --------------------
@pytest.mark.asyncio
async def test_recommender_posts_single_chat_request_and_returns_raw_answer():
    client = AsyncMock()
    client.post.return_value = _chat_response(" 04-10\n")
    recommender = OpenAIPlantingDateRecommender(client, model="gpt-4", timeout=20)
    request = RecommendationRequest(
        plant_name="Tomato",
        sun_preference="Full Sun",
        watering_preference="Keep Soil Moist",
        city="Portland",
        country="USA",
    )

    answer = await recommender.recommend(request)

    assert answer == " 04-10\n"
    client.post.assert_awaited_once()
    endpoint = client.post.await_args.args[0]
    data = client.post.await_args.kwargs["data"]
    assert endpoint == "chat/completions"
    assert data["model"] == "gpt-4"
    assert "Portland, USA" in data["messages"][1]["content"]
    assert "MM-DD" in data["messages"][1]["content"]
    assert client.post.await_args.kwargs["timeout"] == 20


def test_recommender_prompt_without_location():
    recommender = OpenAIPlantingDateRecommender(AsyncMock())
    prompt = recommender.build_prompt(RecommendationRequest(
        plant_name="Basil", sun_preference="Full Sun", watering_preference="Water When Dry"
    ))

    assert "an unspecified location" in prompt
    assert "Basil" in prompt


# --------------------
# parse_profile_response
# --------------------
def test_parse_profile_response_builds_profile():
    content = json.dumps({
        "exists": True,
        "plantProfile": {
            "name": "Cherry Tomato",
            "sunPreference": "Full Sun",
            "wateringPreference": "Keep Soil Moist",
            "generalInformation": "Space plants 60cm apart.",
        },
    })

    profile = parse_profile_response(content)

    assert profile.id == "cherry-tomato"
    assert profile.display_name == "Cherry Tomato"
    assert profile.sun_preference == "Full Sun"
    assert profile.general_information == "Space plants 60cm apart."


def test_parse_profile_response_handles_code_fence():
    content = "```json\n" + json.dumps({"exists": False}) + "\n```"

    assert parse_profile_response(content) is None


@pytest.mark.parametrize("content", [
    "not json",
    json.dumps({"exists": True}),
    json.dumps({"exists": True, "plantProfile": {"name": "Fern", "sunPreference": "Moonlight",
                                                 "wateringPreference": "Water When Dry"}}),
])
def test_parse_profile_response_rejects_unreadable_answers(content):
    with pytest.raises(ExternalAPIError):
        parse_profile_response(content)


# --------------------
# OpenAIPlantProfileGenerator
# --------------------
@pytest.mark.asyncio
async def test_generate_profile_returns_none_for_non_plants():
    client = AsyncMock()
    client.post.return_value = _chat_response(json.dumps({"exists": False}))

    assert await OpenAIPlantProfileGenerator(client).generate_profile("Toaster") is None


@pytest.mark.asyncio
async def test_generate_image_url_builds_prompt_then_requests_image():
    client = AsyncMock()
    client.post.side_effect = [
        _chat_response("A cartoon basil plant on white."),
        {"data": [{"url": "https://images.example/basil.png"}]},
    ]
    generator = OpenAIPlantProfileGenerator(client, image_model="dall-e-3")

    url = await generator.generate_image_url(make_plant("Basil"))

    assert url == "https://images.example/basil.png"
    image_call = client.post.await_args_list[1]
    assert image_call.args[0] == "images/generations"
    assert image_call.kwargs["data"]["prompt"] == "A cartoon basil plant on white."
    assert image_call.kwargs["data"]["model"] == "dall-e-3"


@pytest.mark.asyncio
async def test_generate_image_url_empty_prompt_skips_image_request():
    client = AsyncMock()
    client.post.return_value = _chat_response("   ")

    assert await OpenAIPlantProfileGenerator(client).generate_image_url(make_plant("Basil")) == ""
    assert client.post.await_count == 1


@pytest.mark.asyncio
async def test_generate_image_url_missing_url_raises():
    client = AsyncMock()
    client.post.side_effect = [_chat_response("prompt"), {"data": []}]

    with pytest.raises(ExternalAPIError):
        await OpenAIPlantProfileGenerator(client).generate_image_url(make_plant("Basil"))
