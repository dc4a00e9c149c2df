# 📄 File: garden_calendar/modules/planting_calendar/infrastructure/external/openai_recommender.py
# 🧭 Purpose (Layman Explanation):
# Asks the AI gardening expert for the best month and day to plant something where the
# gardener lives.
# 🧪 Purpose (Technical Summary):
# PlantingDateRecommender backed by an OpenAI-compatible chat completion. The client is
# expected to make a single attempt; the raw answer is returned for the resolver to validate.
# 🔗 Dependencies:
# - openai_chat.py (APIClient based chat helper)
# - Domain recommendation port
# 🔄 Connected Modules / Calls From:
# PlantingDateResolver (through the port), presentation dependencies

from typing import Optional

from garden_calendar.shared.infrastructure.external_apis.api_client import APIClient
from garden_calendar.shared.utils.logging import get_logger

from ...domain.services.recommendation import PlantingDateRecommender, RecommendationRequest
from .openai_chat import complete_chat, message

logger = get_logger(__name__)

SYSTEM_PROMPT = "You are a gardening expert. Respond only with a month and day in MM-DD format."

USER_PROMPT = """
Based on the following data, provide ONLY the recommended planting month and day in MM-DD format for {location}.
Plant: {plant_name}
Growing Requirements:
- Sun: {sun_preference}
- Water: {watering_preference}
Consider the typical growing season and climate for {location}.
Return only the month and day in MM-DD format, no year and no other text.
""".strip()


class OpenAIPlantingDateRecommender(PlantingDateRecommender):
    """Planting date recommendations from a chat completion model."""

    def __init__(
        self,
        client: APIClient,
        model: str = "gpt-4",
        timeout: Optional[int] = None,
    ):
        self.client = client
        self.model = model
        self.timeout = timeout

    def build_prompt(self, request: RecommendationRequest) -> str:
        location = ", ".join(part for part in (request.city, request.country) if part) or "an unspecified location"
        return USER_PROMPT.format(
            location=location,
            plant_name=request.plant_name,
            sun_preference=request.sun_preference,
            watering_preference=request.watering_preference,
        )

    async def recommend(self, request: RecommendationRequest) -> str:
        answer = await complete_chat(
            self.client,
            self.model,
            [message("system", SYSTEM_PROMPT), message("user", self.build_prompt(request))],
            temperature=0.7,
            max_tokens=20,
            timeout=self.timeout,
        )
        logger.debug("Received planting date recommendation", plant_name=request.plant_name, answer=answer)
        return answer
