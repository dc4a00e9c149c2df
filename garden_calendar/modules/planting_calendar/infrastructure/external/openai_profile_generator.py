# 📄 File: garden_calendar/modules/planting_calendar/infrastructure/external/openai_profile_generator.py
# 🧭 Purpose (Layman Explanation):
# When someone types a plant we don't know, this asks the AI whether it is a real garden
# plant, has it write a short care sheet, and then has it draw a simple picture.
# 🧪 Purpose (Technical Summary):
# PlantProfileGenerator backed by OpenAI-compatible endpoints: JSON profile completion
# validated against the closed sun/watering vocabularies, an image-prompt completion, and
# an image generation call returning a URL.
# 🔗 Dependencies:
# - json, pydantic
# - openai_chat.py (APIClient based chat helper)
# 🔄 Connected Modules / Calls From:
# GeneratePlantProfileCommandHandler (through the port), presentation dependencies

import json
from typing import Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from garden_calendar.shared.core.exceptions import ExternalAPIError
from garden_calendar.shared.infrastructure.external_apis.api_client import APIClient
from garden_calendar.shared.utils.logging import get_logger

from ...domain.models.plant import PlantProfile, SunPreference, WateringPreference
from ...domain.services.plant_profile_generator import PlantProfileGenerator
from .openai_chat import API_NAME, complete_chat, message

logger = get_logger(__name__)

PROFILE_SYSTEM_PROMPT = (
    "You are a professional botanist and gardening expert who provides accurate, "
    "structured plant information."
)

PROFILE_PROMPT = """
Determine if the following input is the name of a real plant that can be grown in a garden. If it is not, respond with:

{{"exists": false}}

If it is a real plant, respond with:

{{
  "exists": true,
  "plantProfile": {{
    "name": "common name of the plant",
    "sunPreference": "choose one from {sun_options}",
    "wateringPreference": "choose one from {water_options}",
    "generalInformation": "3-5 sentences in a brief, conversational tone covering plant spacing, soil preferences, temperature tolerances, lifespan and good companion plants."
  }}
}}

Respond with JSON only.

Input: "{plant_name}"
""".strip()

IMAGE_SYSTEM_PROMPT = "You are an expert at creating clear, detailed image generation prompts."

IMAGE_PROMPT = """
Generate an image generation prompt for a picture of a {plant_name}. The image should follow these criteria:

- Completely blank, white background.
- In the center of the image, place a cartoon-style rendering of a single {plant_name}.
- Describe the plant's key physical features, such as leaf shape, color, texture, and notable characteristics, so the plant is visually recognizable.
- The plant should appear singular and clearly defined, with no other elements in the image.

Respond with only the generated prompt text, no additional formatting or explanation.
""".strip()


class GeneratedPlantProfile(BaseModel):
    """The plantProfile object returned by the model."""

    name: str = Field(..., min_length=1)
    sunPreference: SunPreference
    wateringPreference: WateringPreference
    generalInformation: str = ""


class GeneratedProfileResponse(BaseModel):
    exists: bool
    plantProfile: Optional[GeneratedPlantProfile] = None


def _strip_code_fence(content: str) -> str:
    content = content.strip()
    if content.startswith("```"):
        content = content.strip("`")
        if content.startswith("json"):
            content = content[len("json"):]
    return content.strip()


def parse_profile_response(content: str) -> Optional[PlantProfile]:
    """
    Parse the model's JSON answer.

    Returns None when the model says the input is not a garden plant.

    Raises:
        ExternalAPIError: the answer is not the expected JSON shape
    """
    try:
        parsed = GeneratedProfileResponse(**json.loads(_strip_code_fence(content)))
    except (ValueError, TypeError, PydanticValidationError) as e:
        raise ExternalAPIError(
            "Plant profile response could not be read",
            api_name=API_NAME,
            api_response=content[:500],
        ) from e

    if not parsed.exists:
        return None
    if parsed.plantProfile is None:
        raise ExternalAPIError(
            "Plant profile response is missing plantProfile",
            api_name=API_NAME,
            api_response=content[:500],
        )

    generated = parsed.plantProfile
    return PlantProfile.from_name(
        generated.name,
        sun_preference=generated.sunPreference,
        watering_preference=generated.wateringPreference,
        general_information=generated.generalInformation,
    )


class OpenAIPlantProfileGenerator(PlantProfileGenerator):
    """Plant profiles and images from OpenAI-compatible endpoints."""

    def __init__(
        self,
        client: APIClient,
        profile_model: str = "gpt-3.5-turbo",
        image_model: str = "dall-e-3",
    ):
        self.client = client
        self.profile_model = profile_model
        self.image_model = image_model

    async def generate_profile(self, plant_name: str) -> Optional[PlantProfile]:
        prompt = PROFILE_PROMPT.format(
            plant_name=plant_name,
            sun_options=", ".join(option.value for option in SunPreference),
            water_options=", ".join(option.value for option in WateringPreference),
        )
        content = await complete_chat(
            self.client,
            self.profile_model,
            [message("system", PROFILE_SYSTEM_PROMPT), message("user", prompt)],
            temperature=0.7,
            max_tokens=1000,
        )
        profile = parse_profile_response(content)
        if profile is None:
            logger.info(f"'{plant_name}' is not a garden plant")
        return profile

    async def generate_image_url(self, profile: PlantProfile) -> str:
        image_prompt = await complete_chat(
            self.client,
            self.profile_model,
            [
                message("system", IMAGE_SYSTEM_PROMPT),
                message("user", IMAGE_PROMPT.format(plant_name=profile.display_name)),
            ],
            temperature=0.7,
            max_tokens=500,
        )
        if not image_prompt.strip():
            logger.warning(f"Empty image prompt for {profile.display_name}")
            return ""

        response = await self.client.post(
            "images/generations",
            data={
                "model": self.image_model,
                "prompt": image_prompt.strip(),
                "n": 1,
                "size": "1024x1024",
                "quality": "standard",
                "style": "natural",
            },
        )
        try:
            return response["data"][0]["url"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise ExternalAPIError(
                "Image generation response has no URL",
                api_name=API_NAME,
                api_response=str(response)[:500],
            ) from e
