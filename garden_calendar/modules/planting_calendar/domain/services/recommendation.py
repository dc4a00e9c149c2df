# 📄 File: garden_calendar/modules/planting_calendar/domain/services/recommendation.py
# 🧭 Purpose (Layman Explanation):
# Describes the question we ask an outside expert ("when should I plant this, here?")
# without caring who the expert is.
# 🧪 Purpose (Technical Summary):
# Port for the external planting-date recommendation function: request value object and
# the abstract recommender returning a raw "MM-DD" string.
# 🔗 Dependencies:
# pydantic, abc, domain models
# 🔄 Connected Modules / Calls From:
# PlantingDateResolver (consumer), OpenAIPlantingDateRecommender (implementation)

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict

from ..models.plant import LocationData, PlantProfile


class RecommendationRequest(BaseModel):
    """Input to the recommendation function."""

    model_config = ConfigDict(frozen=True)

    plant_name: str
    sun_preference: str
    watering_preference: str
    city: str = ""
    country: str = ""

    @classmethod
    def from_profile(cls, profile: PlantProfile, location: LocationData) -> "RecommendationRequest":
        return cls(
            plant_name=profile.display_name,
            sun_preference=profile.sun_preference,
            watering_preference=profile.watering_preference,
            city=location.city,
            country=location.country,
        )


class PlantingDateRecommender(ABC):
    """
    Abstract source of month/day planting recommendations.

    Implementations make exactly one attempt and raise an ExternalAPIError
    subclass when the service cannot answer.
    """

    @abstractmethod
    async def recommend(self, request: RecommendationRequest) -> str:
        """
        Ask for the best planting month/day.

        Returns:
            str: the raw answer, expected to be "MM-DD"; not validated here
        """
        pass
