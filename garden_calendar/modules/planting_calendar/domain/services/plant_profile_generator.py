# 📄 File: garden_calendar/modules/planting_calendar/domain/services/plant_profile_generator.py
# 🧭 Purpose (Layman Explanation):
# Describes the helper that can write a care profile and draw a picture for a plant the
# catalog does not know yet.
# 🧪 Purpose (Technical Summary):
# Port for language-model backed plant profile and image generation.
# 🔗 Dependencies:
# abc, domain models
# 🔄 Connected Modules / Calls From:
# GeneratePlantProfileCommandHandler, OpenAIPlantProfileGenerator

from abc import ABC, abstractmethod
from typing import Optional

from ..models.plant import PlantProfile


class PlantProfileGenerator(ABC):
    """Abstract generator of plant care profiles and plant images."""

    @abstractmethod
    async def generate_profile(self, plant_name: str) -> Optional[PlantProfile]:
        """
        Build a care profile for a plant name.

        Returns:
            Optional[PlantProfile]: None when the name is not a garden plant
        """
        pass

    @abstractmethod
    async def generate_image_url(self, profile: PlantProfile) -> str:
        """Produce an image URL for the plant."""
        pass
