# 📄 File: garden_calendar/modules/planting_calendar/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Connections to the AI service that suggests planting dates and describes plants.
# 🧪 Purpose (Technical Summary):
# External service adapter exports.

from .openai_chat import create_openai_client
from .openai_profile_generator import OpenAIPlantProfileGenerator
from .openai_recommender import OpenAIPlantingDateRecommender

__all__ = [
    "create_openai_client",
    "OpenAIPlantProfileGenerator",
    "OpenAIPlantingDateRecommender",
]
