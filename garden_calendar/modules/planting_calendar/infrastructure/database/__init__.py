# 📄 File: garden_calendar/modules/planting_calendar/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Database storage for plants and calendar entries.
# 🧪 Purpose (Technical Summary):
# ORM models and repository implementation exports.

from .calendar_entry_repository_impl import CalendarEntryRepositoryImpl
from .models import CalendarEntryModel, PlantModel
from .plant_repository_impl import PlantRepositoryImpl

__all__ = [
    "CalendarEntryModel",
    "CalendarEntryRepositoryImpl",
    "PlantModel",
    "PlantRepositoryImpl",
]
