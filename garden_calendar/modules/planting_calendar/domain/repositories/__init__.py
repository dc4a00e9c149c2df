# 📄 File: garden_calendar/modules/planting_calendar/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The storage contracts for calendar entries and plants.
# 🧪 Purpose (Technical Summary):
# Repository interface exports.

from .calendar_entry_repository import CalendarEntryRepository
from .plant_repository import PlantRepository

__all__ = ["CalendarEntryRepository", "PlantRepository"]
