# 📄 File: garden_calendar/modules/planting_calendar/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the planting calendar's web endpoints.
# 🧪 Purpose (Technical Summary):
# Router exports.

from .calendar import calendar_router
from .plants import plants_router

__all__ = ["calendar_router", "plants_router"]
