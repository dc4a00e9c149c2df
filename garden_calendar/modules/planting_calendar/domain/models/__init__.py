# 📄 File: garden_calendar/modules/planting_calendar/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the planting calendar's core data shapes in one place.
# 🧪 Purpose (Technical Summary):
# Domain model exports.

from .calendar_entry import AgendaSections, CalendarEntry, DayMarker, MonthView
from .plant import (
    CatalogPlant,
    LocationData,
    PlantProfile,
    SunPreference,
    WateringPreference,
    normalize_plant_name,
    plant_id_for,
)

__all__ = [
    "AgendaSections",
    "CalendarEntry",
    "DayMarker",
    "MonthView",
    "CatalogPlant",
    "LocationData",
    "PlantProfile",
    "SunPreference",
    "WateringPreference",
    "normalize_plant_name",
    "plant_id_for",
]
