# 📄 File: garden_calendar/modules/planting_calendar/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of data going in and out of the planting calendar's web endpoints.
# 🧪 Purpose (Technical Summary):
# API schema exports.

from .calendar_schemas import (
    AddPlantToCalendarRequest,
    AgendaResponse,
    CalendarEntryResponse,
    DayMarkerResponse,
    LocationInput,
    MonthViewResponse,
    PlantProfileInput,
    PlantProfileResponse,
)
from .plant_schemas import CatalogPlantResponse, GeneratePlantProfileRequest, PlantSearchResponse

__all__ = [
    "AddPlantToCalendarRequest",
    "AgendaResponse",
    "CalendarEntryResponse",
    "DayMarkerResponse",
    "LocationInput",
    "MonthViewResponse",
    "PlantProfileInput",
    "PlantProfileResponse",
    "CatalogPlantResponse",
    "GeneratePlantProfileRequest",
    "PlantSearchResponse",
]
