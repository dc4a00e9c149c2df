# 📄 File: garden_calendar/modules/planting_calendar/presentation/api/schemas/calendar_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes exactly what the app sends to, and receives from, the calendar web endpoints.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for calendar entries, month views, day markers and
# the agenda, with conversion from domain models.
# 🔗 Dependencies:
# pydantic, planting calendar domain models
# 🔄 Connected Modules / Calls From:
# Calendar API router

"""
Calendar API Schemas

Request Schemas:
- PlantProfileInput: plant snapshot supplied when adding a plant
- LocationInput: where the gardener is
- AddPlantToCalendarRequest: body of POST /calendar/entries

Response Schemas:
- PlantProfileResponse, CalendarEntryResponse
- DayMarkerResponse (with overflow_count), MonthViewResponse
- AgendaResponse
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....domain.models.calendar_entry import AgendaSections, CalendarEntry, DayMarker, MonthView
from ....domain.models.plant import (
    LocationData,
    PlantProfile,
    SunPreference,
    WateringPreference,
    plant_id_for,
)


class PlantProfileInput(BaseModel):
    """Plant snapshot. The id defaults to one derived from the display name."""

    id: Optional[str] = Field(None, max_length=200)
    display_name: str = Field(..., min_length=1, max_length=200)
    sun_preference: SunPreference
    watering_preference: WateringPreference
    general_information: str = ""
    image_url: str = ""

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "display_name": "Tomato",
            "sun_preference": "Full Sun",
            "watering_preference": "Keep Soil Moist",
            "general_information": "Tomatoes need plenty of sunlight.",
            "image_url": "",
        }
    })

    @field_validator("display_name")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Plant name cannot be blank")
        return v.strip()

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    def to_domain(self) -> PlantProfile:
        return PlantProfile(
            id=self.id or plant_id_for(self.display_name),
            display_name=self.display_name,
            sun_preference=self.sun_preference,
            watering_preference=self.watering_preference,
            general_information=self.general_information,
            image_url=self.image_url,
        )


class LocationInput(BaseModel):
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    city: str = Field("", max_length=200)
    country: str = Field("", max_length=200)

    def to_domain(self) -> LocationData:
        return LocationData(**self.model_dump())


class AddPlantToCalendarRequest(BaseModel):
    plant: PlantProfileInput
    location: LocationInput = Field(default_factory=LocationInput)


class PlantProfileResponse(BaseModel):
    id: str
    display_name: str
    sun_preference: str
    watering_preference: str
    general_information: str
    image_url: str

    @classmethod
    def from_domain(cls, plant: PlantProfile) -> "PlantProfileResponse":
        return cls(**plant.model_dump(include=set(cls.model_fields)))


class CalendarEntryResponse(BaseModel):
    id: str
    user_id: str
    date: str = Field(..., description="Planting date, YYYY-MM-DD")
    plant: PlantProfileResponse
    title: str
    description: str
    created_at: datetime

    @classmethod
    def from_domain(cls, entry: CalendarEntry) -> "CalendarEntryResponse":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            date=entry.date,
            plant=PlantProfileResponse.from_domain(entry.plant),
            title=entry.title,
            description=entry.description,
            created_at=entry.created_at,
        )


class DayMarkerResponse(BaseModel):
    plants: List[PlantProfileResponse]
    is_selected: bool
    is_today: bool
    overflow_count: int = Field(..., description="Plants beyond the first one shown")

    @classmethod
    def from_domain(cls, marker: DayMarker) -> "DayMarkerResponse":
        return cls(
            plants=[PlantProfileResponse.from_domain(plant) for plant in marker.plants],
            is_selected=marker.is_selected,
            is_today=marker.is_today,
            overflow_count=marker.overflow_count,
        )


class MonthViewResponse(BaseModel):
    year: int
    month: int
    selected_date: str
    today: str
    events: List[CalendarEntryResponse]
    day_markers: Dict[str, DayMarkerResponse]

    @classmethod
    def from_domain(cls, view: MonthView) -> "MonthViewResponse":
        return cls(
            year=view.year,
            month=view.month,
            selected_date=view.selected_date,
            today=view.today,
            events=[CalendarEntryResponse.from_domain(entry) for entry in view.events],
            day_markers={
                day: DayMarkerResponse.from_domain(marker)
                for day, marker in view.day_markers.items()
            },
        )


class AgendaResponse(BaseModel):
    today: str
    upcoming: List[CalendarEntryResponse]
    archived: List[CalendarEntryResponse]

    @classmethod
    def from_domain(cls, agenda: AgendaSections) -> "AgendaResponse":
        return cls(
            today=agenda.today,
            upcoming=[CalendarEntryResponse.from_domain(entry) for entry in agenda.upcoming],
            archived=[CalendarEntryResponse.from_domain(entry) for entry in agenda.archived],
        )
