# 📄 File: garden_calendar/modules/planting_calendar/application/commands/add_plant_to_calendar.py
# 🧭 Purpose (Layman Explanation):
# The "add this plant to my calendar" request: who is asking, which plant, and where they garden.
# 🧪 Purpose (Technical Summary):
# CQRS command for resolving a planting date and upserting the user's calendar entry.
# 🔗 Dependencies:
# pydantic, domain models
# 🔄 Connected Modules / Calls From:
# AddPlantToCalendarCommandHandler, calendar API endpoint

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.plant import LocationData, PlantProfile


class AddPlantToCalendarCommand(BaseModel):
    """Command for adding a plant to a user's planting calendar."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="Owner of the calendar")
    plant: PlantProfile = Field(..., description="Plant snapshot stored with the entry")
    location: LocationData = Field(default_factory=LocationData)
