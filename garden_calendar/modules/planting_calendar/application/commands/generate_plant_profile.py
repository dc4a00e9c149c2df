# 📄 File: garden_calendar/modules/planting_calendar/application/commands/generate_plant_profile.py
# 🧭 Purpose (Layman Explanation):
# The "I can't find my plant, please describe it for me" request.
# 🧪 Purpose (Technical Summary):
# CQRS command for generating (or reusing) a catalog plant profile from a free-text name.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# GeneratePlantProfileCommandHandler, plants API endpoint

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GeneratePlantProfileCommand(BaseModel):
    """Command for generating a plant profile with the language model."""

    model_config = ConfigDict(frozen=True)

    plant_name: str = Field(..., min_length=1, max_length=100, description="Name as typed by the user")
    user_id: Optional[str] = Field(None, description="User requesting the profile")

    @field_validator("plant_name")
    @classmethod
    def strip_plant_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Plant name cannot be blank")
        return v
