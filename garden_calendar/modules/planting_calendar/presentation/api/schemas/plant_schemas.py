# 📄 File: garden_calendar/modules/planting_calendar/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the plant search and plant generation endpoints accept and return.
# 🧪 Purpose (Technical Summary):
# Pydantic schemas for catalog search results and profile generation.
# 🔗 Dependencies:
# pydantic, domain models
# 🔄 Connected Modules / Calls From:
# Plants API router

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....domain.models.plant import CatalogPlant


class GeneratePlantProfileRequest(BaseModel):
    plant_name: str = Field(..., min_length=1, max_length=100)
    user_id: Optional[str] = None

    @field_validator("plant_name")
    @classmethod
    def validate_plant_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Plant name cannot be blank")
        return v.strip()

    model_config = ConfigDict(json_schema_extra={
        "example": {"plant_name": "Cherry Tomato", "user_id": "user-123"}
    })


class CatalogPlantResponse(BaseModel):
    id: str
    display_name: str
    normalized_name: str
    sun_preference: str
    watering_preference: str
    general_information: str
    image_url: str
    user_query: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, plant: CatalogPlant) -> "CatalogPlantResponse":
        return cls(**plant.model_dump(include=set(cls.model_fields)))


class PlantSearchResponse(BaseModel):
    query: str
    count: int
    results: List[CatalogPlantResponse]
