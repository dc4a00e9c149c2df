# 📄 File: garden_calendar/modules/planting_calendar/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Describes a plant the way the calendar needs it: its name, how much sun and water it likes,
# a few words about it and a picture, plus where the gardener lives.
# 🧪 Purpose (Technical Summary):
# Immutable pydantic domain models for plant care profiles, catalog plants and location
# input, with the closed sun/watering vocabularies and plant id derivation.
# 🔗 Dependencies:
# pydantic, enum, re, datetime
# 🔄 Connected Modules / Calls From:
# PlantingDateResolver, CalendarEntry snapshots, plant repositories, profile generator,
# API schemas

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_NON_ID_CHARACTERS = re.compile(r"[^a-z0-9]")


class SunPreference(str, Enum):
    """How much direct sun a plant wants."""
    FULL_SUN = "Full Sun"
    PARTIAL_SUN = "Partial Sun"
    PARTIAL_SHADE = "Partial Shade"
    FULL_SHADE = "Full Shade"
    DAPPLED_SUNLIGHT = "Dappled Sunlight"


class WateringPreference(str, Enum):
    """How a plant likes to be watered."""
    KEEP_SOIL_MOIST = "Keep Soil Moist"
    DROUGHT_TOLERANT = "Drought-Tolerant"
    HIGH_WATER_NEEDS = "High Water Needs"
    WATER_WHEN_DRY = "Water When Dry"
    WATER_SPARINGLY = "Water Sparingly"


def plant_id_for(name: str) -> str:
    """
    Derive the catalog id for a plant name.

    "Cherry Tomato" -> "cherry-tomato"
    """
    return _NON_ID_CHARACTERS.sub("-", name.strip().lower())


def normalize_plant_name(name: str) -> str:
    """Lowercased display name used for catalog lookups and prefix search."""
    return name.strip().lower()


class PlantProfile(BaseModel):
    """
    Immutable description of a plant's care needs.

    The only change ever made after creation is attaching an image URL, which
    produces a new instance (see with_image_url).
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: str = Field(..., min_length=1, description="Plant id; calendar entries are keyed by it")
    display_name: str = Field(..., min_length=1, max_length=200)
    sun_preference: SunPreference
    watering_preference: WateringPreference
    general_information: str = ""
    image_url: str = ""

    @classmethod
    def from_name(
        cls,
        display_name: str,
        sun_preference: SunPreference,
        watering_preference: WateringPreference,
        general_information: str = "",
        image_url: str = "",
    ) -> "PlantProfile":
        """Build a profile whose id is derived from its display name."""
        return cls(
            id=plant_id_for(display_name),
            display_name=display_name.strip(),
            sun_preference=sun_preference,
            watering_preference=watering_preference,
            general_information=general_information,
            image_url=image_url,
        )

    def with_image_url(self, image_url: str) -> "PlantProfile":
        """Return a copy of this profile carrying the given image URL."""
        return self.model_copy(update={"image_url": image_url})


class CatalogPlant(PlantProfile):
    """A plant profile as stored in the shared plant catalog."""

    normalized_name: str
    user_query: Optional[str] = None  # what the user typed when it was generated
    created_by: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_profile(
        cls,
        profile: PlantProfile,
        user_query: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> "CatalogPlant":
        return cls(
            **profile.model_dump(),
            normalized_name=normalize_plant_name(profile.display_name),
            user_query=user_query,
            created_by=created_by,
        )


class LocationData(BaseModel):
    """Where the gardener is. Opaque input to planting-date resolution."""

    model_config = ConfigDict(frozen=True)

    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    city: str = ""
    country: str = ""
