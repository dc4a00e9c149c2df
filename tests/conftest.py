"""Shared fixtures for the Garden Calendar tests."""
import os
from datetime import datetime
from typing import Dict, List, Optional, Tuple

import pytest

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")

from garden_calendar.modules.planting_calendar.domain.models import (  # noqa: E402
    CalendarEntry,
    CatalogPlant,
    LocationData,
    PlantProfile,
    SunPreference,
    WateringPreference,
)
from garden_calendar.modules.planting_calendar.domain.repositories import (  # noqa: E402
    CalendarEntryRepository,
    PlantRepository,
)
from garden_calendar.modules.planting_calendar.domain.services import (  # noqa: E402
    PlantingDateRecommender,
    PlantProfileGenerator,
)


# --------------------
# In-memory doubles
# --------------------
class InMemoryCalendarEntryRepository(CalendarEntryRepository):
    """Dict-backed repository that keeps insertion order per user."""

    def __init__(self, entries: Optional[List[CalendarEntry]] = None):
        self.entries: Dict[Tuple[str, str], CalendarEntry] = {}
        for entry in entries or []:
            self.entries[(entry.user_id, entry.id)] = entry
        self.committed: Dict[Tuple[str, str], CalendarEntry] = dict(self.entries)

    async def commit(self) -> None:
        self.committed = dict(self.entries)

    async def upsert(self, entry: CalendarEntry) -> CalendarEntry:
        self.entries[(entry.user_id, entry.id)] = entry
        return entry

    async def get_by_id(self, user_id: str, entry_id: str) -> Optional[CalendarEntry]:
        return self.entries.get((user_id, entry_id))

    async def list_for_user(self, user_id: str) -> List[CalendarEntry]:
        return [entry for (owner, _), entry in self.entries.items() if owner == user_id]

    async def delete(self, user_id: str, entry_id: str) -> bool:
        return self.entries.pop((user_id, entry_id), None) is not None


class InMemoryPlantRepository(PlantRepository):
    def __init__(self):
        self.plants: Dict[str, CatalogPlant] = {}

    async def save(self, plant: CatalogPlant) -> CatalogPlant:
        self.plants[plant.id] = plant
        return plant

    async def get_by_id(self, plant_id: str) -> Optional[CatalogPlant]:
        return self.plants.get(plant_id)

    async def get_by_normalized_name(self, normalized_name: str) -> Optional[CatalogPlant]:
        for plant in self.plants.values():
            if plant.normalized_name == normalized_name:
                return plant
        return None

    async def search_by_prefix(self, prefix: str, limit: int = 20) -> List[CatalogPlant]:
        term = prefix.strip().lower()
        matches = sorted(
            (plant for plant in self.plants.values() if plant.normalized_name.startswith(term)),
            key=lambda plant: plant.normalized_name,
        )
        return matches[:limit]


class StubRecommender(PlantingDateRecommender):
    """Answers with a fixed value, or raises a fixed error."""

    def __init__(self, answer: str = "03-15", error: Optional[BaseException] = None):
        self.answer = answer
        self.error = error
        self.requests = []

    async def recommend(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.answer


class StubProfileGenerator(PlantProfileGenerator):
    def __init__(
        self,
        profile: Optional[PlantProfile] = None,
        image_url: str = "https://images.example/plant.png",
        image_error: Optional[BaseException] = None,
    ):
        self.profile = profile
        self.image_url = image_url
        self.image_error = image_error
        self.profile_calls = []

    async def generate_profile(self, plant_name: str) -> Optional[PlantProfile]:
        self.profile_calls.append(plant_name)
        return self.profile

    async def generate_image_url(self, profile: PlantProfile) -> str:
        if self.image_error is not None:
            raise self.image_error
        return self.image_url


# --------------------
# Builders
# --------------------
def make_plant(name: str = "Tomato", **overrides) -> PlantProfile:
    values = {
        "sun_preference": SunPreference.FULL_SUN,
        "watering_preference": WateringPreference.KEEP_SOIL_MOIST,
        "general_information": f"{name} likes warm soil.",
    }
    values.update(overrides)
    return PlantProfile.from_name(name, **values)


def make_entry(
    name: str,
    date: str,
    user_id: str = "user-1",
    entry_id: Optional[str] = None,
) -> CalendarEntry:
    plant = make_plant(name)
    return CalendarEntry(
        id=entry_id or plant.id,
        user_id=user_id,
        date=date,
        plant=plant,
        title=f"Plant {name}",
        description=f"Time to plant your {name}!",
    )


# --------------------
# Fixtures
# --------------------
FIXED_NOW = datetime(2024, 6, 1, 9, 30)


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-06-01 09:30."""
    return lambda: FIXED_NOW


@pytest.fixture
def tomato() -> PlantProfile:
    return make_plant("Tomato")


@pytest.fixture
def location() -> LocationData:
    return LocationData(city="Portland", country="USA")


@pytest.fixture
def entry_repository() -> InMemoryCalendarEntryRepository:
    return InMemoryCalendarEntryRepository()


@pytest.fixture
def plant_repository() -> InMemoryPlantRepository:
    return InMemoryPlantRepository()


@pytest.fixture
def recommender() -> StubRecommender:
    return StubRecommender("03-15")
