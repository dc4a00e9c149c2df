"""HTTP tests for the calendar and plant endpoints."""
import pytest
from fastapi.testclient import TestClient

from garden_calendar.main import create_app
from garden_calendar.modules.planting_calendar.domain.models import CatalogPlant
from garden_calendar.modules.planting_calendar.presentation.dependencies import (
    get_calendar_entry_repository,
    get_clock,
    get_plant_profile_generator,
    get_plant_repository,
    get_planting_date_recommender,
)
from garden_calendar.shared.core.exceptions import ExternalAPIError

from conftest import (
    FIXED_NOW,
    InMemoryCalendarEntryRepository,
    InMemoryPlantRepository,
    StubProfileGenerator,
    StubRecommender,
    make_entry,
    make_plant,
)

CALENDAR = "/api/v1/users/user-1/calendar"

TOMATO_REQUEST = {
    "plant": {
        "display_name": "Tomato",
        "sun_preference": "Full Sun",
        "watering_preference": "Keep Soil Moist",
        "general_information": "Tomatoes need plenty of sunlight.",
    },
    "location": {"city": "Portland", "country": "USA"},
}


# --------------------
# Fixtures
# --------------------
class ApiHarness:
    def __init__(self):
        self.entries = InMemoryCalendarEntryRepository()
        self.plants = InMemoryPlantRepository()
        self.recommender = StubRecommender("03-15")
        self.generator = StubProfileGenerator(profile=make_plant("Basil"))

        self.app = create_app(use_lifespan=False)
        self.app.dependency_overrides[get_calendar_entry_repository] = lambda: self.entries
        self.app.dependency_overrides[get_plant_repository] = lambda: self.plants
        self.app.dependency_overrides[get_planting_date_recommender] = lambda: self.recommender
        self.app.dependency_overrides[get_plant_profile_generator] = lambda: self.generator
        self.app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
        self.client = TestClient(self.app)


@pytest.fixture
def api():
    return ApiHarness()


def _assert_error_shape(response, status_code: int, code: str):
    assert response.status_code == status_code
    error = response.json()["error"]
    assert error["code"] == code
    assert error["status_code"] == status_code
    assert "message" in error and "details" in error


# --------------------
# Health
# --------------------
def test_health_check(api):
    response = api.client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "X-Request-ID" in response.headers


# --------------------
# Calendar entries
# --------------------
def test_add_plant_creates_entry_with_resolved_date(api):
    response = api.client.post(f"{CALENDAR}/entries", json=TOMATO_REQUEST)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == "tomato"
    assert body["date"] == "2025-03-15"
    assert body["title"] == "Plant Tomato"
    assert body["plant"]["sun_preference"] == "Full Sun"
    assert api.recommender.requests[0].city == "Portland"


def test_add_plant_invalid_recommendation_returns_422_and_saves_nothing(api):
    api.recommender.answer = "02-30"

    response = api.client.post(f"{CALENDAR}/entries", json=TOMATO_REQUEST)

    _assert_error_shape(response, 422, "INVALID_RECOMMENDATION")
    assert response.json()["error"]["details"]["raw_recommendation"] == "02-30"
    assert api.entries.entries == {}


def test_add_plant_recommendation_failure_returns_503(api):
    api.recommender.error = ExternalAPIError("down", api_name="openai", api_status_code=500)

    response = api.client.post(f"{CALENDAR}/entries", json=TOMATO_REQUEST)

    _assert_error_shape(response, 503, "RECOMMENDATION_UNAVAILABLE")
    assert api.entries.entries == {}


def test_add_plant_rejects_unknown_sun_preference(api):
    bad_request = {"plant": dict(TOMATO_REQUEST["plant"], sun_preference="Moonlight")}

    response = api.client.post(f"{CALENDAR}/entries", json=bad_request)

    _assert_error_shape(response, 422, "VALIDATION_ERROR")


@pytest.mark.parametrize("plant_fields", [
    {"display_name": "   "},
    {"display_name": "", "id": "tomato"},
])
def test_add_plant_rejects_blank_plant_name(api, plant_fields):
    bad_request = {"plant": dict(TOMATO_REQUEST["plant"], **plant_fields)}

    response = api.client.post(f"{CALENDAR}/entries", json=bad_request)

    _assert_error_shape(response, 422, "VALIDATION_ERROR")
    assert api.entries.entries == {}
    assert api.recommender.requests == []


def test_add_plant_blank_id_falls_back_to_name(api):
    request = {"plant": dict(TOMATO_REQUEST["plant"], id="  ", display_name=" Cherry Tomato ")}

    response = api.client.post(f"{CALENDAR}/entries", json=request)

    assert response.status_code == 201
    assert response.json()["id"] == "cherry-tomato"
    assert response.json()["plant"]["display_name"] == "Cherry Tomato"


def test_get_and_delete_entry(api):
    api.entries.entries[("user-1", "tomato")] = make_entry("Tomato", "2025-03-15")

    assert api.client.get(f"{CALENDAR}/entries/tomato").json()["date"] == "2025-03-15"
    assert api.client.delete(f"{CALENDAR}/entries/tomato").status_code == 204

    _assert_error_shape(api.client.get(f"{CALENDAR}/entries/tomato"), 404, "NOT_FOUND")
    _assert_error_shape(api.client.delete(f"{CALENDAR}/entries/tomato"), 404, "NOT_FOUND")


# --------------------
# Month view and agenda
# --------------------
def test_month_view_returns_events_and_markers(api):
    for entry in (
        make_entry("Tomato", "2024-06-10"),
        make_entry("Basil", "2024-06-10"),
        make_entry("Kale", "2024-07-02"),
        make_entry("Leek", "2024-13-40"),
    ):
        api.entries.entries[(entry.user_id, entry.id)] = entry

    response = api.client.get(f"{CALENDAR}/months/2024/6")

    assert response.status_code == 200
    body = response.json()
    assert body["today"] == "2024-06-01"
    assert body["selected_date"] == "2024-06-01"
    assert [event["id"] for event in body["events"]] == ["tomato", "basil"]
    marker = body["day_markers"]["2024-06-10"]
    assert [plant["id"] for plant in marker["plants"]] == ["tomato", "basil"]
    assert marker["overflow_count"] == 1
    assert body["day_markers"]["2024-06-01"] == {
        "plants": [],
        "is_selected": True,
        "is_today": True,
        "overflow_count": 0,
    }


def test_month_view_selected_date_query(api):
    response = api.client.get(f"{CALENDAR}/months/2024/6", params={"selected_date": "2024-06-20"})

    markers = response.json()["day_markers"]
    assert markers["2024-06-20"]["is_selected"] is True
    assert markers["2024-06-01"]["is_today"] is True


@pytest.mark.parametrize("path", ["/months/2024/13", "/months/2024/0"])
def test_month_view_rejects_month_out_of_range(api, path):
    _assert_error_shape(api.client.get(f"{CALENDAR}{path}"), 422, "VALIDATION_ERROR")


def test_month_view_rejects_malformed_today(api):
    response = api.client.get(f"{CALENDAR}/months/2024/6", params={"today": "2024-02-30"})

    _assert_error_shape(response, 422, "VALIDATION_ERROR")
    assert response.json()["error"]["details"]["field"] == "today"


def test_agenda_splits_upcoming_and_archived(api):
    for entry in (make_entry("Tomato", "2024-06-01"), make_entry("Kale", "2024-05-01")):
        api.entries.entries[(entry.user_id, entry.id)] = entry

    body = api.client.get(f"{CALENDAR}/agenda").json()

    assert [e["id"] for e in body["upcoming"]] == ["tomato"]
    assert [e["id"] for e in body["archived"]] == ["kale"]


# --------------------
# Plants
# --------------------
def test_generate_plant_profile(api):
    response = api.client.post("/api/v1/plants/generate", json={"plant_name": "Basil", "user_id": "user-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "basil"
    assert body["image_url"] == "https://images.example/plant.png"
    assert "basil" in api.plants.plants


def test_generate_plant_profile_not_a_plant(api):
    api.generator.profile = None

    _assert_error_shape(api.client.post("/api/v1/plants/generate", json={"plant_name": "Toaster"}), 404, "NOT_FOUND")


def test_generate_plant_profile_rejects_blank_name(api):
    _assert_error_shape(api.client.post("/api/v1/plants/generate", json={"plant_name": "   "}), 422, "VALIDATION_ERROR")


def test_search_plants(api):
    for name in ("Tomato", "Tomatillo", "Basil"):
        plant = CatalogPlant.from_profile(make_plant(name))
        api.plants.plants[plant.id] = plant

    body = api.client.get("/api/v1/plants/search", params={"q": "tom"}).json()

    assert body["query"] == "tom"
    assert body["count"] == 2
    assert [plant["display_name"] for plant in body["results"]] == ["Tomatillo", "Tomato"]
