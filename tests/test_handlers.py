"""Tests for the planting calendar command and query handlers."""
from unittest.mock import AsyncMock

import pytest

from garden_calendar.modules.planting_calendar.application.commands import (
    AddPlantToCalendarCommand,
    GeneratePlantProfileCommand,
    RemoveCalendarEntryCommand,
)
from garden_calendar.modules.planting_calendar.application.handlers import (
    AddPlantToCalendarCommandHandler,
    GeneratePlantProfileCommandHandler,
    GetAgendaQueryHandler,
    GetCalendarEntryQueryHandler,
    GetMonthEventsQueryHandler,
    RemoveCalendarEntryCommandHandler,
    SearchPlantsQueryHandler,
)
from garden_calendar.modules.planting_calendar.application.queries import (
    GetAgendaQuery,
    GetCalendarEntryQuery,
    GetMonthEventsQuery,
    SearchPlantsQuery,
)
from garden_calendar.modules.planting_calendar.domain.events import (
    CalendarChangeNotifier,
    CalendarEntryRemoved,
    PlantAddedToCalendar,
)
from garden_calendar.modules.planting_calendar.domain.models import CatalogPlant
from garden_calendar.modules.planting_calendar.domain.services import PlantingDateResolver
from garden_calendar.shared.core.exceptions import (
    CalendarEntryNotFoundError,
    ExternalAPIError,
    InvalidRecommendationError,
    PlantNotFoundError,
    RecommendationUnavailableError,
)

from conftest import (
    InMemoryCalendarEntryRepository,
    StubProfileGenerator,
    StubRecommender,
    make_entry,
    make_plant,
)


# --------------------
# AddPlantToCalendarCommandHandler
# --------------------
@pytest.mark.asyncio
async def test_add_plant_resolves_date_saves_entry_and_notifies(
    tomato, location, entry_repository, recommender, fixed_clock
):
    notifier = CalendarChangeNotifier()
    observer = AsyncMock()
    notifier.subscribe(observer)
    handler = AddPlantToCalendarCommandHandler(
        PlantingDateResolver(recommender), entry_repository, notifier, fixed_clock
    )

    entry = await handler.handle(AddPlantToCalendarCommand(user_id="user-1", plant=tomato, location=location))

    assert entry.id == "tomato"
    assert entry.date == "2025-03-15"
    assert entry.title == "Plant Tomato"
    assert entry.description == "Time to plant your Tomato!"
    assert await entry_repository.get_by_id("user-1", "tomato") == entry

    observer.assert_awaited_once()
    event = observer.await_args.args[0]
    assert isinstance(event, PlantAddedToCalendar)
    assert event.planting_date == "2025-03-15"


@pytest.mark.asyncio
async def test_observers_see_committed_changes(tomato, location, entry_repository, recommender, fixed_clock):
    seen = []

    def observer(event):
        seen.append((type(event).__name__, dict(entry_repository.committed)))

    notifier = CalendarChangeNotifier()
    notifier.subscribe(observer)
    add_handler = AddPlantToCalendarCommandHandler(
        PlantingDateResolver(recommender), entry_repository, notifier, fixed_clock
    )
    remove_handler = RemoveCalendarEntryCommandHandler(entry_repository, notifier)

    entry = await add_handler.handle(AddPlantToCalendarCommand(user_id="user-1", plant=tomato, location=location))
    await remove_handler.handle(RemoveCalendarEntryCommand(user_id="user-1", entry_id="tomato"))

    assert seen == [
        ("PlantAddedToCalendar", {("user-1", "tomato"): entry}),
        ("CalendarEntryRemoved", {}),
    ]


@pytest.mark.asyncio
async def test_add_same_plant_twice_overwrites_entry(tomato, location, entry_repository, fixed_clock):
    first = AddPlantToCalendarCommandHandler(
        PlantingDateResolver(StubRecommender("03-15")), entry_repository, clock=fixed_clock
    )
    second = AddPlantToCalendarCommandHandler(
        PlantingDateResolver(StubRecommender("09-01")), entry_repository, clock=fixed_clock
    )
    command = AddPlantToCalendarCommand(user_id="user-1", plant=tomato, location=location)

    await first.handle(command)
    await second.handle(command)

    entries = await entry_repository.list_for_user("user-1")
    assert [(e.id, e.date) for e in entries] == [("tomato", "2024-09-01")]


@pytest.mark.asyncio
@pytest.mark.parametrize("recommender, error", [
    (StubRecommender("02-30"), InvalidRecommendationError),
    (StubRecommender(error=ExternalAPIError("down", api_name="openai")), RecommendationUnavailableError),
])
async def test_add_plant_failure_writes_nothing(
    tomato, location, entry_repository, fixed_clock, recommender, error
):
    notifier = CalendarChangeNotifier()
    observer = AsyncMock()
    notifier.subscribe(observer)
    handler = AddPlantToCalendarCommandHandler(
        PlantingDateResolver(recommender), entry_repository, notifier, fixed_clock
    )

    with pytest.raises(error):
        await handler.handle(AddPlantToCalendarCommand(user_id="user-1", plant=tomato, location=location))

    assert await entry_repository.list_for_user("user-1") == []
    observer.assert_not_awaited()


# --------------------
# RemoveCalendarEntryCommandHandler
# --------------------
@pytest.mark.asyncio
async def test_remove_entry_deletes_and_notifies():
    repository = InMemoryCalendarEntryRepository([make_entry("Tomato", "2025-03-15")])
    notifier = CalendarChangeNotifier()
    observer = AsyncMock()
    notifier.subscribe(observer)

    await RemoveCalendarEntryCommandHandler(repository, notifier).handle(
        RemoveCalendarEntryCommand(user_id="user-1", entry_id="tomato")
    )

    assert await repository.list_for_user("user-1") == []
    assert isinstance(observer.await_args.args[0], CalendarEntryRemoved)


@pytest.mark.asyncio
async def test_remove_missing_entry_raises_not_found(entry_repository):
    with pytest.raises(CalendarEntryNotFoundError):
        await RemoveCalendarEntryCommandHandler(entry_repository).handle(
            RemoveCalendarEntryCommand(user_id="user-1", entry_id="tomato")
        )


# --------------------
# Query handlers
# --------------------
@pytest.mark.asyncio
async def test_month_events_defaults_today_and_selected_to_clock(fixed_clock):
    repository = InMemoryCalendarEntryRepository([
        make_entry("Tomato", "2024-06-10"),
        make_entry("Basil", "2024-06-10"),
        make_entry("Kale", "2024-07-01"),
        make_entry("Leek", "2024-06-03", user_id="someone-else"),
    ])
    handler = GetMonthEventsQueryHandler(repository, clock=fixed_clock)

    view = await handler.handle(GetMonthEventsQuery(user_id="user-1", year=2024, month=6))

    assert view.today == "2024-06-01"
    assert view.selected_date == "2024-06-01"
    assert [e.id for e in view.events] == ["tomato", "basil"]
    assert view.day_markers["2024-06-01"].is_today
    assert view.day_markers["2024-06-01"].is_selected
    assert view.day_markers["2024-06-10"].overflow_count == 1


@pytest.mark.asyncio
async def test_month_events_uses_explicit_today_and_selected(fixed_clock):
    repository = InMemoryCalendarEntryRepository([make_entry("Tomato", "2024-06-10")])
    handler = GetMonthEventsQueryHandler(repository, clock=fixed_clock)

    view = await handler.handle(GetMonthEventsQuery(
        user_id="user-1", year=2024, month=6, selected_date="2024-06-10", today="2024-06-05"
    ))

    assert view.day_markers["2024-06-10"].is_selected
    assert view.day_markers["2024-06-05"].is_today


@pytest.mark.asyncio
async def test_agenda_splits_relative_to_clock(fixed_clock):
    repository = InMemoryCalendarEntryRepository([
        make_entry("Tomato", "2024-06-10"),
        make_entry("Kale", "2024-05-01"),
    ])

    agenda = await GetAgendaQueryHandler(repository, clock=fixed_clock).handle(GetAgendaQuery(user_id="user-1"))

    assert [e.id for e in agenda.upcoming] == ["tomato"]
    assert [e.id for e in agenda.archived] == ["kale"]


@pytest.mark.asyncio
async def test_get_calendar_entry_missing_raises_not_found(entry_repository):
    with pytest.raises(CalendarEntryNotFoundError):
        await GetCalendarEntryQueryHandler(entry_repository).handle(
            GetCalendarEntryQuery(user_id="user-1", entry_id="nope")
        )


@pytest.mark.asyncio
async def test_search_plants_blank_term_returns_nothing(plant_repository):
    await plant_repository.save(CatalogPlant.from_profile(make_plant("Tomato")))

    assert await SearchPlantsQueryHandler(plant_repository).handle(SearchPlantsQuery(term="   ")) == []


@pytest.mark.asyncio
async def test_search_plants_by_prefix(plant_repository):
    for name in ("Tomato", "Tomatillo", "Basil"):
        await plant_repository.save(CatalogPlant.from_profile(make_plant(name)))

    results = await SearchPlantsQueryHandler(plant_repository).handle(SearchPlantsQuery(term="Tom"))

    assert [plant.display_name for plant in results] == ["Tomatillo", "Tomato"]


# --------------------
# GeneratePlantProfileCommandHandler
# --------------------
@pytest.mark.asyncio
async def test_generate_profile_saves_new_catalog_plant(plant_repository):
    generator = StubProfileGenerator(profile=make_plant("Cherry Tomato"))
    handler = GeneratePlantProfileCommandHandler(generator, plant_repository)

    plant = await handler.handle(GeneratePlantProfileCommand(plant_name="  cherry tomato ", user_id="user-1"))

    assert plant.id == "cherry-tomato"
    assert plant.normalized_name == "cherry tomato"
    assert plant.image_url == "https://images.example/plant.png"
    assert plant.user_query == "cherry tomato"
    assert plant.created_by == "user-1"
    assert await plant_repository.get_by_id("cherry-tomato") == plant


@pytest.mark.asyncio
async def test_generate_profile_returns_existing_catalog_plant(plant_repository):
    existing = await plant_repository.save(CatalogPlant.from_profile(make_plant("Basil")))
    generator = StubProfileGenerator(profile=make_plant("Basil"))

    plant = await GeneratePlantProfileCommandHandler(generator, plant_repository).handle(
        GeneratePlantProfileCommand(plant_name="BASIL")
    )

    assert plant == existing
    assert generator.profile_calls == []


@pytest.mark.asyncio
async def test_generate_profile_not_a_plant_raises(plant_repository):
    handler = GeneratePlantProfileCommandHandler(StubProfileGenerator(profile=None), plant_repository)

    with pytest.raises(PlantNotFoundError):
        await handler.handle(GeneratePlantProfileCommand(plant_name="Toaster"))

    assert plant_repository.plants == {}


@pytest.mark.asyncio
async def test_generate_profile_keeps_profile_when_image_fails(plant_repository):
    generator = StubProfileGenerator(
        profile=make_plant("Basil"),
        image_error=ExternalAPIError("image service down", api_name="openai"),
    )

    plant = await GeneratePlantProfileCommandHandler(generator, plant_repository).handle(
        GeneratePlantProfileCommand(plant_name="Basil")
    )

    assert plant.image_url == ""
    assert "basil" in plant_repository.plants


@pytest.mark.asyncio
async def test_added_entry_appears_in_its_month(tomato, location, entry_repository, fixed_clock):
    add_handler = AddPlantToCalendarCommandHandler(
        PlantingDateResolver(StubRecommender("03-15")), entry_repository, clock=fixed_clock
    )
    entry = await add_handler.handle(AddPlantToCalendarCommand(user_id="user-1", plant=tomato, location=location))

    view = await GetMonthEventsQueryHandler(entry_repository, clock=fixed_clock).handle(
        GetMonthEventsQuery(user_id="user-1", year=2025, month=3)
    )

    assert [e.id for e in view.events] == [entry.id]
    assert view.day_markers["2025-03-15"].plants == (tomato,)
