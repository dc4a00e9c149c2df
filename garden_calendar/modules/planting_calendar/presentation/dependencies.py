# 📄 File: garden_calendar/modules/planting_calendar/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each web request the helpers it needs (storage, the AI expert, the clock) already
# connected together.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers wiring repositories, external adapters, domain services and
# CQRS handlers. Owns the process-wide CalendarChangeNotifier and the long-lived API
# clients (single-attempt for recommendations, retrying for profile generation).
# 🔗 Dependencies:
# FastAPI Depends, SQLAlchemy AsyncSession, module layers, shared settings
# 🔄 Connected Modules / Calls From:
# Calendar and plants routers, garden_calendar.main (client shutdown), tests (overrides)

from typing import Dict

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from garden_calendar.shared.config.settings import get_settings
from garden_calendar.shared.infrastructure.database.session import get_db_session
from garden_calendar.shared.infrastructure.external_apis.api_client import APIClient
from garden_calendar.shared.utils.dates import Clock, system_clock

from ..application.handlers.command_handlers import (
    AddPlantToCalendarCommandHandler,
    GeneratePlantProfileCommandHandler,
    RemoveCalendarEntryCommandHandler,
)
from ..application.handlers.query_handlers import (
    GetAgendaQueryHandler,
    GetCalendarEntryQueryHandler,
    GetMonthEventsQueryHandler,
    SearchPlantsQueryHandler,
)
from ..domain.events.calendar_events import CalendarChangeNotifier
from ..domain.repositories.calendar_entry_repository import CalendarEntryRepository
from ..domain.repositories.plant_repository import PlantRepository
from ..domain.services.month_event_aggregator import MonthEventAggregator
from ..domain.services.plant_profile_generator import PlantProfileGenerator
from ..domain.services.planting_date_resolver import PlantingDateResolver
from ..domain.services.recommendation import PlantingDateRecommender
from ..infrastructure.database.calendar_entry_repository_impl import CalendarEntryRepositoryImpl
from ..infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from ..infrastructure.external.openai_chat import create_openai_client
from ..infrastructure.external.openai_profile_generator import OpenAIPlantProfileGenerator
from ..infrastructure.external.openai_recommender import OpenAIPlantingDateRecommender

_calendar_notifier = CalendarChangeNotifier()
_aggregator = MonthEventAggregator()
_api_clients: Dict[str, APIClient] = {}


# =========================================================================
# SHARED RESOURCES
# =========================================================================

def get_calendar_notifier() -> CalendarChangeNotifier:
    """The calendar's observer registry; presentation code subscribes here."""
    return _calendar_notifier


def get_clock() -> Clock:
    return system_clock


def get_month_event_aggregator() -> MonthEventAggregator:
    return _aggregator


def _recommendation_client() -> APIClient:
    if "recommendation" not in _api_clients:
        settings = get_settings()
        _api_clients["recommendation"] = create_openai_client(
            max_retries=1,
            timeout=settings.RECOMMENDATION_TIMEOUT,
            settings=settings,
        )
    return _api_clients["recommendation"]


def _profile_client() -> APIClient:
    if "profile" not in _api_clients:
        settings = get_settings()
        _api_clients["profile"] = create_openai_client(
            max_retries=settings.EXTERNAL_API_MAX_RETRIES,
            timeout=settings.EXTERNAL_API_TIMEOUT,
            settings=settings,
        )
    return _api_clients["profile"]


async def close_api_clients() -> None:
    """Close the long-lived API clients (application shutdown)."""
    for client in _api_clients.values():
        await client.close()
    _api_clients.clear()


# =========================================================================
# REPOSITORIES AND ADAPTERS
# =========================================================================

def get_calendar_entry_repository(
    session: AsyncSession = Depends(get_db_session),
) -> CalendarEntryRepository:
    return CalendarEntryRepositoryImpl(session)


def get_plant_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PlantRepository:
    return PlantRepositoryImpl(session)


def get_planting_date_recommender() -> PlantingDateRecommender:
    settings = get_settings()
    return OpenAIPlantingDateRecommender(
        _recommendation_client(),
        model=settings.OPENAI_MODEL,
        timeout=settings.RECOMMENDATION_TIMEOUT,
    )


def get_plant_profile_generator() -> PlantProfileGenerator:
    settings = get_settings()
    return OpenAIPlantProfileGenerator(
        _profile_client(),
        profile_model=settings.OPENAI_PROFILE_MODEL,
        image_model=settings.OPENAI_IMAGE_MODEL,
    )


def get_planting_date_resolver(
    recommender: PlantingDateRecommender = Depends(get_planting_date_recommender),
) -> PlantingDateResolver:
    return PlantingDateResolver(recommender)


# =========================================================================
# HANDLERS
# =========================================================================

def get_add_plant_handler(
    resolver: PlantingDateResolver = Depends(get_planting_date_resolver),
    entry_repository: CalendarEntryRepository = Depends(get_calendar_entry_repository),
    notifier: CalendarChangeNotifier = Depends(get_calendar_notifier),
    clock: Clock = Depends(get_clock),
) -> AddPlantToCalendarCommandHandler:
    return AddPlantToCalendarCommandHandler(resolver, entry_repository, notifier, clock)


def get_remove_entry_handler(
    entry_repository: CalendarEntryRepository = Depends(get_calendar_entry_repository),
    notifier: CalendarChangeNotifier = Depends(get_calendar_notifier),
) -> RemoveCalendarEntryCommandHandler:
    return RemoveCalendarEntryCommandHandler(entry_repository, notifier)


def get_generate_profile_handler(
    generator: PlantProfileGenerator = Depends(get_plant_profile_generator),
    plant_repository: PlantRepository = Depends(get_plant_repository),
) -> GeneratePlantProfileCommandHandler:
    return GeneratePlantProfileCommandHandler(generator, plant_repository)


def get_month_events_handler(
    entry_repository: CalendarEntryRepository = Depends(get_calendar_entry_repository),
    aggregator: MonthEventAggregator = Depends(get_month_event_aggregator),
    clock: Clock = Depends(get_clock),
) -> GetMonthEventsQueryHandler:
    return GetMonthEventsQueryHandler(entry_repository, aggregator, clock)


def get_agenda_handler(
    entry_repository: CalendarEntryRepository = Depends(get_calendar_entry_repository),
    aggregator: MonthEventAggregator = Depends(get_month_event_aggregator),
    clock: Clock = Depends(get_clock),
) -> GetAgendaQueryHandler:
    return GetAgendaQueryHandler(entry_repository, aggregator, clock)


def get_calendar_entry_handler(
    entry_repository: CalendarEntryRepository = Depends(get_calendar_entry_repository),
) -> GetCalendarEntryQueryHandler:
    return GetCalendarEntryQueryHandler(entry_repository)


def get_search_plants_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
) -> SearchPlantsQueryHandler:
    return SearchPlantsQueryHandler(plant_repository)
