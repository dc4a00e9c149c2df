# 📄 File: garden_calendar/modules/planting_calendar/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# The workers that answer questions about the calendar: what is planted this month,
# what is coming up, what is in one entry, and which plants match a search.
# 🧪 Purpose (Technical Summary):
# CQRS query handlers. Month and agenda handlers load the user's whole collection and
# recompute through MonthEventAggregator on every call; missing dates default to the clock.
# 🔗 Dependencies:
# - Application queries, domain services/repositories
# - garden_calendar.shared (exceptions, clock)
# 🔄 Connected Modules / Calls From:
# - Planting calendar API endpoints
# - Presentation dependencies (handler construction)

from typing import List, Optional

from garden_calendar.shared.core.exceptions import CalendarEntryNotFoundError
from garden_calendar.shared.utils.dates import Clock, format_iso_date, system_clock

from ..queries.calendar_queries import GetAgendaQuery, GetCalendarEntryQuery, GetMonthEventsQuery
from ..queries.search_plants import SearchPlantsQuery
from ...domain.models.calendar_entry import AgendaSections, CalendarEntry, MonthView
from ...domain.models.plant import CatalogPlant
from ...domain.repositories.calendar_entry_repository import CalendarEntryRepository
from ...domain.repositories.plant_repository import PlantRepository
from ...domain.services.month_event_aggregator import MonthEventAggregator


class GetMonthEventsQueryHandler:
    """Builds the month view (events and day markers) for a user."""

    def __init__(
        self,
        entry_repository: CalendarEntryRepository,
        aggregator: Optional[MonthEventAggregator] = None,
        clock: Clock = system_clock,
    ):
        self._entry_repository = entry_repository
        self._aggregator = aggregator or MonthEventAggregator()
        self._clock = clock

    async def handle(self, query: GetMonthEventsQuery) -> MonthView:
        today = query.today or format_iso_date(self._clock().date())
        selected_date = query.selected_date or today

        entries = await self._entry_repository.list_for_user(query.user_id)
        return self._aggregator.build_month_view(
            entries, query.year, query.month, selected_date, today
        )


class GetAgendaQueryHandler:
    """Splits a user's entries into upcoming and archived sections."""

    def __init__(
        self,
        entry_repository: CalendarEntryRepository,
        aggregator: Optional[MonthEventAggregator] = None,
        clock: Clock = system_clock,
    ):
        self._entry_repository = entry_repository
        self._aggregator = aggregator or MonthEventAggregator()
        self._clock = clock

    async def handle(self, query: GetAgendaQuery) -> AgendaSections:
        today = query.today or format_iso_date(self._clock().date())
        entries = await self._entry_repository.list_for_user(query.user_id)
        return self._aggregator.split_agenda(entries, today)


class GetCalendarEntryQueryHandler:
    def __init__(self, entry_repository: CalendarEntryRepository):
        self._entry_repository = entry_repository

    async def handle(self, query: GetCalendarEntryQuery) -> CalendarEntry:
        entry = await self._entry_repository.get_by_id(query.user_id, query.entry_id)
        if entry is None:
            raise CalendarEntryNotFoundError(query.user_id, query.entry_id)
        return entry


class SearchPlantsQueryHandler:
    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, query: SearchPlantsQuery) -> List[CatalogPlant]:
        term = query.term.strip()
        if not term:
            return []
        return await self._plant_repository.search_by_prefix(term, limit=query.limit)
