# 📄 File: garden_calendar/modules/planting_calendar/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# All the questions a gardener can ask the planting calendar.
# 🧪 Purpose (Technical Summary):
# CQRS query definitions for planting calendar read operations.

from .calendar_queries import GetAgendaQuery, GetCalendarEntryQuery, GetMonthEventsQuery
from .search_plants import SearchPlantsQuery

__all__ = [
    "GetAgendaQuery",
    "GetCalendarEntryQuery",
    "GetMonthEventsQuery",
    "SearchPlantsQuery",
]
