# 📄 File: garden_calendar/modules/planting_calendar/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The workers that carry out calendar actions and answer calendar questions.
# 🧪 Purpose (Technical Summary):
# Command and query handler exports.

from .command_handlers import (
    AddPlantToCalendarCommandHandler,
    GeneratePlantProfileCommandHandler,
    RemoveCalendarEntryCommandHandler,
)
from .query_handlers import (
    GetAgendaQueryHandler,
    GetCalendarEntryQueryHandler,
    GetMonthEventsQueryHandler,
    SearchPlantsQueryHandler,
)

__all__ = [
    "AddPlantToCalendarCommandHandler",
    "GeneratePlantProfileCommandHandler",
    "RemoveCalendarEntryCommandHandler",
    "GetAgendaQueryHandler",
    "GetCalendarEntryQueryHandler",
    "GetMonthEventsQueryHandler",
    "SearchPlantsQueryHandler",
]
