# 📄 File: garden_calendar/modules/planting_calendar/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Calendar announcements and their listeners.
# 🧪 Purpose (Technical Summary):
# Calendar domain event exports.

from .calendar_events import (
    CalendarChangeNotifier,
    CalendarEntryRemoved,
    CalendarEvent,
    PlantAddedToCalendar,
)

__all__ = [
    "CalendarChangeNotifier",
    "CalendarEntryRemoved",
    "CalendarEvent",
    "PlantAddedToCalendar",
]
