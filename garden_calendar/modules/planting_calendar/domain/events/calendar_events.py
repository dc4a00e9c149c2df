# 📄 File: garden_calendar/modules/planting_calendar/domain/events/calendar_events.py
# 🧭 Purpose (Layman Explanation):
# The announcements the calendar makes when a plant is added or removed, and the list of
# listeners who want to hear them.
# 🧪 Purpose (Technical Summary):
# Calendar domain events and CalendarChangeNotifier, the explicitly owned observer
# registry that command handlers publish to after a successful write.
# 🔗 Dependencies:
# garden_calendar.shared.events
# 🔄 Connected Modules / Calls From:
# Calendar command handlers, presentation dependencies

from typing import ClassVar

from garden_calendar.shared.events import DomainEvent, EventNotifier


class CalendarEvent(DomainEvent):
    """Base for events about one entry in a user's calendar."""

    user_id: str
    entry_id: str


class PlantAddedToCalendar(CalendarEvent):
    """
    A plant was added (or re-added) to a user's calendar.

    Observers re-query the month containing planting_date.
    """
    event_type: ClassVar[str] = "calendar.plant_added"

    plant_name: str
    planting_date: str


class CalendarEntryRemoved(CalendarEvent):
    """A user removed an entry from their calendar."""
    event_type: ClassVar[str] = "calendar.entry_removed"


class CalendarChangeNotifier(EventNotifier):
    """Observer registry for calendar changes."""
