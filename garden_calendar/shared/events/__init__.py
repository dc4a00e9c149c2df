# 📄 File: garden_calendar/shared/events/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The shared way of announcing that something happened, and of listening for it.
#
# 🧪 Purpose (Technical Summary):
# Domain event base class and observer registry exports.

from .base import DomainEvent
from .notifier import EventNotifier, Observer

__all__ = ["DomainEvent", "EventNotifier", "Observer"]
