# 📄 File: garden_calendar/shared/events/notifier.py

# 🧭 Purpose (Layman Explanation):
# A sign-up sheet for "tell me when something changes". Whoever wants to know registers
# a callback; when a change happens, everyone on the sheet is told.

# 🧪 Purpose (Technical Summary):
# Explicit observer registry: subscribers (sync or async callables) are registered by the
# owner and invoked in registration order on notify(). A failing observer is logged
# and never propagates to the publisher.

# 🔗 Dependencies:
# - inspect (awaitable detection)
# - garden_calendar.shared.events.base (DomainEvent)
# - garden_calendar.shared.utils.logging

# 🔄 Connected Modules / Calls From:
# Used by: CalendarChangeNotifier, command handlers (publish after a successful write),
# presentation dependencies (owner of the registry)

import inspect
from typing import Any, Awaitable, Callable, List, Union

from garden_calendar.shared.events.base import DomainEvent
from garden_calendar.shared.utils.logging import get_logger

logger = get_logger(__name__)

Observer = Callable[[DomainEvent], Union[None, Awaitable[Any]]]


class EventNotifier:
    """Ordered list of observers notified about domain events."""

    def __init__(self):
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register an observer. Returns a callable that unsubscribes it.

        Registering the same observer twice is a no-op.
        """
        if observer not in self._observers:
            self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    async def notify(self, event: DomainEvent) -> int:
        """
        Deliver an event to every observer.

        Returns:
            int: number of observers that handled the event without raising
        """
        delivered = 0
        for observer in list(self._observers):
            try:
                result = observer(event)
                if inspect.isawaitable(result):
                    await result
                delivered += 1
            except Exception as e:
                logger.error(
                    f"Observer failed while handling {event.event_type}: {e}",
                    exc_info=True,
                    event_type=event.event_type,
                    event_id=event.event_id,
                )
        return delivered
