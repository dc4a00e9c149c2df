# 📄 File: garden_calendar/shared/events/base.py

# 🧭 Purpose (Layman Explanation):
# Defines what an "event" looks like: a small, unchangeable note saying that something
# important just happened (for example, a plant was added to someone's calendar).

# 🧪 Purpose (Technical Summary):
# Immutable pydantic base class for domain events with identity, timestamp and
# serialization helpers.

# 🔗 Dependencies:
# - pydantic: Event structure and validation
# - uuid, datetime: Event identity and timestamps

# 🔄 Connected Modules / Calls From:
# Used by: module domain events (calendar events), EventNotifier, command handlers

from datetime import datetime, timezone
from typing import Any, ClassVar, Dict
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class DomainEvent(BaseModel):
    """
    Base class for all domain events.

    Subclasses set `event_type` (dotted, e.g. "calendar.plant_added") and add
    their payload as fields. Events are frozen once created.
    """

    model_config = ConfigDict(frozen=True)

    event_type: ClassVar[str] = "domain.event"

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary representation."""
        return {
            'event_type': self.event_type,
            **self.model_dump(mode='json'),
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(event_id={self.event_id})"
