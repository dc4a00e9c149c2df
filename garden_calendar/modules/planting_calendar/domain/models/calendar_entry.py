# 📄 File: garden_calendar/modules/planting_calendar/domain/models/calendar_entry.py
# 🧭 Purpose (Layman Explanation):
# A calendar entry is a note in a gardener's calendar saying "plant this, on this day".
# This file also describes the little markers drawn on calendar days and the month and
# agenda views built from the entries.
# 🧪 Purpose (Technical Summary):
# Domain models for persisted calendar entries and the derived, non-persisted views
# (DayMarker, MonthView, AgendaSections). Derived views are frozen so a computed map
# can never be mutated across recomputations.
# 🔗 Dependencies:
# pydantic, datetime, typing, plant.py
# 🔄 Connected Modules / Calls From:
# MonthEventAggregator, add/remove command handlers, calendar repository, API schemas

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .plant import PlantProfile


class CalendarEntry(BaseModel):
    """
    A planting event saved under a user's calendar, keyed by plant id.

    `date` is kept as the stored literal. It is written as a valid YYYY-MM-DD
    but legacy rows may hold anything, so readers parse it defensively.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    date: str
    plant: PlantProfile
    title: str = ""
    description: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def for_plant(
        cls,
        user_id: str,
        plant: PlantProfile,
        planting_date: str,
        created_at: Optional[datetime] = None,
    ) -> "CalendarEntry":
        """Create the entry written when a gardener adds a plant to their calendar."""
        return cls(
            id=plant.id,
            user_id=user_id,
            date=planting_date,
            plant=plant,
            title=f"Plant {plant.display_name}",
            description=f"Time to plant your {plant.display_name}!",
            created_at=created_at or datetime.now(timezone.utc),
        )


class DayMarker(BaseModel):
    """
    Render-facing summary of one calendar day.

    `plants` holds every plant scheduled that day in the order the entries were
    supplied. Renderers show the first plant plus a "+N" badge of overflow_count.
    """

    model_config = ConfigDict(frozen=True)

    plants: Tuple[PlantProfile, ...] = ()
    is_selected: bool = False
    is_today: bool = False

    @property
    def overflow_count(self) -> int:
        return max(len(self.plants) - 1, 0)

    @property
    def has_plants(self) -> bool:
        return bool(self.plants)


class MonthView(BaseModel):
    """Everything needed to draw one month: its events in order and its day markers."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., ge=1, le=12)
    selected_date: str
    today: str
    events: List[CalendarEntry] = Field(default_factory=list)
    day_markers: Dict[str, DayMarker] = Field(default_factory=dict)


class AgendaSections(BaseModel):
    """Entries split into what is still ahead and what has already passed."""

    model_config = ConfigDict(frozen=True)

    today: str
    upcoming: List[CalendarEntry] = Field(default_factory=list)
    archived: List[CalendarEntry] = Field(default_factory=list)
