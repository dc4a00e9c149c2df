# 📄 File: garden_calendar/modules/planting_calendar/application/queries/calendar_queries.py
# 🧭 Purpose (Layman Explanation):
# The questions a gardener can ask about their calendar: what's in this month, what's
# coming up, and what's in one particular entry.
# 🧪 Purpose (Technical Summary):
# CQRS read-side query definitions for month views, agenda and single entries. Dates are
# YYYY-MM-DD strings; missing today/selected dates default to the handler's clock.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Calendar query handlers, calendar API endpoints

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GetMonthEventsQuery(BaseModel):
    """Month view of a user's calendar. Months are 1-indexed."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1)
    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    selected_date: Optional[str] = Field(None, description="Defaults to today")
    today: Optional[str] = Field(None, description="Defaults to the server date")


class GetAgendaQuery(BaseModel):
    """Upcoming and archived entries relative to today."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1)
    today: Optional[str] = None


class GetCalendarEntryQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1)
    entry_id: str = Field(..., min_length=1)
