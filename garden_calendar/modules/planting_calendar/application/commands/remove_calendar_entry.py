# 📄 File: garden_calendar/modules/planting_calendar/application/commands/remove_calendar_entry.py
# 🧭 Purpose (Layman Explanation):
# The "take this plant off my calendar" request.
# 🧪 Purpose (Technical Summary):
# CQRS command for deleting one calendar entry by id.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# RemoveCalendarEntryCommandHandler, calendar API endpoint

from pydantic import BaseModel, ConfigDict, Field


class RemoveCalendarEntryCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1)
    entry_id: str = Field(..., min_length=1)
