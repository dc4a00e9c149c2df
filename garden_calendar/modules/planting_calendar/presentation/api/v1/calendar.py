# 📄 File: garden_calendar/modules/planting_calendar/presentation/api/v1/calendar.py
# 🧭 Purpose (Layman Explanation):
# The web addresses the app uses to add plants to a calendar, look at a month, see what's
# coming up, and remove plants.
# 🧪 Purpose (Technical Summary):
# FastAPI router for per-user calendar endpoints. Endpoints build commands/queries,
# delegate to injected handlers and convert domain results to response schemas;
# GardenCalendarException subclasses are rendered by the application exception handler.
# 🔗 Dependencies:
# FastAPI, application commands/queries, presentation dependencies and schemas
# 🔄 Connected Modules / Calls From:
# garden_calendar.api.v1.router

"""
Calendar API Endpoints

- POST   /users/{user_id}/calendar/entries              add a plant (resolves its planting date)
- GET    /users/{user_id}/calendar/entries/{entry_id}   one entry
- DELETE /users/{user_id}/calendar/entries/{entry_id}   remove an entry
- GET    /users/{user_id}/calendar/months/{year}/{month} month view (events + day markers)
- GET    /users/{user_id}/calendar/agenda               upcoming and archived entries
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from ....application.commands.add_plant_to_calendar import AddPlantToCalendarCommand
from ....application.commands.remove_calendar_entry import RemoveCalendarEntryCommand
from ....application.handlers.command_handlers import (
    AddPlantToCalendarCommandHandler,
    RemoveCalendarEntryCommandHandler,
)
from ....application.handlers.query_handlers import (
    GetAgendaQueryHandler,
    GetCalendarEntryQueryHandler,
    GetMonthEventsQueryHandler,
)
from ....application.queries.calendar_queries import (
    GetAgendaQuery,
    GetCalendarEntryQuery,
    GetMonthEventsQuery,
)
from ...dependencies import (
    get_add_plant_handler,
    get_agenda_handler,
    get_calendar_entry_handler,
    get_month_events_handler,
    get_remove_entry_handler,
)
from ..schemas.calendar_schemas import (
    AddPlantToCalendarRequest,
    AgendaResponse,
    CalendarEntryResponse,
    MonthViewResponse,
)

logger = logging.getLogger(__name__)

calendar_router = APIRouter()

_ERROR_RESPONSES = {
    404: {"description": "Calendar entry not found"},
    422: {"description": "Invalid input or invalid planting date recommendation"},
    503: {"description": "Recommendation service or database unavailable"},
}


@calendar_router.post(
    "/entries",
    response_model=CalendarEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant to the calendar",
    description="Resolve the plant's next planting date for the location and save it",
    responses=_ERROR_RESPONSES,
)
async def add_plant_to_calendar(
    request: AddPlantToCalendarRequest,
    user_id: str = Path(..., min_length=1),
    handler: AddPlantToCalendarCommandHandler = Depends(get_add_plant_handler),
) -> CalendarEntryResponse:
    command = AddPlantToCalendarCommand(
        user_id=user_id,
        plant=request.plant.to_domain(),
        location=request.location.to_domain(),
    )
    entry = await handler.handle(command)
    return CalendarEntryResponse.from_domain(entry)


@calendar_router.get(
    "/entries/{entry_id}",
    response_model=CalendarEntryResponse,
    summary="Get a calendar entry",
    responses=_ERROR_RESPONSES,
)
async def get_calendar_entry(
    user_id: str = Path(..., min_length=1),
    entry_id: str = Path(..., min_length=1),
    handler: GetCalendarEntryQueryHandler = Depends(get_calendar_entry_handler),
) -> CalendarEntryResponse:
    entry = await handler.handle(GetCalendarEntryQuery(user_id=user_id, entry_id=entry_id))
    return CalendarEntryResponse.from_domain(entry)


@calendar_router.delete(
    "/entries/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a calendar entry",
    responses=_ERROR_RESPONSES,
)
async def remove_calendar_entry(
    user_id: str = Path(..., min_length=1),
    entry_id: str = Path(..., min_length=1),
    handler: RemoveCalendarEntryCommandHandler = Depends(get_remove_entry_handler),
) -> Response:
    await handler.handle(RemoveCalendarEntryCommand(user_id=user_id, entry_id=entry_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@calendar_router.get(
    "/months/{year}/{month}",
    response_model=MonthViewResponse,
    summary="Get a month view",
    description="Entries in the month in date order, plus per-day markers for the grid",
    responses=_ERROR_RESPONSES,
)
async def get_month_view(
    user_id: str = Path(..., min_length=1),
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12, description="1 = January"),
    selected_date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    today: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to the server date"),
    handler: GetMonthEventsQueryHandler = Depends(get_month_events_handler),
) -> MonthViewResponse:
    view = await handler.handle(GetMonthEventsQuery(
        user_id=user_id,
        year=year,
        month=month,
        selected_date=selected_date,
        today=today,
    ))
    return MonthViewResponse.from_domain(view)


@calendar_router.get(
    "/agenda",
    response_model=AgendaResponse,
    summary="Get upcoming and archived plantings",
    responses=_ERROR_RESPONSES,
)
async def get_agenda(
    user_id: str = Path(..., min_length=1),
    today: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to the server date"),
    handler: GetAgendaQueryHandler = Depends(get_agenda_handler),
) -> AgendaResponse:
    agenda = await handler.handle(GetAgendaQuery(user_id=user_id, today=today))
    return AgendaResponse.from_domain(agenda)
