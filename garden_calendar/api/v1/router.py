# 📄 File: garden_calendar/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 of the API, sending calendar requests to the calendar
# and plant requests to the plant catalog.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation: health endpoints plus the planting calendar module routers
# under their route prefixes.
# 🔗 Dependencies:
# FastAPI, health router, planting calendar presentation routers
# 🔄 Connected Modules / Calls From:
# garden_calendar.main

from fastapi import APIRouter

from garden_calendar.modules.planting_calendar.presentation.api.v1 import calendar_router, plants_router

from .health import health_router

ROUTE_PREFIXES = {
    "calendar": "/users/{user_id}/calendar",
    "plants": "/plants",
}

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])
api_v1_router.include_router(calendar_router, prefix=ROUTE_PREFIXES["calendar"], tags=["Planting Calendar"])
api_v1_router.include_router(plants_router, prefix=ROUTE_PREFIXES["plants"], tags=["Plants"])
