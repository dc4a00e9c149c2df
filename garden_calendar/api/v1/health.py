# 📄 File: garden_calendar/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A simple "are you alive?" check that monitoring tools can call.
# 🧪 Purpose (Technical Summary):
# Liveness endpoint plus a readiness endpoint that pings the database.
# 🔗 Dependencies:
# FastAPI, shared settings, database connection manager
# 🔄 Connected Modules / Calls From:
# garden_calendar.api.v1.router, load balancers, container probes

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from garden_calendar.shared.config.settings import get_settings
from garden_calendar.shared.core.exceptions import DatabaseError
from garden_calendar.shared.infrastructure.database.connection import connection_manager

logger = logging.getLogger(__name__)

health_router = APIRouter()


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Service liveness")
async def health_check() -> JSONResponse:
    settings = get_settings()
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


@health_router.get("/health/ready",
                   summary="Readiness Probe",
                   description="Ready when the database answers")
async def readiness_probe() -> JSONResponse:
    try:
        database = await connection_manager.health_check()
    except DatabaseError as e:
        logger.warning(f"Readiness check failed: {e.message}")
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "database": {"status": "unhealthy", "error": e.message}}
        )
    return JSONResponse(status_code=200, content={"status": "ready", "database": database})
