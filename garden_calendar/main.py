# 📄 File: garden_calendar/main.py
# 🧭 Purpose (Layman Explanation):
# The starting point of the Garden Calendar service. It switches on logging and the
# database, plugs in all the web endpoints, and shuts everything down cleanly.
# 🧪 Purpose (Technical Summary):
# FastAPI application factory with lifespan management (logging, database engine and
# sessions, API client cleanup), CORS, request-id context and exception handlers that
# render GardenCalendarException subclasses as {"error": {...}}.
# 🔗 Dependencies:
# FastAPI, uvicorn, shared config/logging/database, API v1 router
# 🔄 Connected Modules / Calls From:
# uvicorn (garden_calendar.main:app), tests (create_app)

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from garden_calendar.api.v1 import API_PREFIX
from garden_calendar.api.v1.router import api_v1_router
from garden_calendar.modules.planting_calendar.presentation.dependencies import close_api_clients
from garden_calendar.shared.config.settings import get_settings
from garden_calendar.shared.core.exceptions import GardenCalendarException
from garden_calendar.shared.infrastructure.database.connection import close_database, init_database
from garden_calendar.shared.infrastructure.database.session import initialize_sessions
from garden_calendar.shared.utils.logging import get_logger, log_context, setup_logging

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown: database engine, session factory and the
    long-lived external API clients.
    """
    setup_logging()
    logger.info("🌱 Garden Calendar API starting up...")

    try:
        await init_database(create_tables=settings.ENVIRONMENT in ("development", "test"))
        logger.info("✅ Database connection initialized")

        await initialize_sessions()
        logger.info("✅ Session manager initialized")

        logger.info("✅ Garden Calendar API startup complete")
        yield

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    finally:
        logger.info("🔄 Garden Calendar API shutting down...")
        await close_api_clients()
        await close_database()
        logger.info("✅ Garden Calendar API shutdown complete")


def register_exception_handlers(app: FastAPI) -> None:
    """Render application and validation errors in the shared error shape."""

    @app.exception_handler(GardenCalendarException)
    async def garden_calendar_exception_handler(
        request: Request,
        exc: GardenCalendarException
    ) -> JSONResponse:
        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            f"{exc.error_code}: {exc.message}",
            path=str(request.url.path),
            status_code=exc.status_code,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"errors": jsonable_errors(exc)},
                    "status_code": 422,
                }
            },
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


def create_app(use_lifespan: bool = True) -> FastAPI:
    """
    Application factory function.

    Tests pass use_lifespan=False and override the database-backed dependencies.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.ENABLE_SWAGGER_UI else None,
        redoc_url="/redoc" if settings.ENABLE_REDOC else None,
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        with log_context(request_id=request.headers.get("X-Request-ID")) as request_id:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response

    register_exception_handlers(app)
    app.include_router(api_v1_router, prefix=API_PREFIX)
    return app


app = create_app()


def main():
    """Run the application with uvicorn (development)."""
    uvicorn.run(
        "garden_calendar.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
