# 📄 File: garden_calendar/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, making sure we can talk to our data storage
# and share a pool of connections instead of opening a new one for every request.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine management with connection pooling, health checks and
# the declarative Base shared by every module's ORM models.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - asyncpg (PostgreSQL async driver, selected by the database URL)
# - garden_calendar/shared/config/settings.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - garden_calendar/shared/infrastructure/database/session.py (session management)
# - Module ORM models (Base)
# - garden_calendar.main (startup/shutdown)

import logging
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

from garden_calendar.shared.config.settings import get_settings
from garden_calendar.shared.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseConnectionManager:
    """
    Owns the process-wide async engine.
    """

    def __init__(self, database_url: Optional[str] = None):
        self._engine: Optional[AsyncEngine] = None
        self._database_url = database_url
        self._health_check_query = text("SELECT 1")

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build SQLAlchemy engine parameters from settings."""
        settings = get_settings()
        url = self._database_url or settings.database_url
        params: Dict[str, Any] = {
            "url": url,
            "echo": settings.DEBUG,
            "pool_pre_ping": True,
        }
        # SQLite (tests, local runs) does not take queue pool sizing.
        if not url.startswith("sqlite"):
            params.update({
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
                "pool_recycle": settings.DB_POOL_RECYCLE,
            })
        return params

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseError("Database engine not initialized", operation="get_engine")
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    async def initialize(self, create_tables: bool = False) -> None:
        """Create the engine and optionally the schema (development and tests)."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info("Initializing database connection pool...")
        self._engine = create_async_engine(**self._build_connection_params())

        if create_tables:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database schema ensured")

        await self.health_check()
        logger.info("Database connection pool initialized successfully")

    async def health_check(self) -> Dict[str, Any]:
        """Run a trivial query against the database."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(self._health_check_query)
            return {"status": "healthy"}
        except DatabaseError:
            raise
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            raise DatabaseError(f"Database health check failed: {e}", operation="health_check") from e

    async def close(self) -> None:
        """Dispose the engine and its pool."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info("Database connections closed")


connection_manager = DatabaseConnectionManager()


async def init_database(create_tables: bool = False) -> None:
    """Initialize the global database engine."""
    await connection_manager.initialize(create_tables=create_tables)


async def get_database_engine() -> AsyncEngine:
    """Return the initialized global engine."""
    return connection_manager.engine


async def close_database() -> None:
    """Close the global database engine."""
    await connection_manager.close()
