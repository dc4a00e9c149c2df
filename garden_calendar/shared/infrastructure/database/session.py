# 📄 File: garden_calendar/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Hands out a database "conversation" to each request and makes sure changes are saved
# when everything went well, or undone when something failed.
#
# 🧪 Purpose (Technical Summary):
# Async session factory with per-request commit/rollback semantics, exposed as a
# FastAPI dependency.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - garden_calendar/shared/infrastructure/database/connection.py (engine)
#
# 🔄 Connected Modules / Calls From:
# - Repository implementations (through presentation dependencies)
# - garden_calendar.main (startup)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from garden_calendar.shared.core.exceptions import DatabaseError
from garden_calendar.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None

    async def initialize(self) -> None:
        """Initialize the session factory with the database engine."""
        engine = await get_database_engine()
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=True,
        )
        logger.info("Database session factory initialized successfully")

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield a session; commit on success, roll back on any error.

        Application exceptions are re-raised unchanged so the API layer can
        render them; raw SQLAlchemy errors become DatabaseError.
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized", operation="get_session")

        session: AsyncSession = self._session_factory()
        try:
            yield session
            await session.commit()
        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}") from e
        except BaseException:
            await session.rollback()
            raise
        finally:
            await session.close()


session_manager = DatabaseSessionManager()


async def initialize_sessions() -> None:
    """Initialize the global database session manager."""
    await session_manager.initialize()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a transactional database session.

    Usage:
        @router.post("/...")
        async def endpoint(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with session_manager.get_session() as session:
        yield session


__all__ = [
    "DatabaseSessionManager",
    "get_db_session",
    "initialize_sessions",
    "session_manager",
]
