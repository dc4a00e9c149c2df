# 📄 File: garden_calendar/modules/planting_calendar/infrastructure/database/calendar_entry_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds and removes calendar entries in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async implementation of CalendarEntryRepository with domain/model mapping,
# upsert by (user_id, entry_id) and RepositoryError wrapping of SQLAlchemy failures.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - Domain repository interface and models
#
# 🔄 Connected Modules / Calls From:
# - Presentation dependencies (repository construction per request)
# - Calendar command/query handlers (through the interface)

import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from garden_calendar.shared.core.exceptions import RepositoryError

from ...domain.models.calendar_entry import CalendarEntry
from ...domain.models.plant import PlantProfile
from ...domain.repositories.calendar_entry_repository import CalendarEntryRepository
from .models import CalendarEntryModel

logger = logging.getLogger(__name__)


class CalendarEntryRepositoryImpl(CalendarEntryRepository):
    """
    SQLAlchemy implementation of the CalendarEntryRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def upsert(self, entry: CalendarEntry) -> CalendarEntry:
        try:
            model = await self._session.get(CalendarEntryModel, (entry.user_id, entry.id))
            if model is None:
                model = self._domain_to_model(entry)
                self._session.add(model)
            else:
                model.date = entry.date
                model.plant = entry.plant.model_dump(mode="json")
                model.title = entry.title
                model.description = entry.description
                model.created_at = entry.created_at
            await self._session.flush()

            logger.info(f"Upserted calendar entry {entry.id} for user {entry.user_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Failed to upsert calendar entry {entry.id}: {e}")
            raise RepositoryError(
                f"Failed to save calendar entry: {e}",
                operation="upsert",
                entity="calendar_entry",
            ) from e

    async def get_by_id(self, user_id: str, entry_id: str) -> Optional[CalendarEntry]:
        try:
            model = await self._session.get(CalendarEntryModel, (user_id, entry_id))
            return self._model_to_domain(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to get calendar entry {entry_id}: {e}")
            raise RepositoryError(
                f"Failed to retrieve calendar entry: {e}",
                operation="get_by_id",
                entity="calendar_entry",
            ) from e

    async def list_for_user(self, user_id: str) -> List[CalendarEntry]:
        try:
            stmt = select(CalendarEntryModel).where(CalendarEntryModel.user_id == user_id)
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list calendar entries for user {user_id}: {e}")
            raise RepositoryError(
                f"Failed to list calendar entries: {e}",
                operation="list_for_user",
                entity="calendar_entry",
            ) from e

        entries = []
        for model in models:
            try:
                entries.append(self._model_to_domain(model))
            except PydanticValidationError as e:
                logger.warning(
                    f"Skipping unreadable calendar entry {model.entry_id} for user {user_id}: {e}"
                )
        return entries

    async def delete(self, user_id: str, entry_id: str) -> bool:
        try:
            stmt = delete(CalendarEntryModel).where(
                CalendarEntryModel.user_id == user_id,
                CalendarEntryModel.entry_id == entry_id,
            )
            result = await self._session.execute(stmt)
            deleted = result.rowcount > 0
            if deleted:
                logger.info(f"Deleted calendar entry {entry_id} for user {user_id}")
            return deleted
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete calendar entry {entry_id}: {e}")
            raise RepositoryError(
                f"Failed to delete calendar entry: {e}",
                operation="delete",
                entity="calendar_entry",
            ) from e

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Failed to commit calendar changes: {e}")
            raise RepositoryError(
                f"Failed to commit calendar changes: {e}",
                operation="commit",
                entity="calendar_entry",
            ) from e

    def _model_to_domain(self, model: CalendarEntryModel) -> CalendarEntry:
        """Convert SQLAlchemy model to domain entity."""
        return CalendarEntry(
            id=model.entry_id,
            user_id=model.user_id,
            date=model.date,
            plant=PlantProfile.model_validate(model.plant),
            title=model.title or "",
            description=model.description or "",
            created_at=model.created_at,
        )

    def _domain_to_model(self, entry: CalendarEntry) -> CalendarEntryModel:
        """Convert domain entity to SQLAlchemy model."""
        return CalendarEntryModel(
            user_id=entry.user_id,
            entry_id=entry.id,
            date=entry.date,
            plant=entry.plant.model_dump(mode="json"),
            title=entry.title,
            description=entry.description,
            created_at=entry.created_at,
        )
