# 📄 File: garden_calendar/modules/planting_calendar/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves plants to the shared catalog and finds them by name.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async implementation of PlantRepository with escaped prefix search on the
# normalized name.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - Domain repository interface and models
#
# 🔄 Connected Modules / Calls From:
# - Presentation dependencies
# - Plant search and profile generation handlers (through the interface)

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from garden_calendar.shared.core.exceptions import RepositoryError

from ...domain.models.plant import CatalogPlant, normalize_plant_name
from ...domain.repositories.plant_repository import PlantRepository
from .models import PlantModel

logger = logging.getLogger(__name__)

_PLANT_COLUMNS = (
    "display_name",
    "normalized_name",
    "sun_preference",
    "watering_preference",
    "general_information",
    "image_url",
    "user_query",
    "created_by",
    "created_at",
)


class PlantRepositoryImpl(PlantRepository):
    """
    SQLAlchemy implementation of the PlantRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, plant: CatalogPlant) -> CatalogPlant:
        try:
            model = await self._session.get(PlantModel, plant.id)
            if model is None:
                model = self._domain_to_model(plant)
                self._session.add(model)
            else:
                for column, value in self._column_values(plant).items():
                    setattr(model, column, value)
            await self._session.flush()

            logger.info(f"Saved catalog plant {plant.id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Failed to save plant {plant.id}: {e}")
            raise RepositoryError(f"Failed to save plant: {e}", operation="save", entity="plant") from e

    async def get_by_id(self, plant_id: str) -> Optional[CatalogPlant]:
        try:
            model = await self._session.get(PlantModel, plant_id)
            return self._model_to_domain(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to get plant {plant_id}: {e}")
            raise RepositoryError(f"Failed to retrieve plant: {e}", operation="get_by_id", entity="plant") from e

    async def get_by_normalized_name(self, normalized_name: str) -> Optional[CatalogPlant]:
        try:
            stmt = select(PlantModel).where(PlantModel.normalized_name == normalized_name).limit(1)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            return self._model_to_domain(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to get plant by name {normalized_name}: {e}")
            raise RepositoryError(
                f"Failed to retrieve plant: {e}",
                operation="get_by_normalized_name",
                entity="plant",
            ) from e

    async def search_by_prefix(self, prefix: str, limit: int = 20) -> List[CatalogPlant]:
        term = normalize_plant_name(prefix)
        if not term:
            return []

        try:
            stmt = (
                select(PlantModel)
                .where(PlantModel.normalized_name.startswith(term, autoescape=True))
                .order_by(PlantModel.normalized_name)
                .limit(limit)
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Failed to search plants with prefix {term!r}: {e}")
            raise RepositoryError(
                f"Failed to search plants: {e}",
                operation="search_by_prefix",
                entity="plant",
            ) from e

    def _column_values(self, plant: CatalogPlant) -> dict:
        return plant.model_dump(include=set(_PLANT_COLUMNS))

    def _model_to_domain(self, model: PlantModel) -> CatalogPlant:
        """Convert SQLAlchemy model to domain entity."""
        return CatalogPlant(
            id=model.id,
            **{column: getattr(model, column) for column in _PLANT_COLUMNS},
        )

    def _domain_to_model(self, plant: CatalogPlant) -> PlantModel:
        """Convert domain entity to SQLAlchemy model."""
        return PlantModel(id=plant.id, **self._column_values(plant))
