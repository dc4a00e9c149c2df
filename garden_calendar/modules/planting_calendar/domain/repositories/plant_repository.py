# 📄 File: garden_calendar/modules/planting_calendar/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how the shared list of known plants is saved and searched.
# 🧪 Purpose (Technical Summary):
# Abstract repository for the global plant catalog with prefix search on normalized names.
# 🔗 Dependencies:
# abc, typing, domain models
# 🔄 Connected Modules / Calls From:
# Plant search query handler, profile generation command handler, PlantRepositoryImpl

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant import CatalogPlant


class PlantRepository(ABC):
    """Abstract repository interface for catalog plants."""

    @abstractmethod
    async def save(self, plant: CatalogPlant) -> CatalogPlant:
        """Insert or replace a catalog plant by id."""
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: str) -> Optional[CatalogPlant]:
        pass

    @abstractmethod
    async def get_by_normalized_name(self, normalized_name: str) -> Optional[CatalogPlant]:
        pass

    @abstractmethod
    async def search_by_prefix(self, prefix: str, limit: int = 20) -> List[CatalogPlant]:
        """
        Plants whose normalized name starts with the lowercased prefix.

        Args:
            prefix: Search term; an empty term matches nothing
            limit: Maximum results

        Returns:
            List[CatalogPlant]: Matches ordered by normalized name
        """
        pass
