# 📄 File: garden_calendar/modules/planting_calendar/domain/repositories/calendar_entry_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how calendar entries are saved, looked up and removed, without saying which
# database is behind it.
# 🧪 Purpose (Technical Summary):
# Abstract repository for per-user CalendarEntry collections: upsert by plant id,
# unordered listing, lookup and delete by id.
# 🔗 Dependencies:
# abc, typing, domain models
# 🔄 Connected Modules / Calls From:
# Calendar command/query handlers, CalendarEntryRepositoryImpl

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.calendar_entry import CalendarEntry


class CalendarEntryRepository(ABC):
    """
    Abstract repository interface for calendar entries.

    Entries live in one collection per user and are keyed by plant id.
    """

    @abstractmethod
    async def upsert(self, entry: CalendarEntry) -> CalendarEntry:
        """
        Insert the entry, or replace the user's existing entry with the same id.

        Args:
            entry: Entry to store

        Returns:
            CalendarEntry: Stored entry
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str, entry_id: str) -> Optional[CalendarEntry]:
        """
        Get one of a user's entries.

        Returns:
            Optional[CalendarEntry]: Entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[CalendarEntry]:
        """
        Get every entry of a user.

        No ordering is guaranteed; aggregation sorts.
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str, entry_id: str) -> bool:
        """
        Delete one of a user's entries.

        Returns:
            bool: True if an entry was deleted
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """
        Make the writes made so far durable.

        Handlers call this before telling observers about a change.
        """
        pass
