"""Repository ports - persistence interfaces for profiles and logs."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from ..entities.daily_macro_log import DailyMacroLog
from ..entities.user_profile import UserProfile


class IUserProfileRepository(ABC):
    """Port for user profile persistence."""

    @abstractmethod
    async def save(self, profile: UserProfile) -> None:
        """Save profile (create or update)."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        """Find profile by user ID.

        Returns:
            Optional[UserProfile]: Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        pass

    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        pass


class IDailyLogRepository(ABC):
    """Port for daily macro log persistence.

    Logs are keyed by (user_id, log_date).
    """

    @abstractmethod
    async def save(self, log: DailyMacroLog) -> None:
        """Save log (create or update)."""
        pass

    @abstractmethod
    async def find(self, user_id: str, log_date: date) -> Optional[DailyMacroLog]:
        """Find the log of one day.

        Returns:
            Optional[DailyMacroLog]: Log if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_range(
        self, user_id: str, start_date: date, end_date: date
    ) -> List[DailyMacroLog]:
        """Find logs between two days, bounds included.

        Returns:
            List[DailyMacroLog]: Logs sorted by date ascending
        """
        pass
