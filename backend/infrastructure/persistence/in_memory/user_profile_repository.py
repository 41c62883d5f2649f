"""In-memory implementation of IUserProfileRepository."""

from copy import deepcopy
from typing import Optional

from domain.macro_targets.core.entities.user_profile import UserProfile
from domain.macro_targets.core.ports.repository import IUserProfileRepository


class InMemoryUserProfileRepository(IUserProfileRepository):
    """
    In-memory implementation of user profile repository.

    Uses a dictionary keyed by user ID. Suitable for testing and
    development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, UserProfile] = {}

    async def save(self, profile: UserProfile) -> None:
        """
        Save or update profile in memory.

        Args:
            profile: Profile to save
        """
        # Deep copy to prevent external mutations
        self._profiles[profile.user_id] = deepcopy(profile)

    async def find_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Find profile by user ID.

        Returns:
            Deep copy of profile if found, None otherwise
        """
        profile = self._profiles.get(user_id)
        return deepcopy(profile) if profile else None

    async def delete(self, user_id: str) -> None:
        self._profiles.pop(user_id, None)

    async def exists(self, user_id: str) -> bool:
        return user_id in self._profiles

    def clear(self) -> None:
        """
        Clear all profiles from memory.

        Useful for test cleanup.
        """
        self._profiles.clear()

    def count(self) -> int:
        return len(self._profiles)
