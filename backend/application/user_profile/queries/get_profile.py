"""Profile queries - read a user's profile and onboarding status."""

from dataclasses import dataclass
from typing import Optional

from domain.macro_targets.core.entities.user_profile import UserProfile
from domain.macro_targets.core.ports.repository import IUserProfileRepository


@dataclass(frozen=True)
class GetProfileQuery:
    user_id: str


class GetProfileQueryHandler:
    """Handler for GetProfileQuery."""

    def __init__(self, repository: IUserProfileRepository):
        self._repository = repository

    async def handle(self, query: GetProfileQuery) -> Optional[UserProfile]:
        """
        Returns:
            Optional[UserProfile]: Profile if found, None otherwise
        """
        return await self._repository.find_by_user_id(query.user_id)

    async def has_completed_onboarding(self, query: GetProfileQuery) -> bool:
        """Whether the user finished onboarding (False without a profile)."""
        profile = await self.handle(query)
        return profile is not None and profile.onboarding_completed
