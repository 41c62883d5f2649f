"""ResetOnboardingCommand - clear onboarding answers and targets."""

from dataclasses import dataclass

import structlog

from domain.macro_targets.core.entities.user_profile import UserProfile
from domain.macro_targets.core.exceptions.domain_errors import (
    ProfileNotFoundError,
)
from domain.macro_targets.core.ports.repository import IUserProfileRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ResetOnboardingCommand:
    """Command to send a user back through onboarding."""

    user_id: str


class ResetOnboardingHandler:
    """Handler for ResetOnboardingCommand."""

    def __init__(self, repository: IUserProfileRepository):
        self._repository = repository

    async def handle(self, command: ResetOnboardingCommand) -> UserProfile:
        """
        Handle onboarding reset.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        profile = await self._repository.find_by_user_id(command.user_id)
        if profile is None:
            raise ProfileNotFoundError(command.user_id)

        profile.reset_onboarding()
        await self._repository.save(profile)

        logger.info("Onboarding reset", user_id=command.user_id)
        return profile
