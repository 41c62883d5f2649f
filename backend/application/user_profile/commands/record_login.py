"""RecordLoginCommand - track the last login of a user."""

from dataclasses import dataclass

from domain.macro_targets.core.entities.user_profile import UserProfile
from domain.macro_targets.core.ports.repository import IUserProfileRepository


@dataclass(frozen=True)
class RecordLoginCommand:
    user_id: str


class RecordLoginHandler:
    """Handler for RecordLoginCommand.

    Creates the profile on first login.
    """

    def __init__(self, repository: IUserProfileRepository):
        self._repository = repository

    async def handle(self, command: RecordLoginCommand) -> UserProfile:
        profile = await self._repository.find_by_user_id(command.user_id)
        if profile is None:
            profile = UserProfile.create(command.user_id)
        else:
            profile.record_login()

        await self._repository.save(profile)
        return profile
