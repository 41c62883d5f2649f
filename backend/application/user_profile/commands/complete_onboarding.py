"""CompleteOnboardingCommand - store onboarding answers and targets."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

import structlog

from domain.macro_targets.core.entities.user_profile import UserProfile
from domain.macro_targets.core.exceptions.domain_errors import (
    InvalidUserDataError,
)
from domain.macro_targets.core.ports.repository import IUserProfileRepository
from domain.macro_targets.core.value_objects.macro_targets import MacroTargets
from domain.macro_targets.core.value_objects.onboarding import (
    MacrosSetup,
    OnboardingData,
)

from application.macro_targets.orchestrators.macro_orchestrator import (
    MacroTargetsOrchestrator,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CompleteOnboardingCommand:
    """Command to finish onboarding for a user.

    Attributes:
        user_id: User identifier (from authentication)
        onboarding_data: Answers collected by the onboarding flow
        today: Day used to derive age from a birth date (defaults to today)
    """

    user_id: str
    onboarding_data: OnboardingData
    today: Optional[date] = None


class CompleteOnboardingHandler:
    """Handler for CompleteOnboardingCommand.

    1. Derives targets according to the macro setup mode:
       auto → BMR/TDEE formulas, manual → calories from custom grams,
       unset → no new targets
    2. Loads the profile, creating it if the user has none yet
    3. Marks onboarding as completed and persists the profile
    """

    def __init__(
        self,
        orchestrator: MacroTargetsOrchestrator,
        repository: IUserProfileRepository,
    ):
        self._orchestrator = orchestrator
        self._repository = repository

    async def handle(self, command: CompleteOnboardingCommand) -> UserProfile:
        """
        Handle onboarding completion.

        Returns:
            UserProfile: Updated profile

        Raises:
            InvalidUserDataError: If auto mode is chosen without age or
                birth date, or with an impossible birth date
        """
        target_macros = self._calculate_targets(command)

        profile = await self._repository.find_by_user_id(command.user_id)
        if profile is None:
            profile = UserProfile.create(command.user_id)

        profile.complete_onboarding(command.onboarding_data, target_macros)
        await self._repository.save(profile)

        logger.info(
            "Onboarding completed",
            user_id=command.user_id,
            macros_setup=command.onboarding_data.macros_setup.value,
            target_macros=target_macros.to_dict() if target_macros else None,
        )
        return profile

    def _calculate_targets(
        self, command: CompleteOnboardingCommand
    ) -> Optional[MacroTargets]:
        data = command.onboarding_data

        if data.macros_setup is MacrosSetup.AUTO:
            age = data.age_on(command.today or date.today())
            if age is None:
                raise InvalidUserDataError(
                    "Age or birth date is required for automatic targets"
                )
            return self._orchestrator.generate_daily_macros_from_age(
                age=age,
                sex=data.sex,
                height=data.height,
                height_unit=data.height_unit,
                weight=data.weight,
                weight_unit=data.weight_unit,
                activity_level=data.activity_level,
                goal=data.goal,
                goal_intensity=data.goal_intensity,
            )

        if data.macros_setup is MacrosSetup.MANUAL and data.custom_macros:
            return self._orchestrator.generate_manual_macros(data.custom_macros)

        return None
