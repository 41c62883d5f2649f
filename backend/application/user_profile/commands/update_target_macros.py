"""UpdateTargetMacrosCommand - manual edit of daily targets."""

from dataclasses import dataclass

import structlog

from domain.macro_targets.core.entities.user_profile import UserProfile
from domain.macro_targets.core.exceptions.domain_errors import (
    InvalidMacrosError,
    OnboardingIncompleteError,
    ProfileNotFoundError,
)
from domain.macro_targets.core.ports.repository import IUserProfileRepository
from domain.macro_targets.core.value_objects.onboarding import CustomMacros

from application.macro_targets.orchestrators.macro_orchestrator import (
    MacroTargetsOrchestrator,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateTargetMacrosCommand:
    """Command to replace daily targets with hand-picked grams.

    Attributes:
        user_id: User identifier
        protein: Protein grams
        carbs: Carbohydrate grams
        fats: Fat grams
    """

    user_id: str
    protein: float
    carbs: float
    fats: float


class UpdateTargetMacrosHandler:
    """Handler for UpdateTargetMacrosCommand.

    Calories are recomputed from the grams (4/4/9); the maintenance
    calories of the previous targets are dropped.
    """

    def __init__(
        self,
        orchestrator: MacroTargetsOrchestrator,
        repository: IUserProfileRepository,
    ):
        self._orchestrator = orchestrator
        self._repository = repository

    async def handle(self, command: UpdateTargetMacrosCommand) -> UserProfile:
        """
        Handle target edit.

        Raises:
            InvalidMacrosError: If any gram value is negative
            ProfileNotFoundError: If the user has no profile
            OnboardingIncompleteError: If onboarding has not finished
        """
        for name in ("protein", "carbs", "fats"):
            grams = getattr(command, name)
            if grams < 0:
                raise InvalidMacrosError(
                    f"{name.capitalize()} must be non-negative, got {grams}"
                )

        profile = await self._repository.find_by_user_id(command.user_id)
        if profile is None:
            raise ProfileNotFoundError(command.user_id)
        if not profile.onboarding_completed:
            raise OnboardingIncompleteError(command.user_id)

        targets = self._orchestrator.generate_manual_macros(
            CustomMacros(
                protein=command.protein,
                carbs=command.carbs,
                fats=command.fats,
            )
        )
        profile.update_target_macros(targets)
        await self._repository.save(profile)

        logger.info(
            "Target macros updated",
            user_id=command.user_id,
            calories=targets.calories,
        )
        return profile
