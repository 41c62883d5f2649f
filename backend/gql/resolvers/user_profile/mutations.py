"""Mutation resolvers for user profiles.

These resolvers execute CQRS commands using Command Handlers:
- completeOnboarding: Store answers and derive targets
- resetOnboarding: Send the user back through onboarding
- recordLogin: Track the last login (creates the profile)
- updateTargetMacros: Replace targets with hand-picked grams
"""

import strawberry

from application.user_profile.commands.complete_onboarding import (
    CompleteOnboardingCommand,
    CompleteOnboardingHandler,
)
from application.user_profile.commands.record_login import (
    RecordLoginCommand,
    RecordLoginHandler,
)
from application.user_profile.commands.reset_onboarding import (
    ResetOnboardingCommand,
    ResetOnboardingHandler,
)
from application.user_profile.commands.update_target_macros import (
    UpdateTargetMacrosCommand,
    UpdateTargetMacrosHandler,
)
from gql.types_macro_targets import (
    CustomMacrosInput,
    OnboardingInput,
    onboarding_input_to_domain,
)
from gql.types_user_profile import UserProfileType, map_profile_to_graphql


def _get_repository(info: strawberry.types.Info):
    repository = info.context.get("profile_repository")
    if not repository:
        raise Exception("Missing profile_repository in GraphQL context")
    return repository


def _get_orchestrator(info: strawberry.types.Info):
    orchestrator = info.context.get("macro_orchestrator")
    if not orchestrator:
        raise Exception("Missing macro_orchestrator in GraphQL context")
    return orchestrator


@strawberry.type
class UserProfileMutations:
    """Mutations for user profile operations."""

    @strawberry.mutation
    async def complete_onboarding(
        self, info: strawberry.types.Info, user_id: str, input: OnboardingInput
    ) -> UserProfileType:
        """Finish onboarding.

        Targets depend on ``macrosSetup``: AUTO runs the BMR/TDEE
        formulas, MANUAL derives calories from ``customMacros``, and
        no value keeps the current targets.

        Example:
            mutation {
              userProfile {
                completeOnboarding(userId: "user123", input: {
                  age: 30, sex: MALE, height: 180, weight: 80
                  activityLevel: MODERATE, goal: LOSE, goalIntensity: MODERATE
                  macrosSetup: AUTO
                }) {
                  onboardingCompleted
                  targetMacros { calories protein carbs fats }
                }
              }
            }
        """
        handler = CompleteOnboardingHandler(
            orchestrator=_get_orchestrator(info),
            repository=_get_repository(info),
        )
        profile = await handler.handle(
            CompleteOnboardingCommand(
                user_id=user_id,
                onboarding_data=onboarding_input_to_domain(input),
            )
        )
        return map_profile_to_graphql(profile)

    @strawberry.mutation
    async def reset_onboarding(
        self, info: strawberry.types.Info, user_id: str
    ) -> UserProfileType:
        handler = ResetOnboardingHandler(_get_repository(info))
        profile = await handler.handle(ResetOnboardingCommand(user_id=user_id))
        return map_profile_to_graphql(profile)

    @strawberry.mutation
    async def record_login(
        self, info: strawberry.types.Info, user_id: str
    ) -> UserProfileType:
        handler = RecordLoginHandler(_get_repository(info))
        profile = await handler.handle(RecordLoginCommand(user_id=user_id))
        return map_profile_to_graphql(profile)

    @strawberry.mutation
    async def update_target_macros(
        self, info: strawberry.types.Info, user_id: str, input: CustomMacrosInput
    ) -> UserProfileType:
        """Replace targets; calories are recomputed from the grams."""
        handler = UpdateTargetMacrosHandler(
            orchestrator=_get_orchestrator(info),
            repository=_get_repository(info),
        )
        profile = await handler.handle(
            UpdateTargetMacrosCommand(
                user_id=user_id,
                protein=input.protein,
                carbs=input.carbs,
                fats=input.fats,
            )
        )
        return map_profile_to_graphql(profile)
