"""Query resolvers for user profiles.

- profile: Get a user's profile
- hasCompletedOnboarding: Whether onboarding finished
"""

from typing import Optional

import strawberry

from application.user_profile.queries.get_profile import (
    GetProfileQuery,
    GetProfileQueryHandler,
)
from gql.types_user_profile import UserProfileType, map_profile_to_graphql


def _get_handler(info: strawberry.types.Info) -> GetProfileQueryHandler:
    repository = info.context.get("profile_repository")
    if not repository:
        raise Exception("Missing profile_repository in GraphQL context")
    return GetProfileQueryHandler(repository)


@strawberry.type
class UserProfileQueries:
    """GraphQL queries for user profiles."""

    @strawberry.field
    async def profile(
        self, info: strawberry.types.Info, user_id: str
    ) -> Optional[UserProfileType]:
        """Get profile by user ID.

        Example:
            query {
              userProfile {
                profile(userId: "user123") {
                  onboardingCompleted
                  streak
                  targetMacros { calories protein carbs fats baseTDEE }
                }
              }
            }
        """
        profile = await _get_handler(info).handle(GetProfileQuery(user_id))
        if profile:
            return map_profile_to_graphql(profile)
        return None

    @strawberry.field
    async def has_completed_onboarding(
        self, info: strawberry.types.Info, user_id: str
    ) -> bool:
        return await _get_handler(info).has_completed_onboarding(
            GetProfileQuery(user_id)
        )
