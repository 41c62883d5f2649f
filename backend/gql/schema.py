"""Main GraphQL schema for the macro targets backend.

Operations are grouped by domain namespace:

    query { macroTargets { ... } userProfile { ... } dailyLog { ... } }
    mutation { userProfile { ... } dailyLog { ... } }

Usage:
    from gql.schema import create_schema
    schema = create_schema()
"""

import strawberry

from gql.resolvers.daily_log import DailyLogMutations, DailyLogQueries
from gql.resolvers.macro_targets import MacroTargetsQueries
from gql.resolvers.user_profile import UserProfileMutations, UserProfileQueries


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Macro target calculations")  # type: ignore[misc]
    def macro_targets(self) -> MacroTargetsQueries:
        """Macro target calculations.

        Example:
            query {
              macroTargets {
                caloriesFromMacros(protein: 150, carbs: 200, fats: 60)
              }
            }
        """
        return MacroTargetsQueries()

    @strawberry.field(description="User profile queries")  # type: ignore[misc]
    def user_profile(self) -> UserProfileQueries:
        return UserProfileQueries()

    @strawberry.field(description="Daily macro log queries")  # type: ignore[misc]
    def daily_log(self) -> DailyLogQueries:
        return DailyLogQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="User profile mutations")  # type: ignore[misc]
    def user_profile(self) -> UserProfileMutations:
        """User profile mutations.

        Example:
            mutation {
              userProfile {
                recordLogin(userId: "user123") { lastLoginAt }
              }
            }
        """
        return UserProfileMutations()

    @strawberry.field(description="Daily macro log mutations")  # type: ignore[misc]
    def daily_log(self) -> DailyLogMutations:
        return DailyLogMutations()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all domain namespaces."""
    return strawberry.Schema(query=Query, mutation=Mutation)
