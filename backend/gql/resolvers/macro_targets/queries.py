"""Query resolvers for macro target calculation.

Calculations are pure, so every operation is a query:
- dailyMacros: targets from onboarding answers with a birth date
- dailyMacrosFromAge: targets when the age is known
- manualMacros: targets from hand-picked grams
- caloriesFromMacros: 4/4/9 calories of a gram split
"""

from datetime import date as date_type
from typing import Optional

import strawberry

from application.macro_targets.orchestrators.macro_orchestrator import (
    calculate_calories_from_macros,
)
from gql.types_macro_targets import (
    CustomMacrosInput,
    DailyMacrosFromAgeInput,
    MacroTargetsType,
    OnboardingInput,
    custom_macros_input_to_domain,
    map_macro_targets_to_graphql,
    onboarding_input_to_domain,
)


def _get_orchestrator(info: strawberry.types.Info):
    orchestrator = info.context.get("macro_orchestrator")
    if not orchestrator:
        raise Exception("Missing macro_orchestrator in GraphQL context")
    return orchestrator


@strawberry.type
class MacroTargetsQueries:
    """GraphQL queries for macro target calculation."""

    @strawberry.field
    def daily_macros(
        self,
        info: strawberry.types.Info,
        input: OnboardingInput,
        today: Optional[date_type] = None,
    ) -> MacroTargetsType:
        """Daily targets from onboarding answers.

        Birth year, month and day are required; age is derived from them
        on ``today`` (defaults to the server's date).

        Example:
            query {
              macroTargets {
                dailyMacros(input: {
                  birthYear: 1994, birthMonth: 6, birthDay: 15
                  sex: MALE, height: 180, weight: 80
                  activityLevel: MODERATE, goal: LOSE, goalIntensity: MODERATE
                }) { calories protein carbs fats baseTDEE }
              }
            }
        """
        orchestrator = _get_orchestrator(info)
        targets = orchestrator.generate_daily_macros(
            onboarding_input_to_domain(input), today
        )
        return map_macro_targets_to_graphql(targets)

    @strawberry.field
    def daily_macros_from_age(
        self, info: strawberry.types.Info, input: DailyMacrosFromAgeInput
    ) -> MacroTargetsType:
        """Daily targets when the age is already known."""
        orchestrator = _get_orchestrator(info)
        targets = orchestrator.generate_daily_macros_from_age(
            age=input.age,
            sex=input.sex.value if input.sex else None,
            height=input.height,
            height_unit=input.height_unit.value,
            weight=input.weight,
            weight_unit=input.weight_unit.value,
            activity_level=(
                input.activity_level.value if input.activity_level else None
            ),
            goal=input.goal.value if input.goal else None,
            goal_intensity=(
                input.goal_intensity.value if input.goal_intensity else None
            ),
        )
        return map_macro_targets_to_graphql(targets)

    @strawberry.field
    def manual_macros(
        self, info: strawberry.types.Info, input: CustomMacrosInput
    ) -> MacroTargetsType:
        """Targets from grams typed in by the user (no baseTDEE)."""
        orchestrator = _get_orchestrator(info)
        targets = orchestrator.generate_manual_macros(
            custom_macros_input_to_domain(input)
        )
        return map_macro_targets_to_graphql(targets)

    @strawberry.field
    def calories_from_macros(self, protein: int, carbs: int, fats: int) -> int:
        """Calories of a gram split (protein*4 + carbs*4 + fats*9)."""
        return calculate_calories_from_macros(protein, carbs, fats)
