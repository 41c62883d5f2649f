"""GraphQL types for macro target calculation.

Enumerated onboarding answers are exposed as GraphQL enums; an answer the
user skipped is simply omitted (null) and the calculators fall back to
their defaults.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

import strawberry

from domain.macro_targets.core.value_objects.macro_targets import MacroTargets
from domain.macro_targets.core.value_objects.onboarding import (
    CustomMacros,
    OnboardingData,
)


__all__ = [
    # Enums
    "SexEnum",
    "HeightUnitEnum",
    "WeightUnitEnum",
    "ActivityLevelEnum",
    "GoalEnum",
    "GoalIntensityEnum",
    "MacrosSetupEnum",
    # Output types
    "MacroTargetsType",
    # Input types
    "CustomMacrosInput",
    "UnitPreferenceInput",
    "OnboardingInput",
    "DailyMacrosFromAgeInput",
    # Mappers
    "map_macro_targets_to_graphql",
    "onboarding_input_to_domain",
    "custom_macros_input_to_domain",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class SexEnum(str, Enum):
    """Sex used to pick the BMR constant and the calorie floor."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"  # Female constants apply


@strawberry.enum
class HeightUnitEnum(str, Enum):
    CM = "cm"
    FT = "ft"  # Value is in inches despite the name


@strawberry.enum
class WeightUnitEnum(str, Enum):
    KG = "kg"
    LBS = "lbs"


@strawberry.enum
class ActivityLevelEnum(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation."""

    SEDENTARY = "sedentary"  # x1.2
    LIGHTLY = "lightly"  # x1.375
    MODERATE = "moderate"  # x1.55
    VERY = "very"  # x1.725


@strawberry.enum
class GoalEnum(str, Enum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    BUILD = "build"


@strawberry.enum
class GoalIntensityEnum(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


@strawberry.enum
class MacrosSetupEnum(str, Enum):
    """How daily targets are produced at the end of onboarding."""

    AUTO = "auto"
    MANUAL = "manual"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class MacroTargetsType:
    """Daily calorie and macro targets (kcal and grams)."""

    calories: int
    protein: float
    carbs: float
    fats: float
    base_tdee: Optional[int] = strawberry.field(
        default=None,
        name="baseTDEE",
        description="Maintenance calories, only set for automatic targets",
    )


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class CustomMacrosInput:
    """Macro grams chosen by the user."""

    protein: float = 0
    carbs: float = 0
    fats: float = 0


@strawberry.input
class UnitPreferenceInput:
    weight: WeightUnitEnum = WeightUnitEnum.KG
    height: HeightUnitEnum = HeightUnitEnum.CM


@strawberry.input
class OnboardingInput:
    """Answers collected by the onboarding flow."""

    name: str = ""
    birth_year: Optional[int] = None
    birth_month: Optional[int] = None
    birth_day: Optional[int] = None
    age: Optional[int] = None
    sex: Optional[SexEnum] = None
    height: float = 0.0
    height_unit: HeightUnitEnum = HeightUnitEnum.CM
    weight: float = 0.0
    weight_unit: WeightUnitEnum = WeightUnitEnum.KG
    activity_level: Optional[ActivityLevelEnum] = None
    goal: Optional[GoalEnum] = None
    goal_intensity: Optional[GoalIntensityEnum] = None
    diet_preference: str = ""
    allergies: List[str] = strawberry.field(default_factory=list)
    purpose: str = ""
    unit_preference: Optional[UnitPreferenceInput] = None
    macros_setup: Optional[MacrosSetupEnum] = None
    custom_macros: Optional[CustomMacrosInput] = None


@strawberry.input
class DailyMacrosFromAgeInput:
    """Biometrics and goal when the age is already known."""

    age: int
    height: float
    weight: float
    sex: Optional[SexEnum] = None
    height_unit: HeightUnitEnum = HeightUnitEnum.CM
    weight_unit: WeightUnitEnum = WeightUnitEnum.KG
    activity_level: Optional[ActivityLevelEnum] = None
    goal: Optional[GoalEnum] = None
    goal_intensity: Optional[GoalIntensityEnum] = None


# ============================================
# MAPPERS
# ============================================


def _value(member: Optional[Enum]) -> Optional[str]:
    return member.value if member is not None else None


def map_macro_targets_to_graphql(
    targets: Optional[MacroTargets],
) -> Optional[MacroTargetsType]:
    """Map domain MacroTargets to GraphQL MacroTargetsType."""
    if targets is None:
        return None
    return MacroTargetsType(
        calories=targets.calories,
        protein=targets.protein,
        carbs=targets.carbs,
        fats=targets.fats,
        base_tdee=targets.base_tdee,
    )


def custom_macros_input_to_domain(value: CustomMacrosInput) -> CustomMacros:
    return CustomMacros(protein=value.protein, carbs=value.carbs, fats=value.fats)


def onboarding_input_to_domain(value: OnboardingInput) -> OnboardingData:
    """Map GraphQL OnboardingInput to domain OnboardingData."""
    payload = {
        "name": value.name,
        "birth_year": value.birth_year,
        "birth_month": value.birth_month,
        "birth_day": value.birth_day,
        "age": value.age,
        "sex": _value(value.sex),
        "height": value.height,
        "height_unit": value.height_unit.value,
        "weight": value.weight,
        "weight_unit": value.weight_unit.value,
        "activity_level": _value(value.activity_level),
        "goal": _value(value.goal),
        "goal_intensity": _value(value.goal_intensity),
        "diet_preference": value.diet_preference,
        "allergies": list(value.allergies),
        "purpose": value.purpose,
        "macros_setup": _value(value.macros_setup),
    }
    if value.unit_preference is not None:
        payload["unit_preference"] = {
            "weight": value.unit_preference.weight.value,
            "height": value.unit_preference.height.value,
        }
    if value.custom_macros is not None:
        payload["custom_macros"] = custom_macros_input_to_domain(
            value.custom_macros
        )
    return OnboardingData.model_validate(payload)
