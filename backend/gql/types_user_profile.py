"""GraphQL types for user profiles and onboarding."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

import strawberry

from domain.macro_targets.core.entities.user_profile import UserProfile
from domain.macro_targets.core.value_objects.onboarding import OnboardingData

from gql.types_macro_targets import (
    ActivityLevelEnum,
    GoalEnum,
    GoalIntensityEnum,
    HeightUnitEnum,
    MacrosSetupEnum,
    MacroTargetsType,
    SexEnum,
    WeightUnitEnum,
    map_macro_targets_to_graphql,
)


__all__ = [
    "CustomMacrosType",
    "OnboardingDataType",
    "UserProfileType",
    "map_onboarding_data_to_graphql",
    "map_profile_to_graphql",
]


@strawberry.type
class CustomMacrosType:
    protein: float
    carbs: float
    fats: float


@strawberry.type
class OnboardingDataType:
    """Stored onboarding answers. Skipped answers are null."""

    name: str
    birth_year: Optional[int]
    birth_month: Optional[int]
    birth_day: Optional[int]
    age: Optional[int]
    sex: Optional[SexEnum]
    height: float
    height_unit: HeightUnitEnum
    weight: float
    weight_unit: WeightUnitEnum
    activity_level: Optional[ActivityLevelEnum]
    goal: Optional[GoalEnum]
    goal_intensity: Optional[GoalIntensityEnum]
    diet_preference: str
    allergies: List[str]
    purpose: str
    macros_setup: Optional[MacrosSetupEnum]
    custom_macros: Optional[CustomMacrosType]


@strawberry.type
class UserProfileType:
    """User profile with onboarding status, targets and streak."""

    user_id: str
    onboarding_completed: bool
    onboarding_data: Optional[OnboardingDataType]
    target_macros: Optional[MacroTargetsType]
    streak: int
    last_meal_log_date: Optional[date]
    created_at: datetime
    updated_at: datetime
    last_login_at: Optional[datetime]


def map_onboarding_data_to_graphql(data: OnboardingData) -> OnboardingDataType:
    """Map domain OnboardingData to GraphQL OnboardingDataType."""
    return OnboardingDataType(
        name=data.name,
        birth_year=data.birth_year,
        birth_month=data.birth_month,
        birth_day=data.birth_day,
        age=data.age,
        # Empty answers ("" members) become null
        sex=SexEnum(data.sex.value) if data.sex.value else None,
        height=data.height,
        height_unit=HeightUnitEnum(data.height_unit.value),
        weight=data.weight,
        weight_unit=WeightUnitEnum(data.weight_unit.value),
        activity_level=(
            ActivityLevelEnum(data.activity_level.value)
            if data.activity_level
            else None
        ),
        goal=GoalEnum(data.goal.value) if data.goal else None,
        goal_intensity=(
            GoalIntensityEnum(data.goal_intensity.value)
            if data.goal_intensity
            else None
        ),
        diet_preference=data.diet_preference,
        allergies=list(data.allergies),
        purpose=data.purpose,
        macros_setup=(
            MacrosSetupEnum(data.macros_setup.value)
            if data.macros_setup.value
            else None
        ),
        custom_macros=(
            CustomMacrosType(
                protein=data.custom_macros.protein,
                carbs=data.custom_macros.carbs,
                fats=data.custom_macros.fats,
            )
            if data.custom_macros
            else None
        ),
    )


def map_profile_to_graphql(profile: UserProfile) -> UserProfileType:
    """Map domain UserProfile to GraphQL UserProfileType."""
    return UserProfileType(
        user_id=profile.user_id,
        onboarding_completed=profile.onboarding_completed,
        onboarding_data=(
            map_onboarding_data_to_graphql(profile.onboarding_data)
            if profile.onboarding_data
            else None
        ),
        target_macros=map_macro_targets_to_graphql(profile.target_macros),
        streak=profile.streak,
        last_meal_log_date=profile.last_meal_log_date,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
        last_login_at=profile.last_login_at,
    )
