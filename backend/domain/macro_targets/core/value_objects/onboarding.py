"""Onboarding value objects - answers collected by the onboarding flow.

Payloads come straight from the mobile client, so enumerated answers are
parsed leniently: an empty or unknown answer becomes the explicit
"unset" variant and the calculators apply their documented defaults.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..exceptions.domain_errors import InvalidUserDataError
from .activity_level import ActivityLevel
from .goal import Goal, GoalIntensity
from .sex import Sex
from .units import HeightUnit, WeightUnit


class MacrosSetup(str, Enum):
    """How the user wants daily targets produced."""

    AUTO = "auto"
    MANUAL = "manual"
    UNSET = ""

    @classmethod
    def parse(cls, value: Any) -> "MacrosSetup":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.UNSET


class _ClientModel(BaseModel):
    """Immutable model accepting both snake_case and camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class CustomMacros(_ClientModel):
    """Macro grams typed in by the user in manual mode."""

    protein: float = 0
    carbs: float = 0
    fats: float = 0


class UnitPreference(_ClientModel):
    """Display units the user picked."""

    weight: WeightUnit = WeightUnit.KG
    height: HeightUnit = HeightUnit.CM

    @field_validator("weight", mode="before")
    @classmethod
    def _parse_weight(cls, v: Any) -> WeightUnit:
        return WeightUnit.parse(v)

    @field_validator("height", mode="before")
    @classmethod
    def _parse_height(cls, v: Any) -> HeightUnit:
        return HeightUnit.parse(v)


class OnboardingData(_ClientModel):
    """Everything the onboarding flow collects.

    Either the birth date parts or ``age`` identify the user's age; the
    birth date wins when both are present.

    Example:
        >>> data = OnboardingData.model_validate({
        ...     "age": 30, "sex": "male", "height": 180, "heightUnit": "cm",
        ...     "weight": 80, "weightUnit": "kg", "activityLevel": "moderate",
        ...     "goal": "lose", "goalIntensity": "moderate",
        ... })
        >>> data.goal
        <Goal.LOSE: 'lose'>
    """

    name: str = ""
    birth_year: Optional[int] = None
    birth_month: Optional[int] = None
    birth_day: Optional[int] = None
    age: Optional[int] = None
    sex: Sex = Sex.UNSPECIFIED
    height: float = 0.0
    height_unit: HeightUnit = HeightUnit.CM
    weight: float = 0.0
    weight_unit: WeightUnit = WeightUnit.KG
    activity_level: Optional[ActivityLevel] = None
    goal: Optional[Goal] = None
    goal_intensity: Optional[GoalIntensity] = None
    diet_preference: str = ""
    allergies: List[str] = Field(default_factory=list)
    purpose: str = ""
    unit_preference: Optional[UnitPreference] = None
    macros_setup: MacrosSetup = MacrosSetup.UNSET
    custom_macros: Optional[CustomMacros] = None

    @field_validator("sex", mode="before")
    @classmethod
    def _parse_sex(cls, v: Any) -> Sex:
        return Sex.parse(v)

    @field_validator("height_unit", mode="before")
    @classmethod
    def _parse_height_unit(cls, v: Any) -> HeightUnit:
        return HeightUnit.parse(v)

    @field_validator("weight_unit", mode="before")
    @classmethod
    def _parse_weight_unit(cls, v: Any) -> WeightUnit:
        return WeightUnit.parse(v)

    @field_validator("activity_level", mode="before")
    @classmethod
    def _parse_activity_level(cls, v: Any) -> Optional[ActivityLevel]:
        return ActivityLevel.parse(v)

    @field_validator("goal", mode="before")
    @classmethod
    def _parse_goal(cls, v: Any) -> Optional[Goal]:
        return Goal.parse(v)

    @field_validator("goal_intensity", mode="before")
    @classmethod
    def _parse_goal_intensity(cls, v: Any) -> Optional[GoalIntensity]:
        return GoalIntensity.parse(v)

    @field_validator("macros_setup", mode="before")
    @classmethod
    def _parse_macros_setup(cls, v: Any) -> MacrosSetup:
        return MacrosSetup.parse(v)

    def has_birth_date(self) -> bool:
        """Whether all three birth date parts were answered."""
        return None not in (self.birth_year, self.birth_month, self.birth_day)

    def age_on(self, today: date) -> Optional[int]:
        """Age in whole years on ``today``.

        Uses the birth date when present (one year less if this year's
        birthday is still ahead), otherwise the answered ``age``.

        Returns:
            Optional[int]: None when neither was answered
        """
        if self.has_birth_date():
            return age_from_birth_date(
                self.birth_year,  # type: ignore[arg-type]
                self.birth_month,  # type: ignore[arg-type]
                self.birth_day,  # type: ignore[arg-type]
                today,
            )
        return self.age


def age_from_birth_date(year: int, month: int, day: int, today: date) -> int:
    """Calendar-aware age.

    Raises:
        InvalidUserDataError: If the parts do not form a real calendar date

    Example:
        >>> age_from_birth_date(1994, 6, 15, date(2024, 6, 14))
        29
        >>> age_from_birth_date(1994, 6, 15, date(2024, 6, 15))
        30
    """
    try:
        date(year, month, day)
    except ValueError as e:
        raise InvalidUserDataError(
            f"Invalid birth date {year}-{month:02d}-{day:02d}"
        ) from e

    age = today.year - year
    if (today.month, today.day) < (month, day):
        age -= 1
    return age
