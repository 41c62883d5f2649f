"""Sex value object - drives the BMR offset and calorie floor."""

from enum import Enum
from typing import Any


class Sex(str, Enum):
    """Sex as answered during onboarding.

    Only MALE gets the male Mifflin-St Jeor offset and the 1500 kcal
    floor. FEMALE, OTHER and UNSPECIFIED share the female constants.
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNSPECIFIED = ""

    @classmethod
    def parse(cls, value: Any) -> "Sex":
        """Parse a raw answer, mapping unknown values to UNSPECIFIED.

        Example:
            >>> Sex.parse("male")
            <Sex.MALE: 'male'>
            >>> Sex.parse(None)
            <Sex.UNSPECIFIED: ''>
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.UNSPECIFIED

    def bmr_offset(self) -> float:
        """Mifflin-St Jeor sex constant (kcal/day)."""
        if self is Sex.MALE:
            return 5.0
        return -161.0

    def minimum_calories(self) -> int:
        """Lowest daily calorie target allowed while losing weight."""
        if self is Sex.MALE:
            return 1500
        return 1200
