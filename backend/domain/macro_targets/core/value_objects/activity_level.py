"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Any, Optional

DEFAULT_PAL_MULTIPLIER = 1.2


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    - SEDENTARY: Little to no exercise
    - LIGHTLY: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - VERY: Hard exercise 6-7 days/week
    """

    SEDENTARY = "sedentary"
    LIGHTLY = "lightly"
    MODERATE = "moderate"
    VERY = "very"

    @classmethod
    def parse(cls, value: Any) -> Optional["ActivityLevel"]:
        """Parse a raw answer.

        Returns:
            Optional[ActivityLevel]: None when the answer is empty or unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    def pal_multiplier(self) -> float:
        """Get PAL multiplier.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHTLY: 1.375,
            ActivityLevel.MODERATE: 1.55,
            ActivityLevel.VERY: 1.725,
        }
        return multipliers[self]

    def description(self) -> str:
        """Get human-readable description."""
        descriptions = {
            ActivityLevel.SEDENTARY: "Little to no exercise",
            ActivityLevel.LIGHTLY: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
            ActivityLevel.VERY: "Hard exercise 6-7 days/week",
        }
        return descriptions[self]


def pal_multiplier_for(activity_level: Optional[ActivityLevel]) -> float:
    """PAL multiplier for a possibly missing activity level.

    Missing levels count as sedentary.
    """
    if activity_level is None:
        return DEFAULT_PAL_MULTIPLIER
    return activity_level.pal_multiplier()
