"""Goal value objects - nutritional objective and its intensity."""

from enum import Enum
from typing import Any, Optional

from ..rounding import round_half_up


class GoalIntensity(str, Enum):
    """How far the calorie target moves away from maintenance."""

    MILD = "mild"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"

    @classmethod
    def parse(cls, value: Any) -> Optional["GoalIntensity"]:
        """Parse a raw answer, returning None when empty or unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Goal(str, Enum):
    """User's nutritional goal determining calorie adjustment.

    - LOSE: calorie deficit proportional to TDEE (10/20/25%)
    - MAINTAIN: TDEE regardless of intensity
    - BUILD: fixed surplus on top of TDEE (+200/+350/+500 kcal)
    """

    LOSE = "lose"
    MAINTAIN = "maintain"
    BUILD = "build"

    @classmethod
    def parse(cls, value: Any) -> Optional["Goal"]:
        """Parse a raw answer, returning None when empty or unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    def adjust_calories(self, tdee: float, intensity: GoalIntensity) -> int:
        """Apply the goal/intensity adjustment to TDEE.

        Args:
            tdee: Total Daily Energy Expenditure (kcal/day)
            intensity: Goal intensity

        Returns:
            int: Adjusted calories, rounded half up (no safety floor)

        Example:
            >>> Goal.LOSE.adjust_calories(2914.0, GoalIntensity.MODERATE)
            2331
            >>> Goal.BUILD.adjust_calories(2914.0, GoalIntensity.AGGRESSIVE)
            3414
        """
        if self is Goal.LOSE:
            factors = {
                GoalIntensity.MILD: 0.90,  # 10% deficit
                GoalIntensity.MODERATE: 0.80,  # 20% deficit
                GoalIntensity.AGGRESSIVE: 0.75,  # 25% deficit
            }
            return round_half_up(tdee * factors[intensity])

        if self is Goal.BUILD:
            surpluses = {
                GoalIntensity.MILD: 200,
                GoalIntensity.MODERATE: 350,
                GoalIntensity.AGGRESSIVE: 500,
            }
            return round_half_up(tdee + surpluses[intensity])

        return round_half_up(tdee)

    def has_calorie_floor(self) -> bool:
        """Whether the safety floor applies to this goal."""
        return self is Goal.LOSE
