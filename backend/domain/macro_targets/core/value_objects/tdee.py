"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass

from ..rounding import round_half_up


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × PAL (Physical Activity Level).
    This is the maintenance calorie level shown next to the goal target.

    Attributes:
        value: TDEE in kcal/day (unrounded)
    """

    value: float

    def rounded(self) -> int:
        """Maintenance calories as a whole number (half up)."""
        return round_half_up(self.value)

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"

    def __repr__(self) -> str:
        return f"TDEE(value={self.value})"
