"""MacroAmounts value object - energy and macros eaten or undone."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroAmounts:
    """Calories and macro grams added to or removed from a daily log.

    Fields left out count as zero.
    """

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0

    def __str__(self) -> str:
        return (
            f"{self.calories:g} kcal ({self.protein:g}P / {self.carbs:g}C / "
            f"{self.fats:g}F)"
        )
