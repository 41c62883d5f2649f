"""MacroTargets value object - daily calorie and macro targets."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


@dataclass(frozen=True)
class MacroTargets:
    """Daily calorie target and macronutrient grams.

    ``calories`` is not forced to equal the 4/4/9 sum of the grams:
    intermediate rounding leaves a drift of a few kcal, and stored targets
    keep that drift.

    Attributes:
        calories: Daily calorie target (kcal)
        protein: Protein grams (whole grams for automatic targets)
        carbs: Carbohydrate grams
        fats: Fat grams
        base_tdee: Maintenance calories before goal adjustment; None for
            manually entered macros
    """

    calories: int
    protein: float
    carbs: float
    fats: float
    base_tdee: Optional[int] = None

    def calories_from_macros(self) -> float:
        """Energy of the gram split (protein×4 + carbs×4 + fats×9)."""
        return (
            self.protein * PROTEIN_KCAL_PER_G
            + self.carbs * CARBS_KCAL_PER_G
            + self.fats * FAT_KCAL_PER_G
        )

    def rounding_drift(self) -> float:
        """Difference between the gram split energy and ``calories``."""
        return self.calories_from_macros() - self.calories

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored profile shape (camelCase baseTDEE)."""
        data: Dict[str, Any] = {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
        }
        if self.base_tdee is not None:
            data["baseTDEE"] = self.base_tdee
        return data

    def __str__(self) -> str:
        return (
            f"{self.calories} kcal ({self.protein}P / {self.carbs}C / "
            f"{self.fats}F)"
        )
