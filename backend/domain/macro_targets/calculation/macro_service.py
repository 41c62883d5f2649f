"""MacroService - macronutrient distribution and its inverse."""

import structlog

from ..core.ports.calculators import IMacroCalculator
from ..core.rounding import round_half_up
from ..core.value_objects.macro_targets import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroTargets,
)

logger = structlog.get_logger(__name__)

PROTEIN_G_PER_KG = 2.0
FAT_CALORIE_SHARE = 0.25


class MacroService(IMacroCalculator):
    """Calculate macronutrient distribution (auto mode).

    - Protein: 2.0 g per kg of body weight
    - Fat: 25% of calories, rounded to whole kcal before converting
    - Carbs: remaining calories, never below zero

    Rounding order matters: fat grams are derived from rounded fat
    calories, and carbs from the calories left after the rounded protein
    and fat grams. The 4/4/9 sum may differ from the target by a few kcal.
    """

    def calculate(self, calories_target: int, weight_kg: float) -> MacroTargets:
        """Calculate macro distribution.

        Example:
            >>> split = MacroService().calculate(2331, 80.0)
            >>> (split.protein, split.fats, split.carbs)
            (160, 65, 277)
        """
        protein_g = round_half_up(weight_kg * PROTEIN_G_PER_KG)
        protein_cal = protein_g * PROTEIN_KCAL_PER_G

        fat_cal = round_half_up(calories_target * FAT_CALORIE_SHARE)
        fat_g = round_half_up(fat_cal / FAT_KCAL_PER_G)

        carb_cal = calories_target - protein_cal - fat_g * FAT_KCAL_PER_G
        carbs_g = round_half_up(carb_cal / CARBS_KCAL_PER_G)

        if carbs_g < 0:
            logger.warning(
                "Calorie target too low for protein and fat, carbs clamped",
                calories_target=calories_target,
                weight_kg=weight_kg,
                carbs_g=carbs_g,
            )
            carbs_g = 0

        return MacroTargets(
            calories=calories_target,
            protein=protein_g,
            carbs=carbs_g,
            fats=fat_g,
        )


def calculate_calories_from_macros(
    protein: float, carbs: float, fats: float
) -> int:
    """Calories of a macro split: protein×4 + carbs×4 + fats×9, rounded.

    Example:
        >>> calculate_calories_from_macros(150, 200, 60)
        1940
    """
    return round_half_up(
        protein * PROTEIN_KCAL_PER_G
        + carbs * CARBS_KCAL_PER_G
        + fats * FAT_KCAL_PER_G
    )
