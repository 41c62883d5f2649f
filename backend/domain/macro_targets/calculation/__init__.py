"""Calculation services for macro targets."""

from .bmr_service import BMRService
from .goal_service import GoalAdjustmentService
from .macro_service import MacroService, calculate_calories_from_macros
from .tdee_service import TDEEService
from .unit_converter import height_to_cm, weight_to_kg

__all__ = [
    "BMRService",
    "TDEEService",
    "GoalAdjustmentService",
    "MacroService",
    "calculate_calories_from_macros",
    "height_to_cm",
    "weight_to_kg",
]
