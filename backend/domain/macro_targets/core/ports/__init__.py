"""Ports for the macro targets domain."""

from .calculators import (
    IBMRCalculator,
    IGoalAdjuster,
    IMacroCalculator,
    ITDEECalculator,
)
from .repository import IDailyLogRepository, IUserProfileRepository

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IGoalAdjuster",
    "IMacroCalculator",
    "IUserProfileRepository",
    "IDailyLogRepository",
]
