"""Value objects for the macro targets domain."""

from .activity_level import ActivityLevel
from .biometrics import BiometricInput
from .bmr import BMR
from .goal import Goal, GoalIntensity
from .macro_amounts import MacroAmounts
from .macro_targets import MacroTargets
from .onboarding import CustomMacros, MacrosSetup, OnboardingData, UnitPreference
from .sex import Sex
from .tdee import TDEE
from .units import HeightUnit, WeightUnit

__all__ = [
    "ActivityLevel",
    "BiometricInput",
    "BMR",
    "CustomMacros",
    "Goal",
    "GoalIntensity",
    "HeightUnit",
    "MacroAmounts",
    "MacroTargets",
    "MacrosSetup",
    "OnboardingData",
    "Sex",
    "TDEE",
    "UnitPreference",
    "WeightUnit",
]
