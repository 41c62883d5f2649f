"""Calculator ports - interfaces for BMR/TDEE/goal/macro calculations."""

from abc import ABC, abstractmethod
from typing import Optional

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.biometrics import BiometricInput
from ..value_objects.bmr import BMR
from ..value_objects.goal import Goal, GoalIntensity
from ..value_objects.macro_targets import MacroTargets
from ..value_objects.sex import Sex
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, biometrics: BiometricInput) -> BMR:
        """Calculate BMR from biometric answers.

        Args:
            biometrics: Height, weight, age and sex as entered

        Returns:
            BMR: Basal metabolic rate (unrounded)
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(
        self, bmr: BMR, activity_level: Optional[ActivityLevel]
    ) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level, None if unanswered

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class IGoalAdjuster(ABC):
    """Port for turning maintenance calories into a goal target."""

    @abstractmethod
    def target_calories(
        self,
        tdee: TDEE,
        goal: Optional[Goal],
        intensity: Optional[GoalIntensity],
        sex: Sex,
    ) -> int:
        """Calculate the daily calorie target.

        Args:
            tdee: Maintenance calories
            goal: Nutritional goal, None if unanswered
            intensity: Goal intensity, None if unanswered
            sex: Selects the weight-loss safety floor

        Returns:
            int: Daily calorie target
        """
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution."""

    @abstractmethod
    def calculate(self, calories_target: int, weight_kg: float) -> MacroTargets:
        """Distribute calories into protein/carbs/fat grams.

        Args:
            calories_target: Daily calorie target
            weight_kg: Body weight in kg

        Returns:
            MacroTargets: Targets without ``base_tdee``
        """
        pass
