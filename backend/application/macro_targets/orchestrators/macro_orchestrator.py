"""MacroTargetsOrchestrator - coordinates the target calculators."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Union

import structlog

from domain.macro_targets.calculation.bmr_service import BMRService
from domain.macro_targets.calculation.goal_service import GoalAdjustmentService
from domain.macro_targets.calculation.macro_service import (
    MacroService,
    calculate_calories_from_macros,
)
from domain.macro_targets.calculation.tdee_service import TDEEService
from domain.macro_targets.calculation.unit_converter import weight_to_kg
from domain.macro_targets.core.exceptions.domain_errors import (
    InvalidUserDataError,
)
from domain.macro_targets.core.ports.calculators import (
    IBMRCalculator,
    IGoalAdjuster,
    IMacroCalculator,
    ITDEECalculator,
)
from domain.macro_targets.core.value_objects.activity_level import (
    ActivityLevel,
)
from domain.macro_targets.core.value_objects.biometrics import BiometricInput
from domain.macro_targets.core.value_objects.bmr import BMR
from domain.macro_targets.core.value_objects.goal import Goal, GoalIntensity
from domain.macro_targets.core.value_objects.macro_targets import MacroTargets
from domain.macro_targets.core.value_objects.onboarding import (
    CustomMacros,
    OnboardingData,
)
from domain.macro_targets.core.value_objects.sex import Sex
from domain.macro_targets.core.value_objects.tdee import TDEE
from domain.macro_targets.core.value_objects.units import HeightUnit, WeightUnit

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MacroCalculations:
    """Intermediate and final values of one auto calculation."""

    bmr: BMR
    tdee: TDEE
    targets: MacroTargets


class MacroTargetsOrchestrator:
    """
    Orchestrates calculation services for daily macro targets.

    Flow:
    1. Normalize height/weight to metric
    2. Calculate BMR (Mifflin-St Jeor)
    3. Calculate TDEE from BMR and activity level
    4. Apply goal/intensity adjustment and safety floor
    5. Distribute calories into protein/fat/carbs

    Every step is pure: the orchestrator keeps no state between calls.
    """

    def __init__(
        self,
        bmr_service: IBMRCalculator,
        tdee_service: ITDEECalculator,
        goal_service: IGoalAdjuster,
        macro_service: IMacroCalculator,
    ):
        self._bmr_service = bmr_service
        self._tdee_service = tdee_service
        self._goal_service = goal_service
        self._macro_service = macro_service

    def calculate(
        self,
        biometrics: BiometricInput,
        activity_level: Optional[ActivityLevel],
        goal: Optional[Goal],
        goal_intensity: Optional[GoalIntensity],
    ) -> MacroCalculations:
        """
        Run the full auto calculation.

        Args:
            biometrics: Height, weight, age and sex as entered
            activity_level: Activity level, None if unanswered
            goal: Goal, None if unanswered
            goal_intensity: Goal intensity, None if unanswered

        Returns:
            MacroCalculations with BMR, TDEE and final targets
        """
        bmr = self._bmr_service.calculate(biometrics)
        tdee = self._tdee_service.calculate(bmr, activity_level)
        calories_target = self._goal_service.target_calories(
            tdee, goal, goal_intensity, biometrics.sex
        )

        weight_kg = weight_to_kg(biometrics.weight_value, biometrics.weight_unit)
        split = self._macro_service.calculate(calories_target, weight_kg)

        targets = MacroTargets(
            calories=split.calories,
            protein=split.protein,
            carbs=split.carbs,
            fats=split.fats,
            base_tdee=tdee.rounded(),
        )

        logger.debug(
            "Macro targets calculated",
            bmr=bmr.value,
            tdee=tdee.value,
            goal=goal.value if goal else None,
            intensity=goal_intensity.value if goal_intensity else None,
            calories=targets.calories,
        )
        return MacroCalculations(bmr=bmr, tdee=tdee, targets=targets)

    def generate_daily_macros(
        self,
        onboarding_data: Union[OnboardingData, Mapping[str, Any]],
        today: Optional[date] = None,
    ) -> MacroTargets:
        """
        Daily targets from onboarding answers that include a birth date.

        Args:
            onboarding_data: Onboarding answers (model or raw payload)
            today: Day the age is computed for (defaults to today)

        Returns:
            MacroTargets including ``base_tdee``

        Raises:
            InvalidUserDataError: If the birth date was not answered or
                is not a real calendar date
        """
        data = _as_onboarding_data(onboarding_data)
        if not data.has_birth_date():
            raise InvalidUserDataError(
                "Birth date (year, month, day) is required"
            )

        age = data.age_on(today or date.today())
        biometrics = BiometricInput(
            height_value=data.height,
            height_unit=data.height_unit,
            weight_value=data.weight,
            weight_unit=data.weight_unit,
            age=age,  # type: ignore[arg-type]
            sex=data.sex,
        )
        return self.calculate(
            biometrics, data.activity_level, data.goal, data.goal_intensity
        ).targets

    def generate_daily_macros_from_age(
        self,
        age: int,
        sex: Any,
        height: float,
        height_unit: Any,
        weight: float,
        weight_unit: Any,
        activity_level: Any,
        goal: Any,
        goal_intensity: Any,
    ) -> MacroTargets:
        """
        Daily targets when the age is already known.

        Enumerated arguments accept enum members or raw answers; unknown
        answers fall back to the calculators' defaults.

        Example:
            >>> orchestrator = create_macro_orchestrator()
            >>> orchestrator.generate_daily_macros_from_age(
            ...     30, "male", 180, "cm", 80, "kg", "moderate", "lose", "moderate"
            ... )
            MacroTargets(calories=2207, protein=160, carbs=255, fats=61, base_tdee=2759)
        """
        biometrics = BiometricInput(
            height_value=height,
            height_unit=HeightUnit.parse(height_unit),
            weight_value=weight,
            weight_unit=WeightUnit.parse(weight_unit),
            age=age,
            sex=Sex.parse(sex),
        )
        return self.calculate(
            biometrics,
            ActivityLevel.parse(activity_level),
            Goal.parse(goal),
            GoalIntensity.parse(goal_intensity),
        ).targets

    def generate_manual_macros(
        self, custom_macros: Union[CustomMacros, Mapping[str, Any]]
    ) -> MacroTargets:
        """
        Targets from grams typed in by the user; calories are derived.

        Returns:
            MacroTargets without ``base_tdee``
        """
        macros = (
            custom_macros
            if isinstance(custom_macros, CustomMacros)
            else CustomMacros.model_validate(custom_macros)
        )
        return MacroTargets(
            calories=calculate_calories_from_macros(
                macros.protein, macros.carbs, macros.fats
            ),
            protein=macros.protein,
            carbs=macros.carbs,
            fats=macros.fats,
        )


def _as_onboarding_data(
    data: Union[OnboardingData, Mapping[str, Any]],
) -> OnboardingData:
    if isinstance(data, OnboardingData):
        return data
    return OnboardingData.model_validate(data)


def create_macro_orchestrator() -> MacroTargetsOrchestrator:
    """Build an orchestrator wired to the domain calculation services."""
    return MacroTargetsOrchestrator(
        bmr_service=BMRService(),
        tdee_service=TDEEService(),
        goal_service=GoalAdjustmentService(),
        macro_service=MacroService(),
    )


_default_orchestrator = create_macro_orchestrator()


def generate_daily_macros(
    onboarding_data: Union[OnboardingData, Mapping[str, Any]],
    today: Optional[date] = None,
) -> MacroTargets:
    """Daily targets from onboarding answers with a birth date.

    Unlike the other entry points this one can fail: a missing or
    impossible birth date raises InvalidUserDataError instead of
    producing a meaningless age.
    """
    return _default_orchestrator.generate_daily_macros(onboarding_data, today)


def generate_daily_macros_from_age(
    age: int,
    sex: Any,
    height: float,
    height_unit: Any,
    weight: float,
    weight_unit: Any,
    activity_level: Any,
    goal: Any,
    goal_intensity: Any,
) -> MacroTargets:
    """Daily targets when the age is already known."""
    return _default_orchestrator.generate_daily_macros_from_age(
        age,
        sex,
        height,
        height_unit,
        weight,
        weight_unit,
        activity_level,
        goal,
        goal_intensity,
    )


def generate_manual_macros(
    custom_macros: Union[CustomMacros, Mapping[str, Any]],
) -> MacroTargets:
    """Targets from manually entered grams."""
    return _default_orchestrator.generate_manual_macros(custom_macros)


__all__ = [
    "MacroCalculations",
    "MacroTargetsOrchestrator",
    "calculate_calories_from_macros",
    "create_macro_orchestrator",
    "generate_daily_macros",
    "generate_daily_macros_from_age",
    "generate_manual_macros",
]
