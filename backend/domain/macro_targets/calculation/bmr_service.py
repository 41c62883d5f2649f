"""BMRService - Basal Metabolic Rate calculation."""

import structlog

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.biometrics import BiometricInput
from ..core.value_objects.bmr import BMR
from .unit_converter import height_to_cm, weight_to_kg

logger = structlog.get_logger(__name__)


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + s
        s = +5 for male, -161 for female, other and unanswered

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, biometrics: BiometricInput) -> BMR:
        """Calculate BMR from biometric answers.

        Heights and weights are normalized to metric first. The result is
        not rounded.

        Example:
            >>> service = BMRService()
            >>> bmr = service.calculate(BiometricInput(
            ...     height_value=180.0, height_unit=HeightUnit.CM,
            ...     weight_value=80.0, weight_unit=WeightUnit.KG,
            ...     age=30, sex=Sex.MALE,
            ... ))
            >>> bmr.value
            1780.0
        """
        weight_kg = weight_to_kg(biometrics.weight_value, biometrics.weight_unit)
        height_cm = height_to_cm(biometrics.height_value, biometrics.height_unit)

        base = 10 * weight_kg + 6.25 * height_cm - 5 * biometrics.age
        bmr_value = base + biometrics.sex.bmr_offset()

        logger.debug(
            "BMR calculated",
            weight_kg=weight_kg,
            height_cm=height_cm,
            age=biometrics.age,
            sex=biometrics.sex.value,
            bmr=bmr_value,
        )
        return BMR(value=bmr_value)
