"""BiometricInput value object - body measurements as entered."""

from dataclasses import dataclass

from .sex import Sex
from .units import HeightUnit, WeightUnit


@dataclass(frozen=True)
class BiometricInput:
    """Biometric answers in the units the user chose.

    No range validation happens here: the calculators accept whatever the
    client sent and let the arithmetic run.

    Attributes:
        height_value: Height in centimeters, or total inches for FT
        height_unit: Unit of ``height_value``
        weight_value: Body weight in kilograms or pounds
        weight_unit: Unit of ``weight_value``
        age: Age in whole years
        sex: Sex answer
    """

    height_value: float
    height_unit: HeightUnit
    weight_value: float
    weight_unit: WeightUnit
    age: int
    sex: Sex
