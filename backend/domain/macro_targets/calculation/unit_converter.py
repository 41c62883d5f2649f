"""Height and weight normalization to metric."""

from typing import Any

from ..core.value_objects.units import HeightUnit, WeightUnit


def height_to_cm(value: float, unit: Any) -> float:
    """Convert a height to centimeters.

    ``unit`` may be a HeightUnit or a raw tag; anything that is not the
    imperial tag is treated as already metric. An imperial value is the
    total height in inches.

    Example:
        >>> height_to_cm(70, "ft")
        177.8
        >>> height_to_cm(180, "cm")
        180
    """
    return HeightUnit.parse(unit).to_cm(value)


def weight_to_kg(value: float, unit: Any) -> float:
    """Convert a body weight to kilograms.

    Example:
        >>> round(weight_to_kg(176, "lbs"), 2)
        79.83
    """
    return WeightUnit.parse(unit).to_kg(value)
