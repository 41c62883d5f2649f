"""Measurement unit value objects - height and weight units."""

from enum import Enum
from typing import Any

CM_PER_INCH = 2.54
KG_PER_LB = 0.453592


class HeightUnit(str, Enum):
    """Unit a height value was entered in.

    - CM: centimeters
    - FT: imperial; the value is the total height in inches
      (feet and inches already collapsed by the client)
    """

    CM = "cm"
    FT = "ft"

    @classmethod
    def parse(cls, value: Any) -> "HeightUnit":
        """Parse a raw unit tag, treating anything but 'ft' as metric.

        Example:
            >>> HeightUnit.parse("ft")
            <HeightUnit.FT: 'ft'>
            >>> HeightUnit.parse("furlongs")
            <HeightUnit.CM: 'cm'>
        """
        if isinstance(value, cls):
            return value
        if value == cls.FT.value:
            return cls.FT
        return cls.CM

    def to_cm(self, value: float) -> float:
        """Convert a height in this unit to centimeters."""
        if self is HeightUnit.FT:
            return value * CM_PER_INCH
        return value


class WeightUnit(str, Enum):
    """Unit a body weight value was entered in."""

    KG = "kg"
    LBS = "lbs"

    @classmethod
    def parse(cls, value: Any) -> "WeightUnit":
        """Parse a raw unit tag, treating anything but 'lbs' as metric."""
        if isinstance(value, cls):
            return value
        if value == cls.LBS.value:
            return cls.LBS
        return cls.KG

    def to_kg(self, value: float) -> float:
        """Convert a weight in this unit to kilograms."""
        if self is WeightUnit.LBS:
            return value * KG_PER_LB
        return value
