"""Unit tests for BMRService."""

import pytest

from domain.macro_targets.calculation.bmr_service import BMRService
from domain.macro_targets.core.value_objects import (
    BiometricInput,
    HeightUnit,
    Sex,
    WeightUnit,
)


def _biometrics(
    sex: Sex = Sex.MALE,
    height: float = 180.0,
    height_unit: HeightUnit = HeightUnit.CM,
    weight: float = 80.0,
    weight_unit: WeightUnit = WeightUnit.KG,
    age: int = 30,
) -> BiometricInput:
    return BiometricInput(
        height_value=height,
        height_unit=height_unit,
        weight_value=weight,
        weight_unit=weight_unit,
        age=age,
        sex=sex,
    )


class TestBMRService:
    """Test BMR calculation using Mifflin-St Jeor equation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMRService()

    def test_calculate_bmr_male(self):
        """10*80 + 6.25*180 - 5*30 + 5 = 1780."""
        bmr = self.service.calculate(_biometrics())
        assert bmr.value == pytest.approx(1780.0)

    def test_calculate_bmr_female(self):
        """10*60 + 6.25*165 - 5*25 - 161 = 1345.25."""
        bmr = self.service.calculate(
            _biometrics(sex=Sex.FEMALE, height=165.0, weight=60.0, age=25)
        )
        assert bmr.value == pytest.approx(1345.25)

    def test_other_and_unspecified_use_female_offset(self):
        female = self.service.calculate(_biometrics(sex=Sex.FEMALE))
        other = self.service.calculate(_biometrics(sex=Sex.OTHER))
        unspecified = self.service.calculate(_biometrics(sex=Sex.UNSPECIFIED))

        assert other.value == female.value
        assert unspecified.value == female.value

    def test_male_female_difference_is_166(self):
        male = self.service.calculate(_biometrics(sex=Sex.MALE))
        female = self.service.calculate(_biometrics(sex=Sex.FEMALE))

        assert male.value - female.value == pytest.approx(166.0)

    def test_imperial_units_are_converted(self):
        bmr = self.service.calculate(
            _biometrics(
                height=70.0,
                height_unit=HeightUnit.FT,
                weight=176.0,
                weight_unit=WeightUnit.LBS,
            )
        )
        expected = 10 * 176 * 0.453592 + 6.25 * 70 * 2.54 - 5 * 30 + 5
        assert bmr.value == pytest.approx(expected)

    def test_bmr_is_not_rounded(self):
        bmr = self.service.calculate(_biometrics(height=180.1))
        assert bmr.value == pytest.approx(1780.625)

    def test_negative_inputs_are_not_rejected(self):
        bmr = self.service.calculate(_biometrics(weight=-10.0, height=0.0))
        assert bmr.value == pytest.approx(-100 - 150 + 5)
