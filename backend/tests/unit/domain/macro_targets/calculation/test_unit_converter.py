"""Unit tests for height/weight normalization."""

import pytest

from domain.macro_targets.calculation.unit_converter import (
    height_to_cm,
    weight_to_kg,
)
from domain.macro_targets.core.value_objects import HeightUnit, WeightUnit


class TestHeightToCm:
    def test_metric_is_identity(self):
        assert height_to_cm(180, "cm") == 180

    def test_imperial_value_is_total_inches(self):
        # 5'10" collapsed by the client into 70 inches
        assert height_to_cm(70, "ft") == pytest.approx(177.8)

    def test_accepts_enum(self):
        assert height_to_cm(70, HeightUnit.FT) == pytest.approx(177.8)

    def test_unknown_unit_is_metric(self):
        assert height_to_cm(180, "m") == 180
        assert height_to_cm(180, None) == 180

    @pytest.mark.parametrize("inches", [1.0, 59.5, 70.0, 84.25])
    def test_round_trip(self, inches):
        cm = height_to_cm(inches, "ft")
        assert height_to_cm(cm / 2.54, "ft") == pytest.approx(cm)
        assert height_to_cm(cm, "cm") == pytest.approx(cm)


class TestWeightToKg:
    def test_metric_is_identity(self):
        assert weight_to_kg(80, "kg") == 80

    def test_pounds(self):
        assert weight_to_kg(176, "lbs") == pytest.approx(79.832192)
        assert weight_to_kg(176, WeightUnit.LBS) == pytest.approx(79.832192)

    def test_unknown_unit_is_metric(self):
        assert weight_to_kg(80, "stone") == 80
