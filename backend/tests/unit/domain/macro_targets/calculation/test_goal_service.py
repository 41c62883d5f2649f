"""Unit tests for GoalAdjustmentService."""

import pytest

from domain.macro_targets.calculation.goal_service import GoalAdjustmentService
from domain.macro_targets.core.value_objects import (
    TDEE,
    Goal,
    GoalIntensity,
    Sex,
)


class TestGoalAdjustmentService:
    """Test goal adjustment and weight-loss safety floor."""

    def setup_method(self):
        self.service = GoalAdjustmentService()

    def test_lose_moderate(self):
        target = self.service.target_calories(
            TDEE(2914.0), Goal.LOSE, GoalIntensity.MODERATE, Sex.MALE
        )
        assert target == 2331

    def test_build_aggressive(self):
        target = self.service.target_calories(
            TDEE(2914.0), Goal.BUILD, GoalIntensity.AGGRESSIVE, Sex.MALE
        )
        assert target == 3414

    @pytest.mark.parametrize("intensity", list(GoalIntensity))
    def test_maintain_is_rounded_tdee(self, intensity):
        tdee = TDEE(2345.5)
        target = self.service.target_calories(
            tdee, Goal.MAINTAIN, intensity, Sex.FEMALE
        )
        assert target == tdee.rounded() == 2346

    def test_missing_goal_is_maintenance(self):
        target = self.service.target_calories(
            TDEE(2000.4), None, GoalIntensity.AGGRESSIVE, Sex.MALE
        )
        assert target == 2000

    def test_missing_intensity_is_maintenance(self):
        target = self.service.target_calories(
            TDEE(2000.6), Goal.LOSE, None, Sex.MALE
        )
        assert target == 2001

    def test_lose_floor_male(self):
        target = self.service.target_calories(
            TDEE(1131.0), Goal.LOSE, GoalIntensity.AGGRESSIVE, Sex.MALE
        )
        assert target == 1500

    @pytest.mark.parametrize("sex", [Sex.FEMALE, Sex.OTHER, Sex.UNSPECIFIED])
    def test_lose_floor_non_male(self, sex):
        target = self.service.target_calories(
            TDEE(931.8), Goal.LOSE, GoalIntensity.AGGRESSIVE, sex
        )
        assert target == 1200

    def test_floor_not_applied_above_minimum(self):
        target = self.service.target_calories(
            TDEE(1600.0), Goal.LOSE, GoalIntensity.MILD, Sex.FEMALE
        )
        assert target == 1440

    def test_no_floor_for_maintain(self):
        target = self.service.target_calories(
            TDEE(900.0), Goal.MAINTAIN, GoalIntensity.MILD, Sex.MALE
        )
        assert target == 900
