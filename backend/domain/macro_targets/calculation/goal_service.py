"""GoalAdjustmentService - goal-specific daily calorie target."""

from typing import Optional

import structlog

from ..core.ports.calculators import IGoalAdjuster
from ..core.value_objects.goal import Goal, GoalIntensity
from ..core.value_objects.sex import Sex
from ..core.value_objects.tdee import TDEE

logger = structlog.get_logger(__name__)


class GoalAdjustmentService(IGoalAdjuster):
    """Turn maintenance calories into a goal calorie target.

    Adjustments (rounded half up):

    | goal     | mild  | moderate | aggressive |
    |----------|-------|----------|------------|
    | lose     | ×0.90 | ×0.80    | ×0.75      |
    | maintain | TDEE  | TDEE     | TDEE       |
    | build    | +200  | +350     | +500       |

    Weight-loss targets never go below 1500 kcal for men and 1200 kcal
    for everyone else. A missing goal or intensity means maintenance.
    """

    def target_calories(
        self,
        tdee: TDEE,
        goal: Optional[Goal],
        intensity: Optional[GoalIntensity],
        sex: Sex,
    ) -> int:
        if goal is None or intensity is None:
            logger.debug(
                "Goal or intensity missing, using maintenance calories",
                goal=goal,
                intensity=intensity,
            )
            return tdee.rounded()

        target = goal.adjust_calories(tdee.value, intensity)

        if goal.has_calorie_floor():
            floor = sex.minimum_calories()
            if target < floor:
                logger.debug(
                    "Calorie target raised to safety floor",
                    target=target,
                    floor=floor,
                )
                target = floor

        return target
