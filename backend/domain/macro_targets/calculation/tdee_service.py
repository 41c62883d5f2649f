"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Optional

import structlog

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel, pal_multiplier_for
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE

logger = structlog.get_logger(__name__)


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2 (also used when the level is unanswered)
        - Lightly: 1.375
        - Moderate: 1.55
        - Very: 1.725
    """

    def calculate(
        self, bmr: BMR, activity_level: Optional[ActivityLevel]
    ) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Example:
            >>> TDEEService().calculate(BMR(1880.0), ActivityLevel.MODERATE).rounded()
            2914
        """
        multiplier = pal_multiplier_for(activity_level)
        if activity_level is None:
            logger.debug("Activity level missing, using sedentary multiplier")

        return TDEE(value=bmr.value * multiplier)
