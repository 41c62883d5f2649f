"""AddToDailyLogCommand - add a logged food entry to the day's totals."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

import structlog

from domain.macro_targets.core.entities.daily_macro_log import DailyMacroLog
from domain.macro_targets.core.ports.repository import (
    IDailyLogRepository,
    IUserProfileRepository,
)
from domain.macro_targets.core.value_objects.macro_amounts import MacroAmounts

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AddToDailyLogCommand:
    """Command to increment a daily log.

    Attributes:
        user_id: User identifier
        amounts: Calories and macros of the logged entry
        log_date: Day of the log (defaults to today)
    """

    user_id: str
    amounts: MacroAmounts
    log_date: Optional[date] = None


class AddToDailyLogHandler:
    """Handler for AddToDailyLogCommand.

    1. Loads the day's log, creating an empty one if needed
    2. Adds the amounts and persists the log
    3. Updates the user's meal-logging streak
    """

    def __init__(
        self,
        log_repository: IDailyLogRepository,
        profile_repository: IUserProfileRepository,
    ):
        self._log_repository = log_repository
        self._profile_repository = profile_repository

    async def handle(self, command: AddToDailyLogCommand) -> DailyMacroLog:
        log_date = command.log_date or date.today()

        log = await self._log_repository.find(command.user_id, log_date)
        if log is None:
            log = DailyMacroLog(user_id=command.user_id, log_date=log_date)

        log.add(command.amounts)
        await self._log_repository.save(log)

        logger.info(
            "Daily log incremented",
            user_id=command.user_id,
            date=log.date_key,
            calories=log.calories,
        )

        await self._update_streak(command.user_id, log_date)
        return log

    async def _update_streak(self, user_id: str, log_date: date) -> None:
        profile = await self._profile_repository.find_by_user_id(user_id)
        if profile is None:
            logger.info("No profile, streak not updated", user_id=user_id)
            return

        if profile.register_meal_logged(log_date):
            await self._profile_repository.save(profile)
            logger.info(
                "Streak updated",
                user_id=user_id,
                streak=profile.streak,
                date=log_date.isoformat(),
            )
