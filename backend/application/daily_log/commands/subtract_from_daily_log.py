"""SubtractFromDailyLogCommand - undo a logged food entry."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

import structlog

from domain.macro_targets.core.entities.daily_macro_log import DailyMacroLog
from domain.macro_targets.core.ports.repository import IDailyLogRepository
from domain.macro_targets.core.value_objects.macro_amounts import MacroAmounts

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SubtractFromDailyLogCommand:
    user_id: str
    amounts: MacroAmounts
    log_date: Optional[date] = None


class SubtractFromDailyLogHandler:
    """Handler for SubtractFromDailyLogCommand.

    Totals are clamped at zero. The streak is left untouched.
    """

    def __init__(self, log_repository: IDailyLogRepository):
        self._log_repository = log_repository

    async def handle(self, command: SubtractFromDailyLogCommand) -> DailyMacroLog:
        log_date = command.log_date or date.today()

        log = await self._log_repository.find(command.user_id, log_date)
        if log is None:
            log = DailyMacroLog(user_id=command.user_id, log_date=log_date)

        log.subtract(command.amounts)
        await self._log_repository.save(log)

        logger.info(
            "Daily log decremented",
            user_id=command.user_id,
            date=log.date_key,
            calories=log.calories,
        )
        return log
