"""SaveDailyLogCommand - overwrite a day's totals."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from domain.macro_targets.core.entities.daily_macro_log import DailyMacroLog
from domain.macro_targets.core.ports.repository import IDailyLogRepository
from domain.macro_targets.core.value_objects.macro_amounts import MacroAmounts


@dataclass(frozen=True)
class SaveDailyLogCommand:
    user_id: str
    amounts: MacroAmounts
    log_date: Optional[date] = None


class SaveDailyLogHandler:
    """Handler for SaveDailyLogCommand.

    Replaces the totals of an existing log (keeping its ``created_at``)
    or creates the log.
    """

    def __init__(self, log_repository: IDailyLogRepository):
        self._log_repository = log_repository

    async def handle(self, command: SaveDailyLogCommand) -> DailyMacroLog:
        log_date = command.log_date or date.today()

        log = await self._log_repository.find(command.user_id, log_date)
        if log is None:
            log = DailyMacroLog(user_id=command.user_id, log_date=log_date)

        log.overwrite(command.amounts)
        await self._log_repository.save(log)
        return log
