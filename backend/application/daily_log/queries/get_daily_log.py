"""GetDailyLogQuery - read one day's totals."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from domain.macro_targets.core.entities.daily_macro_log import DailyMacroLog
from domain.macro_targets.core.ports.repository import IDailyLogRepository


@dataclass(frozen=True)
class GetDailyLogQuery:
    user_id: str
    log_date: Optional[date] = None


class GetDailyLogQueryHandler:
    """Handler for GetDailyLogQuery (defaults to today)."""

    def __init__(self, log_repository: IDailyLogRepository):
        self._log_repository = log_repository

    async def handle(self, query: GetDailyLogQuery) -> Optional[DailyMacroLog]:
        return await self._log_repository.find(
            query.user_id, query.log_date or date.today()
        )
