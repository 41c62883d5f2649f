"""GetDailyLogRangeQuery - read the logs of a date range."""

from dataclasses import dataclass
from datetime import date
from typing import List

from domain.macro_targets.core.entities.daily_macro_log import DailyMacroLog
from domain.macro_targets.core.exceptions.domain_errors import (
    InvalidDateRangeError,
)
from domain.macro_targets.core.ports.repository import IDailyLogRepository


@dataclass(frozen=True)
class GetDailyLogRangeQuery:
    """Query for logs between two days, both included."""

    user_id: str
    start_date: date
    end_date: date


class GetDailyLogRangeQueryHandler:
    """Handler for GetDailyLogRangeQuery.

    Days without a log are skipped; results are sorted by date ascending.
    """

    def __init__(self, log_repository: IDailyLogRepository):
        self._log_repository = log_repository

    async def handle(self, query: GetDailyLogRangeQuery) -> List[DailyMacroLog]:
        """
        Raises:
            InvalidDateRangeError: If start_date is after end_date
        """
        if query.start_date > query.end_date:
            raise InvalidDateRangeError(
                query.start_date.isoformat(), query.end_date.isoformat()
            )

        logs = await self._log_repository.find_range(
            query.user_id, query.start_date, query.end_date
        )
        return sorted(logs, key=lambda log: log.log_date)
