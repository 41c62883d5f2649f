"""In-memory implementation of IDailyLogRepository."""

from copy import deepcopy
from datetime import date
from typing import List, Optional, Tuple

from domain.macro_targets.core.entities.daily_macro_log import DailyMacroLog
from domain.macro_targets.core.ports.repository import IDailyLogRepository


class InMemoryDailyLogRepository(IDailyLogRepository):
    """
    In-memory implementation of daily log repository.

    Logs are stored under (user_id, date). Data is lost when the
    application stops.
    """

    def __init__(self) -> None:
        self._logs: dict[Tuple[str, date], DailyMacroLog] = {}

    async def save(self, log: DailyMacroLog) -> None:
        self._logs[(log.user_id, log.log_date)] = deepcopy(log)

    async def find(self, user_id: str, log_date: date) -> Optional[DailyMacroLog]:
        log = self._logs.get((user_id, log_date))
        return deepcopy(log) if log else None

    async def find_range(
        self, user_id: str, start_date: date, end_date: date
    ) -> List[DailyMacroLog]:
        """
        Find logs of a user between two days, bounds included.

        Returns:
            Deep copies sorted by date ascending
        """
        logs = [
            deepcopy(log)
            for (owner, log_date), log in self._logs.items()
            if owner == user_id and start_date <= log_date <= end_date
        ]
        return sorted(logs, key=lambda log: log.log_date)

    def clear(self) -> None:
        """Clear all logs from memory."""
        self._logs.clear()

    def count(self) -> int:
        return len(self._logs)
