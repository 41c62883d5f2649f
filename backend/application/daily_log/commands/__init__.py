"""CQRS Commands for the daily macro log."""

from .add_to_daily_log import AddToDailyLogCommand, AddToDailyLogHandler
from .save_daily_log import SaveDailyLogCommand, SaveDailyLogHandler
from .subtract_from_daily_log import (
    SubtractFromDailyLogCommand,
    SubtractFromDailyLogHandler,
)

__all__ = [
    "AddToDailyLogCommand",
    "AddToDailyLogHandler",
    "SaveDailyLogCommand",
    "SaveDailyLogHandler",
    "SubtractFromDailyLogCommand",
    "SubtractFromDailyLogHandler",
]
