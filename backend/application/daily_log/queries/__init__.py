"""CQRS Queries for the daily macro log."""

from .get_daily_log import GetDailyLogQuery, GetDailyLogQueryHandler
from .get_daily_log_range import (
    GetDailyLogRangeQuery,
    GetDailyLogRangeQueryHandler,
)

__all__ = [
    "GetDailyLogQuery",
    "GetDailyLogQueryHandler",
    "GetDailyLogRangeQuery",
    "GetDailyLogRangeQueryHandler",
]
