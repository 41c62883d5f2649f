"""Query resolvers for the daily macro log.

- log: One day's totals (defaults to today)
- range: Logs between two days, both included
"""

from datetime import date as date_type
from typing import List, Optional

import strawberry

from application.daily_log.queries.get_daily_log import (
    GetDailyLogQuery,
    GetDailyLogQueryHandler,
)
from application.daily_log.queries.get_daily_log_range import (
    GetDailyLogRangeQuery,
    GetDailyLogRangeQueryHandler,
)
from gql.resolvers.daily_log._helpers import (
    get_log_repository,
    get_target_macros,
)
from gql.types_daily_log import DailyMacroLogType, map_daily_log_to_graphql


@strawberry.type
class DailyLogQueries:
    """GraphQL queries for the daily macro log."""

    @strawberry.field
    async def log(
        self,
        info: strawberry.types.Info,
        user_id: str,
        date: Optional[date_type] = None,
    ) -> Optional[DailyMacroLogType]:
        """Get one day's log.

        Example:
            query {
              dailyLog {
                log(userId: "user123", date: "2024-06-15") {
                  calories
                  remainingCalories
                  calorieProgress
                }
              }
            }
        """
        handler = GetDailyLogQueryHandler(get_log_repository(info))
        log = await handler.handle(GetDailyLogQuery(user_id, date))
        if log is None:
            return None
        targets = await get_target_macros(info, user_id)
        return map_daily_log_to_graphql(log, targets)

    @strawberry.field
    async def range(
        self,
        info: strawberry.types.Info,
        user_id: str,
        start_date: date_type,
        end_date: date_type,
    ) -> List[DailyMacroLogType]:
        """Logs between two days (inclusive), sorted by date."""
        handler = GetDailyLogRangeQueryHandler(get_log_repository(info))
        logs = await handler.handle(
            GetDailyLogRangeQuery(
                user_id=user_id, start_date=start_date, end_date=end_date
            )
        )
        targets = await get_target_macros(info, user_id)
        return [map_daily_log_to_graphql(log, targets) for log in logs]
