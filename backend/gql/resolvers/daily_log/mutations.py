"""Mutation resolvers for the daily macro log.

These resolvers execute CQRS commands using Command Handlers:
- add: Add a logged food entry (updates the streak)
- subtract: Undo a logged food entry
- save: Overwrite a day's totals
"""

from datetime import date as date_type
from typing import Optional

import strawberry

from application.daily_log.commands.add_to_daily_log import (
    AddToDailyLogCommand,
    AddToDailyLogHandler,
)
from application.daily_log.commands.save_daily_log import (
    SaveDailyLogCommand,
    SaveDailyLogHandler,
)
from application.daily_log.commands.subtract_from_daily_log import (
    SubtractFromDailyLogCommand,
    SubtractFromDailyLogHandler,
)
from gql.resolvers.daily_log._helpers import (
    get_log_repository,
    get_target_macros,
)
from gql.types_daily_log import (
    DailyMacroLogType,
    MacroAmountsInput,
    macro_amounts_input_to_domain,
    map_daily_log_to_graphql,
)


@strawberry.type
class DailyLogMutations:
    """Mutations for daily macro log operations."""

    @strawberry.mutation
    async def add(
        self,
        info: strawberry.types.Info,
        user_id: str,
        input: MacroAmountsInput,
        date: Optional[date_type] = None,
    ) -> DailyMacroLogType:
        """Add a food entry to the day's totals.

        Example:
            mutation {
              dailyLog {
                add(userId: "user123", input: {calories: 520, protein: 32}) {
                  calories
                  remainingCalories
                }
              }
            }
        """
        profile_repository = info.context.get("profile_repository")
        if not profile_repository:
            raise Exception("Missing profile_repository in GraphQL context")

        handler = AddToDailyLogHandler(
            log_repository=get_log_repository(info),
            profile_repository=profile_repository,
        )
        log = await handler.handle(
            AddToDailyLogCommand(
                user_id=user_id,
                amounts=macro_amounts_input_to_domain(input),
                log_date=date,
            )
        )
        targets = await get_target_macros(info, user_id)
        return map_daily_log_to_graphql(log, targets)

    @strawberry.mutation
    async def subtract(
        self,
        info: strawberry.types.Info,
        user_id: str,
        input: MacroAmountsInput,
        date: Optional[date_type] = None,
    ) -> DailyMacroLogType:
        """Remove a food entry from the day's totals (clamped at zero)."""
        handler = SubtractFromDailyLogHandler(get_log_repository(info))
        log = await handler.handle(
            SubtractFromDailyLogCommand(
                user_id=user_id,
                amounts=macro_amounts_input_to_domain(input),
                log_date=date,
            )
        )
        targets = await get_target_macros(info, user_id)
        return map_daily_log_to_graphql(log, targets)

    @strawberry.mutation
    async def save(
        self,
        info: strawberry.types.Info,
        user_id: str,
        input: MacroAmountsInput,
        date: Optional[date_type] = None,
    ) -> DailyMacroLogType:
        handler = SaveDailyLogHandler(get_log_repository(info))
        log = await handler.handle(
            SaveDailyLogCommand(
                user_id=user_id,
                amounts=macro_amounts_input_to_domain(input),
                log_date=date,
            )
        )
        targets = await get_target_macros(info, user_id)
        return map_daily_log_to_graphql(log, targets)
