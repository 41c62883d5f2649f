"""GraphQL types for the daily macro log."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import strawberry

from domain.macro_targets.core.entities.daily_macro_log import DailyMacroLog
from domain.macro_targets.core.value_objects.macro_amounts import MacroAmounts
from domain.macro_targets.core.value_objects.macro_targets import MacroTargets


__all__ = [
    "DailyMacroLogType",
    "MacroAmountsInput",
    "macro_amounts_input_to_domain",
    "map_daily_log_to_graphql",
]


@strawberry.type
class DailyMacroLogType:
    """Totals eaten on one day, with progress against the user's targets."""

    user_id: str
    date: date
    calories: float
    protein: float
    carbs: float
    fats: float
    remaining_calories: float = strawberry.field(
        description="Calories left before the target, never negative"
    )
    calorie_progress: float = strawberry.field(
        description="Percentage of the calorie target eaten, capped at 100"
    )
    created_at: datetime
    updated_at: datetime


@strawberry.input
class MacroAmountsInput:
    """Calories and macros of a food entry. Missing fields count as 0."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0


def macro_amounts_input_to_domain(value: MacroAmountsInput) -> MacroAmounts:
    return MacroAmounts(
        calories=value.calories,
        protein=value.protein,
        carbs=value.carbs,
        fats=value.fats,
    )


def map_daily_log_to_graphql(
    log: DailyMacroLog, targets: Optional[MacroTargets] = None
) -> DailyMacroLogType:
    """Map domain DailyMacroLog to GraphQL DailyMacroLogType.

    Args:
        log: Domain log
        targets: User's targets; without them progress fields are 0
    """
    return DailyMacroLogType(
        user_id=log.user_id,
        date=log.log_date,
        calories=log.calories,
        protein=log.protein,
        carbs=log.carbs,
        fats=log.fats,
        remaining_calories=log.remaining_calories(targets),
        calorie_progress=log.calorie_progress(targets),
        created_at=log.created_at,
        updated_at=log.updated_at,
    )
