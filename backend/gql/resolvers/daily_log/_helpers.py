"""Shared helpers for daily log resolvers."""

from typing import Optional

import strawberry

from domain.macro_targets.core.ports.repository import IDailyLogRepository
from domain.macro_targets.core.value_objects.macro_targets import MacroTargets


def get_log_repository(info: strawberry.types.Info) -> IDailyLogRepository:
    repository = info.context.get("daily_log_repository")
    if not repository:
        raise Exception("Missing daily_log_repository in GraphQL context")
    return repository


async def get_target_macros(
    info: strawberry.types.Info, user_id: str
) -> Optional[MacroTargets]:
    """Current targets of a user, None without profile or targets."""
    repository = info.context.get("profile_repository")
    if not repository:
        raise Exception("Missing profile_repository in GraphQL context")
    profile = await repository.find_by_user_id(user_id)
    return profile.target_macros if profile else None
