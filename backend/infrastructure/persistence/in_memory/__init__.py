"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.daily_log_repository import (
    InMemoryDailyLogRepository,
)
from infrastructure.persistence.in_memory.user_profile_repository import (
    InMemoryUserProfileRepository,
)

__all__ = [
    "InMemoryDailyLogRepository",
    "InMemoryUserProfileRepository",
]
