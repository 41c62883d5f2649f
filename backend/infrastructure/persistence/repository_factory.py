"""Factory for creating repository instances.

Profiles and daily logs are kept in process memory; the getters hand out
one shared instance of each.
"""

from typing import Optional

from domain.macro_targets.core.ports.repository import (
    IDailyLogRepository,
    IUserProfileRepository,
)
from infrastructure.persistence.in_memory.daily_log_repository import (
    InMemoryDailyLogRepository,
)
from infrastructure.persistence.in_memory.user_profile_repository import (
    InMemoryUserProfileRepository,
)

# Singleton instances
_profile_repository: Optional[IUserProfileRepository] = None
_daily_log_repository: Optional[IDailyLogRepository] = None


def create_profile_repository() -> IUserProfileRepository:
    """Create a new, empty profile repository."""
    return InMemoryUserProfileRepository()


def create_daily_log_repository() -> IDailyLogRepository:
    """Create a new, empty daily log repository."""
    return InMemoryDailyLogRepository()


def get_profile_repository() -> IUserProfileRepository:
    """
    Get singleton profile repository instance.

    Lazy initialization on first call.
    """
    global _profile_repository
    if _profile_repository is None:
        _profile_repository = create_profile_repository()
    return _profile_repository


def get_daily_log_repository() -> IDailyLogRepository:
    """Get singleton daily log repository instance."""
    global _daily_log_repository
    if _daily_log_repository is None:
        _daily_log_repository = create_daily_log_repository()
    return _daily_log_repository


def reset_repositories() -> None:
    """
    Reset singleton instances.

    Useful for testing to ensure clean state.
    """
    global _profile_repository, _daily_log_repository
    _profile_repository = None
    _daily_log_repository = None
