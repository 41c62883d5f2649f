"""Shared fixtures for resolver tests."""

import pytest

from application.macro_targets.orchestrators.macro_orchestrator import (
    create_macro_orchestrator,
)
from infrastructure.persistence.in_memory import (
    InMemoryDailyLogRepository,
    InMemoryUserProfileRepository,
)


class MockInfo:
    """Mock GraphQL Info object."""

    def __init__(self, **dependencies):
        self.context = dependencies


@pytest.fixture
def profile_repository() -> InMemoryUserProfileRepository:
    return InMemoryUserProfileRepository()


@pytest.fixture
def daily_log_repository() -> InMemoryDailyLogRepository:
    return InMemoryDailyLogRepository()


@pytest.fixture
def info(profile_repository, daily_log_repository) -> MockInfo:
    return MockInfo(
        macro_orchestrator=create_macro_orchestrator(),
        profile_repository=profile_repository,
        daily_log_repository=daily_log_repository,
    )
