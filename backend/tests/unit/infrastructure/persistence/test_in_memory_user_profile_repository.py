"""Unit tests for InMemoryUserProfileRepository."""

import pytest

from domain.macro_targets.core.entities import UserProfile
from infrastructure.persistence.in_memory.user_profile_repository import (
    InMemoryUserProfileRepository,
)


@pytest.fixture
def repository() -> InMemoryUserProfileRepository:
    """Fixture providing clean InMemoryUserProfileRepository."""
    return InMemoryUserProfileRepository()


class TestInMemoryUserProfileRepository:
    @pytest.mark.asyncio
    async def test_save_and_find(self, repository):
        await repository.save(UserProfile.create("user123"))

        found = await repository.find_by_user_id("user123")

        assert found is not None
        assert found.user_id == "user123"

    @pytest.mark.asyncio
    async def test_find_missing(self, repository):
        assert await repository.find_by_user_id("ghost") is None

    @pytest.mark.asyncio
    async def test_save_overwrites(self, repository):
        profile = UserProfile.create("user123")
        await repository.save(profile)
        profile.streak = 3
        await repository.save(profile)

        found = await repository.find_by_user_id("user123")

        assert found.streak == 3
        assert repository.count() == 1

    @pytest.mark.asyncio
    async def test_stored_copy_is_isolated(self, repository):
        profile = UserProfile.create("user123")
        await repository.save(profile)

        profile.streak = 10
        found = await repository.find_by_user_id("user123")
        found.streak = 20

        again = await repository.find_by_user_id("user123")
        assert again.streak == 0

    @pytest.mark.asyncio
    async def test_delete_and_exists(self, repository):
        await repository.save(UserProfile.create("user123"))
        assert await repository.exists("user123")

        await repository.delete("user123")
        await repository.delete("user123")

        assert not await repository.exists("user123")

    @pytest.mark.asyncio
    async def test_clear(self, repository):
        await repository.save(UserProfile.create("a"))
        await repository.save(UserProfile.create("b"))

        repository.clear()

        assert repository.count() == 0
