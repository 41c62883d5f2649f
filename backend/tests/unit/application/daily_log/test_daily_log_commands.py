"""Unit tests for daily log commands and queries."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from application.daily_log.commands import (
    AddToDailyLogCommand,
    AddToDailyLogHandler,
    SaveDailyLogCommand,
    SaveDailyLogHandler,
    SubtractFromDailyLogCommand,
    SubtractFromDailyLogHandler,
)
from application.daily_log.queries import (
    GetDailyLogQuery,
    GetDailyLogQueryHandler,
    GetDailyLogRangeQuery,
    GetDailyLogRangeQueryHandler,
)
from domain.macro_targets.core.entities import DailyMacroLog, UserProfile
from domain.macro_targets.core.exceptions import InvalidDateRangeError
from domain.macro_targets.core.value_objects import MacroAmounts
from infrastructure.persistence.in_memory import (
    InMemoryDailyLogRepository,
    InMemoryUserProfileRepository,
)

MEAL = MacroAmounts(calories=520, protein=32, carbs=60, fats=14)


@pytest.fixture
def log_repository() -> InMemoryDailyLogRepository:
    return InMemoryDailyLogRepository()


@pytest.fixture
def profile_repository() -> InMemoryUserProfileRepository:
    return InMemoryUserProfileRepository()


@pytest.fixture
def add_handler(log_repository, profile_repository) -> AddToDailyLogHandler:
    return AddToDailyLogHandler(
        log_repository=log_repository, profile_repository=profile_repository
    )


class TestAddToDailyLog:
    @pytest.mark.asyncio
    async def test_creates_log(self, add_handler, log_repository):
        log = await add_handler.handle(
            AddToDailyLogCommand("user123", MEAL, date(2024, 6, 15))
        )

        assert log.totals() == MEAL
        stored = await log_repository.find("user123", date(2024, 6, 15))
        assert stored.calories == 520

    @pytest.mark.asyncio
    async def test_accumulates(self, add_handler):
        day = date(2024, 6, 15)
        await add_handler.handle(AddToDailyLogCommand("user123", MEAL, day))

        log = await add_handler.handle(
            AddToDailyLogCommand("user123", MacroAmounts(calories=80), day)
        )

        assert log.calories == 600
        assert log.protein == 32

    @pytest.mark.asyncio
    async def test_defaults_to_today(self, add_handler):
        log = await add_handler.handle(AddToDailyLogCommand("user123", MEAL))
        assert log.log_date == date.today()

    @pytest.mark.asyncio
    async def test_updates_streak(self, add_handler, profile_repository):
        await profile_repository.save(UserProfile.create("user123"))

        await add_handler.handle(
            AddToDailyLogCommand("user123", MEAL, date(2024, 6, 15))
        )
        await add_handler.handle(
            AddToDailyLogCommand("user123", MEAL, date(2024, 6, 16))
        )

        profile = await profile_repository.find_by_user_id("user123")
        assert profile.streak == 2
        assert profile.last_meal_log_date == date(2024, 6, 16)

    @pytest.mark.asyncio
    async def test_same_day_does_not_save_profile(self, log_repository):
        profile = UserProfile.create("user123")
        profile.register_meal_logged(date(2024, 6, 15))
        profile_repository = AsyncMock()
        profile_repository.find_by_user_id.return_value = profile
        handler = AddToDailyLogHandler(
            log_repository=log_repository, profile_repository=profile_repository
        )

        await handler.handle(
            AddToDailyLogCommand("user123", MEAL, date(2024, 6, 15))
        )

        profile_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_profile_skips_streak(
        self, add_handler, profile_repository
    ):
        log = await add_handler.handle(
            AddToDailyLogCommand("ghost", MEAL, date(2024, 6, 15))
        )

        assert log.calories == 520
        assert profile_repository.count() == 0


class TestSubtractFromDailyLog:
    @pytest.mark.asyncio
    async def test_clamps_at_zero(self, add_handler, log_repository):
        day = date(2024, 6, 15)
        await add_handler.handle(AddToDailyLogCommand("user123", MEAL, day))
        handler = SubtractFromDailyLogHandler(log_repository)

        log = await handler.handle(
            SubtractFromDailyLogCommand(
                "user123", MacroAmounts(calories=600, protein=2), day
            )
        )

        assert log.calories == 0
        assert log.protein == 30
        assert log.carbs == 60

    @pytest.mark.asyncio
    async def test_does_not_touch_streak(self, log_repository, profile_repository):
        profile = UserProfile.create("user123")
        await profile_repository.save(profile)
        handler = SubtractFromDailyLogHandler(log_repository)

        await handler.handle(
            SubtractFromDailyLogCommand("user123", MEAL, date(2024, 6, 15))
        )

        stored = await profile_repository.find_by_user_id("user123")
        assert stored.streak == 0


class TestSaveDailyLog:
    @pytest.mark.asyncio
    async def test_overwrites_and_keeps_created_at(
        self, add_handler, log_repository
    ):
        day = date(2024, 6, 15)
        first = await add_handler.handle(AddToDailyLogCommand("user123", MEAL, day))
        handler = SaveDailyLogHandler(log_repository)

        log = await handler.handle(
            SaveDailyLogCommand("user123", MacroAmounts(calories=1800), day)
        )

        assert log.totals() == MacroAmounts(calories=1800)
        assert log.created_at == first.created_at

    @pytest.mark.asyncio
    async def test_creates_missing_log(self, log_repository):
        handler = SaveDailyLogHandler(log_repository)

        await handler.handle(
            SaveDailyLogCommand("user123", MEAL, date(2024, 6, 15))
        )

        assert log_repository.count() == 1


class TestDailyLogQueries:
    @pytest.mark.asyncio
    async def test_get_log(self, add_handler, log_repository):
        await add_handler.handle(
            AddToDailyLogCommand("user123", MEAL, date(2024, 6, 15))
        )
        handler = GetDailyLogQueryHandler(log_repository)

        found = await handler.handle(GetDailyLogQuery("user123", date(2024, 6, 15)))
        missing = await handler.handle(GetDailyLogQuery("user123", date(2024, 6, 16)))

        assert found.calories == 520
        assert missing is None

    @pytest.mark.asyncio
    async def test_range_is_inclusive_and_sorted(self, log_repository):
        for day in (18, 14, 15, 20, 12):
            await log_repository.save(
                DailyMacroLog(user_id="user123", log_date=date(2024, 6, day))
            )
        await log_repository.save(
            DailyMacroLog(user_id="other", log_date=date(2024, 6, 15))
        )
        handler = GetDailyLogRangeQueryHandler(log_repository)

        logs = await handler.handle(
            GetDailyLogRangeQuery("user123", date(2024, 6, 14), date(2024, 6, 18))
        )

        assert [log.log_date.day for log in logs] == [14, 15, 18]
        assert all(log.user_id == "user123" for log in logs)

    @pytest.mark.asyncio
    async def test_range_start_after_end(self, log_repository):
        handler = GetDailyLogRangeQueryHandler(log_repository)

        with pytest.raises(InvalidDateRangeError):
            await handler.handle(
                GetDailyLogRangeQuery(
                    "user123", date(2024, 6, 18), date(2024, 6, 14)
                )
            )

    @pytest.mark.asyncio
    async def test_range_single_day(self, log_repository):
        await log_repository.save(
            DailyMacroLog(user_id="user123", log_date=date(2024, 6, 15))
        )
        handler = GetDailyLogRangeQueryHandler(log_repository)

        logs = await handler.handle(
            GetDailyLogRangeQuery("user123", date(2024, 6, 15), date(2024, 6, 15))
        )

        assert len(logs) == 1
