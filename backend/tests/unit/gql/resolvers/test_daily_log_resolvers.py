"""Unit tests for daily log resolvers."""

from datetime import date

import pytest
import pytest_asyncio

from domain.macro_targets.core.entities import UserProfile
from domain.macro_targets.core.exceptions import InvalidDateRangeError
from domain.macro_targets.core.value_objects import MacroTargets, OnboardingData
from gql.resolvers.daily_log.mutations import DailyLogMutations
from gql.resolvers.daily_log.queries import DailyLogQueries
from gql.types_daily_log import MacroAmountsInput

DAY = date(2024, 6, 15)


@pytest.fixture
def queries() -> DailyLogQueries:
    return DailyLogQueries()


@pytest.fixture
def mutations() -> DailyLogMutations:
    return DailyLogMutations()


@pytest_asyncio.fixture
async def onboarded(profile_repository) -> UserProfile:
    profile = UserProfile.create("user123")
    profile.complete_onboarding(
        OnboardingData(age=30),
        MacroTargets(calories=2000, protein=150, carbs=200, fats=60),
    )
    await profile_repository.save(profile)
    return profile


@pytest.mark.asyncio
async def test_add_reports_progress(mutations, info, onboarded):
    result = await mutations.add(
        info, "user123", MacroAmountsInput(calories=500, protein=30), DAY
    )

    assert result.date == DAY
    assert result.calories == 500
    assert result.remaining_calories == 1500
    assert result.calorie_progress == pytest.approx(25.0)


@pytest.mark.asyncio
async def test_add_updates_streak(mutations, info, onboarded, profile_repository):
    await mutations.add(info, "user123", MacroAmountsInput(calories=500), DAY)
    await mutations.add(
        info, "user123", MacroAmountsInput(calories=300), date(2024, 6, 16)
    )

    profile = await profile_repository.find_by_user_id("user123")
    assert profile.streak == 2


@pytest.mark.asyncio
async def test_add_without_profile(mutations, info):
    result = await mutations.add(
        info, "ghost", MacroAmountsInput(calories=500), DAY
    )

    assert result.calories == 500
    assert result.remaining_calories == 0
    assert result.calorie_progress == 0


@pytest.mark.asyncio
async def test_subtract_clamps(mutations, info, onboarded):
    await mutations.add(info, "user123", MacroAmountsInput(calories=300), DAY)

    result = await mutations.subtract(
        info, "user123", MacroAmountsInput(calories=500), DAY
    )

    assert result.calories == 0
    assert result.remaining_calories == 2000


@pytest.mark.asyncio
async def test_save_overwrites(mutations, info, onboarded):
    await mutations.add(info, "user123", MacroAmountsInput(calories=300), DAY)

    result = await mutations.save(
        info, "user123", MacroAmountsInput(calories=2500, fats=90), DAY
    )

    assert result.calories == 2500
    assert result.fats == 90
    assert result.calorie_progress == 100.0
    assert result.remaining_calories == 0


@pytest.mark.asyncio
async def test_log_query(mutations, queries, info, onboarded):
    await mutations.add(info, "user123", MacroAmountsInput(calories=300), DAY)

    found = await queries.log(info, "user123", DAY)
    missing = await queries.log(info, "user123", date(2024, 6, 16))

    assert found.calories == 300
    assert missing is None


@pytest.mark.asyncio
async def test_range_query(mutations, queries, info, onboarded):
    for day in (17, 15, 16):
        await mutations.add(
            info, "user123", MacroAmountsInput(calories=day * 100), date(2024, 6, day)
        )

    logs = await queries.range(info, "user123", date(2024, 6, 15), date(2024, 6, 16))

    assert [log.date for log in logs] == [date(2024, 6, 15), date(2024, 6, 16)]
    assert logs[0].remaining_calories == 500


@pytest.mark.asyncio
async def test_range_query_invalid(queries, info):
    with pytest.raises(InvalidDateRangeError):
        await queries.range(info, "user123", date(2024, 6, 16), date(2024, 6, 15))
