"""Tests for mood logging and its cooldown."""

from datetime import UTC, datetime, timedelta

import pytest

from replate.adapters.memory_repositories import InMemoryMoodRepository
from replate.domain.errors import RateLimitedError, ValidationError
from replate.services.mood import CooldownStatus, MoodService
from tests.conftest import FakeClock


@pytest.fixture
def service(clock: FakeClock) -> MoodService:
    return MoodService(InMemoryMoodRepository(), clock=clock)


def test_second_entry_within_cooldown_is_rejected(
    service: MoodService, clock: FakeClock
) -> None:
    service.record("user-1", "calm")
    clock.advance(hours=1, minutes=30)

    with pytest.raises(RateLimitedError) as exc_info:
        service.record("user-1", "focused")

    details = exc_info.value.details()
    assert exc_info.value.status_code == 429
    assert details["remainingTime"] == 90 * 60
    assert details["remainingHours"] == 1
    assert details["remainingMinutes"] == 30
    assert details["nextAllowedTime"] == "2024-05-01T15:00:00+00:00"


def test_entry_at_exactly_cooldown_is_accepted(
    service: MoodService, clock: FakeClock
) -> None:
    service.record("user-1", "calm")
    clock.advance(hours=3)

    entry = service.record("user-1", "sleepy")

    assert entry.mood == "sleepy"
    assert len(service.list_entries("user-1")) == 2


def test_cooldown_is_per_user(service: MoodService) -> None:
    service.record("user-1", "calm")

    assert service.record("user-2", "calm").user_id == "user-2"


def test_client_timestamp_cannot_bypass_cooldown(
    service: MoodService, clock: FakeClock
) -> None:
    service.record("user-1", "calm", timestamp=datetime(2020, 1, 1))

    with pytest.raises(RateLimitedError):
        service.record("user-1", "calm", timestamp=datetime(2020, 1, 1))


def test_reported_time_is_kept_separately(
    service: MoodService, clock: FakeClock
) -> None:
    entry = service.record(
        "user-1", " Energized ", meal_id="meal-7", timestamp=datetime(2024, 5, 1, 9)
    )

    assert entry.mood == "energized"
    assert entry.meal_id == "meal-7"
    assert entry.timestamp == clock.now
    assert entry.reported_at == datetime(2024, 5, 1, 9, tzinfo=UTC)


@pytest.mark.parametrize("mood", [None, "", "hangry"])
def test_invalid_mood_is_rejected(service: MoodService, mood) -> None:
    with pytest.raises(ValidationError):
        service.record("user-1", mood)


def test_entries_are_listed_newest_first(
    service: MoodService, clock: FakeClock
) -> None:
    service.record("user-1", "calm")
    clock.advance(hours=4)
    service.record("user-1", "bloated")

    assert [entry.mood for entry in service.list_entries("user-1")] == [
        "bloated",
        "calm",
    ]


def test_remaining_time_rounds_up_to_the_minute() -> None:
    status = CooldownStatus(
        remaining=timedelta(hours=2, minutes=59, seconds=1),
        next_allowed_at=datetime(2024, 5, 1, tzinfo=UTC),
    )

    assert status.remaining_seconds == 10741
    assert (status.remaining_hours, status.remaining_minutes) == (3, 0)
