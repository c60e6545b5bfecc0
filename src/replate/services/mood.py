"""Mood tracking with a per-user cooldown."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from replate.domain.errors import RateLimitedError, ValidationError
from replate.domain.mood import MOOD_IDS, MoodEntry

_logger = logging.getLogger(__name__)

_SECONDS_PER_MINUTE = 60
_MINUTES_PER_HOUR = 60


class MoodRepository(Protocol):
    """Persistence interface for mood entries."""

    def list_entries(self, user_id: str) -> list[MoodEntry]:
        """Return all mood entries for a user."""

    def get_latest_entry(self, user_id: str) -> MoodEntry | None:
        """Return the user's most recent entry by timestamp."""

    def create_entry(  # noqa: PLR0913
        self,
        user_id: str,
        mood: str,
        timestamp: datetime,
        meal_id: str | None,
        reported_at: datetime | None,
    ) -> MoodEntry:
        """Append a mood entry and return it."""


@dataclass(frozen=True)
class CooldownStatus:
    """Remaining wait before a user may log another mood."""

    remaining: timedelta
    next_allowed_at: datetime

    @property
    def remaining_seconds(self) -> int:
        return math.ceil(self.remaining.total_seconds())

    @property
    def _remaining_total_minutes(self) -> int:
        return math.ceil(self.remaining.total_seconds() / _SECONDS_PER_MINUTE)

    @property
    def remaining_hours(self) -> int:
        return self._remaining_total_minutes // _MINUTES_PER_HOUR

    @property
    def remaining_minutes(self) -> int:
        return self._remaining_total_minutes % _MINUTES_PER_HOUR


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class MoodService:
    """Records moods, allowing one entry per cooldown window."""

    repository: MoodRepository
    cooldown: timedelta = timedelta(hours=3)
    clock: Callable[[], datetime] = field(default=_utc_now)

    def list_entries(self, user_id: str) -> list[MoodEntry]:
        """Return a user's entries, newest first."""
        return sorted(
            self.repository.list_entries(user_id),
            key=lambda entry: entry.timestamp,
            reverse=True,
        )

    def cooldown_status(self, user_id: str) -> CooldownStatus | None:
        """Return the active cooldown for a user, or None when allowed."""
        latest = self.repository.get_latest_entry(user_id)
        if latest is None:
            return None
        next_allowed_at = latest.timestamp + self.cooldown
        remaining = next_allowed_at - self.clock()
        if remaining <= timedelta(0):
            return None
        return CooldownStatus(remaining=remaining, next_allowed_at=next_allowed_at)

    def record(
        self,
        user_id: str,
        mood: str | None,
        meal_id: str | None = None,
        timestamp: datetime | None = None,
    ) -> MoodEntry:
        """Store a mood entry unless the user is still cooling down."""
        if not mood:
            raise ValidationError("Mood is required")
        mood_key = mood.strip().lower()
        if mood_key not in MOOD_IDS:
            raise ValidationError(f"Unknown mood: {mood}")

        status = self.cooldown_status(user_id)
        if status is not None:
            raise RateLimitedError(
                (
                    "Please wait "
                    f"{status.remaining_hours}h {status.remaining_minutes}m "
                    "before logging another mood"
                ),
                retry_after_seconds=status.remaining_seconds,
                remainingHours=status.remaining_hours,
                remainingMinutes=status.remaining_minutes,
                nextAllowedTime=status.next_allowed_at.isoformat(),
            )

        if timestamp is not None and timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=UTC)
        entry = self.repository.create_entry(
            user_id,
            mood_key,
            timestamp=self.clock(),
            meal_id=meal_id,
            reported_at=timestamp,
        )
        _logger.info("Mood recorded: user=%s mood=%s", user_id, mood_key)
        return entry
