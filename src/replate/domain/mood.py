"""Domain models for post-meal mood tracking."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MoodOption:
    """A selectable mood tag."""

    id: str
    label: str
    emoji: str


MOOD_OPTIONS: tuple[MoodOption, ...] = (
    MoodOption("energized", "Energized", "⚡"),
    MoodOption("sleepy", "Sleepy", "😴"),
    MoodOption("bloated", "Bloated", "🤢"),
    MoodOption("calm", "Calm", "😌"),
    MoodOption("focused", "Focused", "🎯"),
    MoodOption("irritable", "Irritable", "😤"),
)
MOOD_IDS = frozenset(option.id for option in MOOD_OPTIONS)


@dataclass(frozen=True)
class MoodEntry:
    """A mood reported by a user, optionally tied to a meal."""

    id: str
    user_id: str
    mood: str
    timestamp: datetime
    meal_id: str | None = None
    reported_at: datetime | None = None
