"""Supabase repository for mood entries."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from replate.domain.mood import MoodEntry
from replate.services.mood import MoodRepository

_COLUMNS = "id, user_id, meal_id, mood, timestamp, reported_at"


@dataclass
class SupabaseMoodRepository(MoodRepository):
    """Supabase implementation for mood entries."""

    client: Client

    def list_entries(self, user_id: str) -> list[MoodEntry]:
        """Return a user's mood entries."""
        response = (
            self.client.table("mood_entries")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("timestamp", desc=True)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def get_latest_entry(self, user_id: str) -> MoodEntry | None:
        """Return the user's most recent mood entry."""
        response = (
            self.client.table("mood_entries")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("timestamp", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def create_entry(  # noqa: PLR0913
        self,
        user_id: str,
        mood: str,
        timestamp: datetime,
        meal_id: str | None,
        reported_at: datetime | None,
    ) -> MoodEntry:
        """Insert a mood entry and return it."""
        response = (
            self.client.table("mood_entries")
            .insert(
                {
                    "user_id": user_id,
                    "mood": mood,
                    "meal_id": meal_id,
                    "timestamp": timestamp.isoformat(),
                    "reported_at": reported_at.isoformat() if reported_at else None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create mood entry")
        return _parse_entry(response.data[0])


def _parse_entry(row: dict[str, object]) -> MoodEntry:
    reported_at = row.get("reported_at")
    meal_id = row.get("meal_id")
    return MoodEntry(
        id=str(row["id"]),
        user_id=str(row.get("user_id", "")),
        mood=str(row.get("mood", "")),
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
        meal_id=str(meal_id) if meal_id is not None else None,
        reported_at=(
            datetime.fromisoformat(reported_at)
            if isinstance(reported_at, str) and reported_at
            else None
        ),
    )
