"""Supabase repository for dietary preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from replate.domain.preferences import DietaryPreferences
from replate.services.preferences import PreferencesRepository


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Supabase-backed storage for per-user dietary preferences."""

    client: Client

    def get_preferences(self, user_id: str) -> DietaryPreferences | None:
        """Return saved preferences for a user, if any."""
        response = (
            self.client.table("user_preferences")
            .select("diet, allergies, restricted_ingredients")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return DietaryPreferences.from_payload(response.data[0])

    def save_preferences(self, user_id: str, preferences: DietaryPreferences) -> None:
        """Insert or replace preferences for a user."""
        payload = {
            "user_id": user_id,
            **preferences.to_payload(),
            "updated_at": datetime.now(tz=UTC).isoformat(),
        }
        response = (
            self.client.table("user_preferences")
            .upsert(payload, on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save preferences")
