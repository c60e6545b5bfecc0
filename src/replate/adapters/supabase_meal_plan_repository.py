"""Supabase repository for weekly meal plan entries."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from replate.domain.meal_plan import MealPlanEntry
from replate.services.meal_plan import MealPlanRepository


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for meal plan entries."""

    client: Client

    def list_entries(self, user_id: str) -> list[MealPlanEntry]:
        """Return a user's entries ordered by creation time."""
        response = (
            self.client.table("meal_plan_entries")
            .select("id, user_id, day, meal_time, recipe, created_at")
            .eq("user_id", user_id)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def create_entry(
        self, user_id: str, day: str, meal_time: str, recipe: dict[str, object]
    ) -> MealPlanEntry:
        """Insert a meal plan entry and return it."""
        response = (
            self.client.table("meal_plan_entries")
            .insert(
                {
                    "user_id": user_id,
                    "day": day,
                    "meal_time": meal_time,
                    "recipe": recipe,
                    "created_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal plan entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, day: str, meal_id: str) -> None:
        """Delete an entry matching both day and id."""
        self.client.table("meal_plan_entries").delete().eq("id", meal_id).eq(
            "day", day
        ).execute()


def _parse_entry(row: dict[str, object]) -> MealPlanEntry:
    recipe = row.get("recipe")
    created_at = row.get("created_at")
    return MealPlanEntry(
        id=str(row["id"]),
        user_id=str(row.get("user_id", "")),
        day=str(row.get("day", "")),
        meal_time=str(row.get("meal_time", "")),
        recipe=recipe if isinstance(recipe, dict) else {},
        created_at=(
            datetime.fromisoformat(created_at)
            if isinstance(created_at, str)
            else datetime.now(tz=UTC)
        ),
    )
