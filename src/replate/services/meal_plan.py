"""Weekly meal plan service."""

import copy
from dataclasses import dataclass
from typing import Protocol

from replate.domain.errors import ValidationError
from replate.domain.meal_plan import DAYS, MEAL_TIMES, MealPlanEntry


class MealPlanRepository(Protocol):
    """Persistence interface for meal plan entries."""

    def list_entries(self, user_id: str) -> list[MealPlanEntry]:
        """Return a user's meal plan entries in insertion order."""

    def create_entry(
        self, user_id: str, day: str, meal_time: str, recipe: dict[str, object]
    ) -> MealPlanEntry:
        """Create a meal plan entry and return it."""

    def delete_entry(self, day: str, meal_id: str) -> None:
        """Delete an entry by day and id, if present."""


@dataclass
class MealPlanService:
    """Service for scheduling recipes across the week."""

    repository: MealPlanRepository

    def get_plan(self, user_id: str) -> dict[str, dict[str, list[MealPlanEntry]]]:
        """Return entries grouped by day, then by meal slot.

        Only days with at least one entry are present.
        """
        plan: dict[str, dict[str, list[MealPlanEntry]]] = {}
        for entry in self.repository.list_entries(user_id):
            slots = plan.setdefault(
                entry.day, {meal_time: [] for meal_time in MEAL_TIMES}
            )
            slots.setdefault(entry.meal_time, []).append(entry)
        return plan

    def add_meal(
        self,
        user_id: str,
        day: str | None,
        meal_time: str | None,
        recipe: dict[str, object] | None,
    ) -> MealPlanEntry:
        """Schedule a copy of a recipe for a day and meal slot."""
        if not day or not meal_time or not recipe:
            raise ValidationError("Day, meal time and recipe required")
        day_key = day.strip().lower()
        meal_key = meal_time.strip().lower()
        if day_key not in DAYS:
            raise ValidationError(f"Unknown day: {day}")
        if meal_key not in MEAL_TIMES:
            raise ValidationError(f"Unknown meal time: {meal_time}")
        snapshot = copy.deepcopy(recipe)
        return self.repository.create_entry(user_id, day_key, meal_key, snapshot)

    def remove_meal(self, day: str, meal_id: str) -> None:
        """Remove a scheduled meal; missing entries are ignored."""
        self.repository.delete_entry(day.strip().lower(), meal_id)
