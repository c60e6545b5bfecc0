"""Domain models for the weekly meal plan."""

from dataclasses import dataclass
from datetime import datetime

DAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
MEAL_TIMES: tuple[str, ...] = ("breakfast", "lunch", "dinner")


@dataclass(frozen=True)
class MealPlanEntry:
    """A recipe snapshot scheduled for a day and meal slot."""

    id: str
    user_id: str
    day: str
    meal_time: str
    recipe: dict[str, object]
    created_at: datetime
