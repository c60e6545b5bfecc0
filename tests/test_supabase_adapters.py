"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from replate.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
    escape_like,
)
from replate.adapters.supabase_meal_plan_repository import SupabaseMealPlanRepository
from replate.adapters.supabase_mood_repository import SupabaseMoodRepository
from replate.adapters.supabase_pantry_repository import SupabasePantryRepository
from replate.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from replate.adapters.supabase_recipe_repository import SupabaseRecipeCatalog
from replate.domain.pantry import Ingredient
from replate.domain.preferences import DietaryPreferences


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_on_conflict: str | None = None
    actions: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def _start(self, action: str) -> "FakeTable":
        self._action = action
        self.actions.append(action)
        return self

    def select(self, *_args) -> "FakeTable":
        return self._start("select")

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_payload = payload
        return self._start("insert")

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_payload = payload
        return self._start("update")

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str = ""
    ) -> "FakeTable":
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self._start("upsert")

    def delete(self) -> "FakeTable":
        return self._start("delete")

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def ilike(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


RICE = {"id": "2", "name": "Rice", "unit": "cups"}


def test_supabase_ingredient_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("ingredients")
    table.queue("select", [RICE])
    table.queue("select", [])
    table.queue("select", [RICE])
    table.queue("insert", [{"id": "11", "name": "Basil", "unit": "pieces"}])

    repository = SupabaseIngredientRepository(client)

    assert repository.list_ingredients() == [Ingredient("2", "Rice", "cups")]
    assert repository.get_ingredient("404") is None
    assert repository.find_by_name(" rice ") == Ingredient("2", "Rice", "cups")
    assert ("name", "rice") in table.last_filters
    created = repository.create_ingredient("Basil", "pieces")
    assert created.id == "11"
    assert table.last_payload == {"name": "Basil", "unit": "pieces"}


def test_supabase_ingredient_lookup_escapes_wildcards() -> None:
    client = FakeSupabaseClient()
    table = client.table("ingredients")

    repository = SupabaseIngredientRepository(client)

    assert repository.find_by_name(" Chick_n 100% ") is None
    assert table.last_filters[-1] == ("name", "Chick\\_n 100\\%")


def test_escape_like() -> None:
    assert escape_like("%") == "\\%"
    assert escape_like("a\\b_c") == "a\\\\b\\_c"
    assert escape_like("Olive Oil") == "Olive Oil"


def test_supabase_ingredient_insert_failure() -> None:
    repository = SupabaseIngredientRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError, match="Failed to create ingredient"):
        repository.create_ingredient("Basil", "pieces")


def test_supabase_pantry_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("pantry_items")
    row = {
        "id": "p1",
        "user_id": "user-1",
        "ingredient_id": "2",
        "quantity": 1.5,
        "created_at": "2024-05-01T12:00:00+00:00",
        "updated_at": None,
        "ingredients": RICE,
    }
    table.queue("select", [row])
    table.queue("select", [row])
    table.queue("update", [{**row, "quantity": 3.5, "ingredients": None}])

    repository = SupabasePantryRepository(client)
    entries = repository.list_entries("user-1")
    existing = repository.get_entry("user-1", "2")
    assert existing is not None
    updated = repository.update_quantity(existing, 3.5)
    repository.delete_entry("user-1", "2")

    assert entries[0].ingredient.name == "Rice"
    assert entries[0].created_at == datetime(2024, 5, 1, 12, tzinfo=UTC)
    assert updated.quantity == 3.5
    assert updated.ingredient.name == "Rice"
    assert table.last_filters[-2:] == [("user_id", "user-1"), ("ingredient_id", "2")]
    assert table.actions[-1] == "delete"


def test_supabase_pantry_create_entry() -> None:
    client = FakeSupabaseClient()
    table = client.table("pantry_items")
    table.queue(
        "insert",
        [
            {
                "id": "p2",
                "user_id": "user-1",
                "ingredient_id": "2",
                "quantity": 1,
                "created_at": "2024-05-01T12:00:00+00:00",
            }
        ],
    )

    entry = SupabasePantryRepository(client).create_entry(
        "user-1", Ingredient("2", "Rice", "cups"), 1
    )

    assert entry.ingredient.unit == "cups"
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["ingredient_id"] == "2"


def test_supabase_meal_plan_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("meal_plan_entries")
    row = {
        "id": "m1",
        "user_id": "user-1",
        "day": "monday",
        "meal_time": "lunch",
        "recipe": {"title": "Salad"},
        "created_at": "2024-05-01T12:00:00+00:00",
    }
    table.queue("insert", [row])
    table.queue("select", [row])

    repository = SupabaseMealPlanRepository(client)
    created = repository.create_entry("user-1", "monday", "lunch", {"title": "Salad"})
    listed = repository.list_entries("user-1")
    repository.delete_entry("monday", "m1")

    assert created.recipe == {"title": "Salad"}
    assert listed[0].meal_time == "lunch"
    assert table.last_filters[-2:] == [("id", "m1"), ("day", "monday")]


def test_supabase_preferences_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("user_preferences")
    table.queue(
        "select",
        [{"diet": "keto", "allergies": ["fish"], "restricted_ingredients": []}],
    )
    table.queue("upsert", [{"user_id": "user-1"}])

    repository = SupabasePreferencesRepository(client)
    fetched = repository.get_preferences("user-1")
    repository.save_preferences("user-1", DietaryPreferences(diet="vegan"))

    assert fetched == DietaryPreferences(diet="keto", allergies=("fish",))
    assert repository.get_preferences("user-2") is None
    assert table.last_on_conflict == "user_id"
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["diet"] == "vegan"


def test_supabase_preferences_save_failure() -> None:
    repository = SupabasePreferencesRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError):
        repository.save_preferences("user-1", DietaryPreferences())


def test_supabase_mood_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("mood_entries")
    row = {
        "id": "mood-1",
        "user_id": "user-1",
        "meal_id": None,
        "mood": "calm",
        "timestamp": "2024-05-01T12:00:00+00:00",
        "reported_at": None,
    }
    table.queue("insert", [row])
    table.queue("select", [row])
    table.queue("select", [])

    repository = SupabaseMoodRepository(client)
    created = repository.create_entry(
        "user-1",
        "calm",
        timestamp=datetime(2024, 5, 1, 12, tzinfo=UTC),
        meal_id=None,
        reported_at=None,
    )

    assert created.mood == "calm"
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["timestamp"] == "2024-05-01T12:00:00+00:00"
    latest = repository.get_latest_entry("user-1")
    assert latest is not None
    assert latest.timestamp == datetime(2024, 5, 1, 12, tzinfo=UTC)
    assert repository.list_entries("user-1") == []


def test_supabase_recipe_catalog() -> None:
    client = FakeSupabaseClient()
    client.table("recipes").queue(
        "select",
        [
            {
                "id": 1,
                "title": "Simple Chicken and Rice",
                "instructions": "Cook.",
                "minutes": 30,
                "calories": 450,
                "protein": "35.5",
                "carbs": None,
                "fat": 8,
                "photo_url": None,
                "ingredients": [
                    {"name": "Chicken Breast", "quantity": 1, "unit": "lbs"},
                    "ignored",
                ],
            }
        ],
    )

    recipes = SupabaseRecipeCatalog(client).list_recipes()

    assert recipes[0].id == "1"
    assert recipes[0].protein == 35.5
    assert recipes[0].carbs is None
    assert [item.name for item in recipes[0].ingredients] == ["Chicken Breast"]
