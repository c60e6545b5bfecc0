"""In-memory repositories for the demo deployment and tests."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import uuid4

from replate.domain.meal_plan import MealPlanEntry
from replate.domain.mood import MoodEntry
from replate.domain.pantry import Ingredient, PantryEntry
from replate.domain.preferences import DietaryPreferences
from replate.domain.recipes import Recipe
from replate.seed_data import DEMO_INGREDIENTS, DEMO_PANTRY, DEMO_RECIPES
from replate.services.meal_plan import MealPlanRepository
from replate.services.mood import MoodRepository
from replate.services.pantry import IngredientRepository, PantryRepository
from replate.services.preferences import PreferencesRepository
from replate.services.suggestions import RecipeCatalog


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _new_id() -> str:
    return str(uuid4())


@dataclass
class InMemoryIngredientRepository(IngredientRepository):
    """Ingredient catalog kept in a dict keyed by id."""

    ingredients: dict[str, Ingredient] = field(default_factory=dict)

    def list_ingredients(self) -> list[Ingredient]:
        return list(self.ingredients.values())

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        return self.ingredients.get(ingredient_id)

    def find_by_name(self, name: str) -> Ingredient | None:
        needle = name.strip().lower()
        for ingredient in self.ingredients.values():
            if ingredient.name.lower() == needle:
                return ingredient
        return None

    def create_ingredient(self, name: str, unit: str) -> Ingredient:
        ingredient = Ingredient(id=_new_id(), name=name, unit=unit)
        self.ingredients[ingredient.id] = ingredient
        return ingredient


@dataclass
class InMemoryPantryRepository(PantryRepository):
    """Pantry entries keyed by (user id, ingredient id)."""

    entries: dict[tuple[str, str], PantryEntry] = field(default_factory=dict)
    clock: Callable[[], datetime] = _utc_now

    def list_entries(self, user_id: str) -> list[PantryEntry]:
        return [
            entry for (owner, _), entry in self.entries.items() if owner == user_id
        ]

    def get_entry(self, user_id: str, ingredient_id: str) -> PantryEntry | None:
        return self.entries.get((user_id, ingredient_id))

    def create_entry(
        self, user_id: str, ingredient: Ingredient, quantity: float
    ) -> PantryEntry:
        entry = PantryEntry(
            id=_new_id(),
            user_id=user_id,
            ingredient=ingredient,
            quantity=quantity,
            created_at=self.clock(),
        )
        self.entries[(user_id, ingredient.id)] = entry
        return entry

    def update_quantity(self, entry: PantryEntry, quantity: float) -> PantryEntry:
        updated = replace(entry, quantity=quantity, updated_at=self.clock())
        self.entries[(entry.user_id, entry.ingredient.id)] = updated
        return updated

    def delete_entry(self, user_id: str, ingredient_id: str) -> None:
        self.entries.pop((user_id, ingredient_id), None)


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """Meal plan entries in insertion order."""

    entries: dict[str, MealPlanEntry] = field(default_factory=dict)
    clock: Callable[[], datetime] = _utc_now

    def list_entries(self, user_id: str) -> list[MealPlanEntry]:
        return [entry for entry in self.entries.values() if entry.user_id == user_id]

    def create_entry(
        self, user_id: str, day: str, meal_time: str, recipe: dict[str, object]
    ) -> MealPlanEntry:
        entry = MealPlanEntry(
            id=_new_id(),
            user_id=user_id,
            day=day,
            meal_time=meal_time,
            recipe=recipe,
            created_at=self.clock(),
        )
        self.entries[entry.id] = entry
        return entry

    def delete_entry(self, day: str, meal_id: str) -> None:
        entry = self.entries.get(meal_id)
        if entry is not None and entry.day == day:
            del self.entries[meal_id]


@dataclass
class InMemoryPreferencesRepository(PreferencesRepository):
    """Dietary preferences keyed by user id."""

    preferences: dict[str, DietaryPreferences] = field(default_factory=dict)

    def get_preferences(self, user_id: str) -> DietaryPreferences | None:
        return self.preferences.get(user_id)

    def save_preferences(self, user_id: str, preferences: DietaryPreferences) -> None:
        self.preferences[user_id] = preferences


@dataclass
class InMemoryMoodRepository(MoodRepository):
    """Append-only list of mood entries."""

    entries: list[MoodEntry] = field(default_factory=list)

    def list_entries(self, user_id: str) -> list[MoodEntry]:
        return [entry for entry in self.entries if entry.user_id == user_id]

    def get_latest_entry(self, user_id: str) -> MoodEntry | None:
        entries = self.list_entries(user_id)
        if not entries:
            return None
        return max(entries, key=lambda entry: entry.timestamp)

    def create_entry(  # noqa: PLR0913
        self,
        user_id: str,
        mood: str,
        timestamp: datetime,
        meal_id: str | None,
        reported_at: datetime | None,
    ) -> MoodEntry:
        entry = MoodEntry(
            id=_new_id(),
            user_id=user_id,
            mood=mood,
            timestamp=timestamp,
            meal_id=meal_id,
            reported_at=reported_at,
        )
        self.entries.append(entry)
        return entry


@dataclass
class InMemoryRecipeCatalog(RecipeCatalog):
    """Fixed list of recipes."""

    recipes: list[Recipe] = field(default_factory=list)

    def list_recipes(self) -> list[Recipe]:
        return list(self.recipes)


@dataclass
class MemoryStore:
    """All in-memory repositories, created together and reset together."""

    ingredients: InMemoryIngredientRepository = field(
        default_factory=InMemoryIngredientRepository
    )
    pantry: InMemoryPantryRepository = field(default_factory=InMemoryPantryRepository)
    meal_plan: InMemoryMealPlanRepository = field(
        default_factory=InMemoryMealPlanRepository
    )
    preferences: InMemoryPreferencesRepository = field(
        default_factory=InMemoryPreferencesRepository
    )
    mood: InMemoryMoodRepository = field(default_factory=InMemoryMoodRepository)
    recipes: InMemoryRecipeCatalog = field(default_factory=InMemoryRecipeCatalog)

    def reset(self) -> None:
        """Drop every stored record."""
        self.ingredients.ingredients.clear()
        self.pantry.entries.clear()
        self.meal_plan.entries.clear()
        self.preferences.preferences.clear()
        self.mood.entries.clear()
        self.recipes.recipes.clear()

    def seed(self, demo_user_id: str) -> None:
        """Load the demo ingredients, recipes and the demo user's pantry."""
        for ingredient in DEMO_INGREDIENTS:
            self.ingredients.ingredients[ingredient.id] = ingredient
        self.recipes.recipes.extend(DEMO_RECIPES)
        for ingredient_id, quantity in DEMO_PANTRY:
            ingredient = self.ingredients.ingredients[ingredient_id]
            self.pantry.create_entry(demo_user_id, ingredient, quantity)
