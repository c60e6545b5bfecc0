"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from replate.adapters.memory_repositories import MemoryStore
from replate.config import Settings
from replate.containers import AppContainer, build_container
from replate.domain.pantry import Ingredient, PantryEntry
from replate.domain.recipes import Recipe, RecipeIngredient
from replate.services.generation import PantryContext, RecipeGenerator

DEMO_USER = "demo-user-123"


@dataclass
class FakeClock:
    """Manually advanced clock."""

    now: datetime = field(default_factory=lambda: datetime(2024, 5, 1, 12, tzinfo=UTC))

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@dataclass
class FakeRecipeGenerator(RecipeGenerator):
    """Generator returning canned recipes, optionally slow or failing."""

    recipes: list[Recipe] = field(default_factory=list)
    delay_seconds: float = 0.0
    error: Exception | None = None
    contexts: list[PantryContext] = field(default_factory=list)

    async def generate_recipes(self, context: PantryContext) -> list[Recipe]:
        self.contexts.append(context)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        return list(self.recipes)


def pantry_entry(name: str, quantity: float, unit: str = "pieces") -> PantryEntry:
    """Build a pantry entry for an ad-hoc ingredient."""
    return PantryEntry(
        id=f"entry-{name}",
        user_id=DEMO_USER,
        ingredient=Ingredient(id=f"ing-{name}", name=name, unit=unit),
        quantity=quantity,
        created_at=datetime(2024, 5, 1, tzinfo=UTC),
    )


def make_recipe(
    title: str,
    *ingredients: tuple[str, float, str],
    instructions: str = "",
    **extra: object,
) -> Recipe:
    """Build a recipe with the given ingredient rows."""
    return Recipe(
        id=str(extra.pop("id", title.lower().replace(" ", "-"))),
        title=title,
        instructions=instructions,
        minutes=int(extra.pop("minutes", 20)),
        ingredients=tuple(
            RecipeIngredient(name=name, quantity=qty, unit=unit)
            for name, qty, unit in ingredients
        ),
        **extra,  # type: ignore[arg-type]
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        storage_backend="memory",
        recipe_source="static",
        admin_token="admin-token",
        demo_user_id=DEMO_USER,
        seed_demo_data=True,
        cors_allowed_origins="*",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> MemoryStore:
    seeded = MemoryStore()
    seeded.seed(DEMO_USER)
    return seeded


@pytest.fixture
def container(settings: Settings, clock: FakeClock) -> AppContainer:
    built = build_container(settings)
    built.mood_service.clock = clock
    return built
