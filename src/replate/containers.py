"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from replate.adapters.memory_repositories import MemoryStore
from replate.adapters.openai_recipe_client import OpenAIRecipeClient
from replate.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
)
from replate.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from replate.adapters.supabase_mood_repository import SupabaseMoodRepository
from replate.adapters.supabase_pantry_repository import SupabasePantryRepository
from replate.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from replate.adapters.supabase_recipe_repository import SupabaseRecipeCatalog
from replate.config import Settings
from replate.services.generation import RecipeGenerationService, RecipeGenerator
from replate.services.meal_plan import MealPlanRepository, MealPlanService
from replate.services.mood import MoodRepository, MoodService
from replate.services.pantry import (
    IngredientRepository,
    PantryRepository,
    PantryService,
)
from replate.services.preferences import PreferencesRepository, PreferencesService
from replate.services.suggestions import RecipeCatalog, SuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: MemoryStore | None
    pantry_service: PantryService
    preferences_service: PreferencesService
    meal_plan_service: MealPlanService
    mood_service: MoodService
    suggestion_service: SuggestionService
    close_resources: Callable[[], Awaitable[None]]


@dataclass(frozen=True)
class _Repositories:
    ingredients: IngredientRepository
    pantry: PantryRepository
    meal_plan: MealPlanRepository
    preferences: PreferencesRepository
    mood: MoodRepository
    recipes: RecipeCatalog


def _supabase_repositories(settings: Settings) -> _Repositories:
    if not settings.supabase_url or not settings.supabase_service_key:
        raise RuntimeError(
            "SUPABASE_URL and SUPABASE_SERVICE_KEY are required for supabase storage"
        )
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return _Repositories(
        ingredients=SupabaseIngredientRepository(client),
        pantry=SupabasePantryRepository(client),
        meal_plan=SupabaseMealPlanRepository(client),
        preferences=SupabasePreferencesRepository(client),
        mood=SupabaseMoodRepository(client),
        recipes=SupabaseRecipeCatalog(client),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    backend = resolved_settings.storage_backend.strip().lower()
    store: MemoryStore | None = None
    if backend == "memory":
        store = MemoryStore()
        if resolved_settings.seed_demo_data:
            store.seed(resolved_settings.demo_user_id)
        repositories = _Repositories(
            ingredients=store.ingredients,
            pantry=store.pantry,
            meal_plan=store.meal_plan,
            preferences=store.preferences,
            mood=store.mood,
            recipes=store.recipes,
        )
    elif backend == "supabase":
        repositories = _supabase_repositories(resolved_settings)
    else:
        raise RuntimeError(f"Unknown storage backend: {backend}")

    openai_client: OpenAIRecipeClient | None = None
    generator: RecipeGenerator | None = None
    if resolved_settings.recipe_source.strip().lower() == "openai":
        if not resolved_settings.openai_api_key:
            raise RuntimeError("OPENAI_API_KEY is required for openai recipes")
        openai_client = OpenAIRecipeClient.create(resolved_settings.openai_api_key)
        generator = RecipeGenerationService(
            client=openai_client,
            model=resolved_settings.openai_model,
            store=resolved_settings.openai_store,
            recipe_count=resolved_settings.suggestion_limit,
        )

    pantry_service = PantryService(repositories.ingredients, repositories.pantry)
    preferences_service = PreferencesService(repositories.preferences)
    meal_plan_service = MealPlanService(repositories.meal_plan)
    mood_service = MoodService(
        repositories.mood,
        cooldown=timedelta(hours=resolved_settings.mood_cooldown_hours),
    )
    suggestion_service = SuggestionService(
        pantry_service=pantry_service,
        preferences_service=preferences_service,
        catalog=repositories.recipes,
        generator=generator,
        generation_timeout_seconds=resolved_settings.suggestion_timeout_seconds,
        limit=resolved_settings.suggestion_limit,
    )

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        pantry_service=pantry_service,
        preferences_service=preferences_service,
        meal_plan_service=meal_plan_service,
        mood_service=mood_service,
        suggestion_service=suggestion_service,
        close_resources=close_resources,
    )
