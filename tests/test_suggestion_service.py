"""Tests for suggestion assembly and the generator fallback."""

import asyncio

import pytest

from replate.adapters.memory_repositories import MemoryStore
from replate.services.pantry import PantryService
from replate.services.preferences import PreferencesService
from replate.services.suggestions import SuggestionRequest, SuggestionService
from tests.conftest import DEMO_USER, FakeRecipeGenerator, make_recipe


def _service(store: MemoryStore, **kwargs) -> SuggestionService:
    return SuggestionService(
        pantry_service=PantryService(store.ingredients, store.pantry),
        preferences_service=PreferencesService(store.preferences),
        catalog=store.recipes,
        **kwargs,
    )


def _ids(result) -> list[str]:
    return [match.recipe.id for match in result.recipes]


def test_demo_pantry_suggestions(store: MemoryStore) -> None:
    result = asyncio.run(_service(store).suggest(DEMO_USER))

    assert _ids(result) == ["1", "6", "2", "7", "5"]
    assert result.source == "catalog"
    assert result.pantry_count == 4
    assert result.message == "Found 5 recipes matching your dietary preferences!"
    assert result.dietary_summary.filtered_count == 0
    assert result.dietary_summary.using_saved_preferences
    assert result.recipes[0].coverage == pytest.approx(0.6)


def test_inline_vegan_preferences(store: MemoryStore) -> None:
    result = asyncio.run(
        _service(store).suggest(
            DEMO_USER, SuggestionRequest(preferences={"diet": "vegan"})
        )
    )

    assert _ids(result) == ["5"]
    assert result.dietary_summary.diet == "vegan"
    assert result.dietary_summary.filtered_count == 4
    assert not result.dietary_summary.using_saved_preferences


def test_saved_allergy_preferences(store: MemoryStore) -> None:
    service = _service(store)
    service.preferences_service.save(DEMO_USER, {"allergies": ["dairy"]})

    result = asyncio.run(service.suggest(DEMO_USER))

    assert _ids(result) == ["1", "6", "7", "5"]
    assert result.dietary_summary.allergies == ["dairy"]
    assert result.dietary_summary.filtered_count == 1
    assert result.dietary_summary.using_saved_preferences


def test_disliked_ingredient_lowers_rank(store: MemoryStore) -> None:
    result = asyncio.run(
        _service(store).suggest(
            DEMO_USER, SuggestionRequest(disliked_ingredients=("rice",))
        )
    )

    assert _ids(result)[:2] == ["6", "1"]


def test_empty_pantry_returns_nothing(store: MemoryStore) -> None:
    result = asyncio.run(_service(store).suggest("new-user"))

    assert result.recipes == []
    assert result.pantry_count == 0
    assert result.message == "Found 0 recipes matching your dietary preferences!"


def test_limit_truncates(store: MemoryStore) -> None:
    result = asyncio.run(_service(store, limit=2).suggest(DEMO_USER))

    assert _ids(result) == ["1", "6"]


def test_generated_recipes_are_used(store: MemoryStore) -> None:
    generator = FakeRecipeGenerator(
        recipes=[
            make_recipe(
                "Chicken Onion Stir Fry",
                ("Chicken Breast", 1, "lbs"),
                ("Onion", 1, "pieces"),
                id="ai-1",
            )
        ]
    )

    result = asyncio.run(_service(store, generator=generator).suggest(DEMO_USER))

    assert result.source == "generated"
    assert _ids(result) == ["ai-1"]
    assert result.recipes[0].coverage == 1
    assert len(generator.contexts[0].pantry) == 4


def test_slow_generator_falls_back_to_catalog(store: MemoryStore) -> None:
    generator = FakeRecipeGenerator(delay_seconds=1.0)
    service = _service(
        store, generator=generator, generation_timeout_seconds=0.01
    )

    result = asyncio.run(service.suggest(DEMO_USER))

    assert result.source == "catalog"
    assert _ids(result) == ["1", "6", "2", "7", "5"]


def test_failing_generator_falls_back_to_catalog(store: MemoryStore) -> None:
    generator = FakeRecipeGenerator(error=RuntimeError("boom"))

    result = asyncio.run(_service(store, generator=generator).suggest(DEMO_USER))

    assert result.source == "catalog"
    assert len(generator.contexts) == 1


def test_empty_generation_falls_back_to_catalog(store: MemoryStore) -> None:
    result = asyncio.run(
        _service(store, generator=FakeRecipeGenerator()).suggest(DEMO_USER)
    )

    assert result.source == "catalog"
