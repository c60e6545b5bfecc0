"""Request models and response serializers for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from replate.domain.meal_plan import MealPlanEntry
from replate.domain.mood import MoodEntry, MoodOption
from replate.domain.pantry import Ingredient, PantryAddResult, PantryEntry
from replate.domain.preferences import AllergyOption, DietOption
from replate.domain.recipes import IngredientCoverage, RecipeMatch
from replate.services.suggestions import DietarySummary, SuggestionResult


class ApiModel(BaseModel):
    """Base model accepting camelCase aliases or field names."""

    model_config = ConfigDict(populate_by_name=True)


class CustomIngredientPayload(ApiModel):
    """Ingredient created on the fly from the pantry form."""

    name: str | None = None
    unit: str | None = None


class PantryAddRequest(ApiModel):
    """Body of ``POST /pantry``."""

    user_id: str | None = Field(default=None, alias="userId")
    ingredient_id: str | None = Field(default=None, alias="ingredientId")
    qty: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    custom_ingredient: CustomIngredientPayload | None = Field(
        default=None, alias="customIngredient"
    )


class MealPlanAddRequest(ApiModel):
    """Body of ``POST /meal-plan``."""

    user_id: str | None = Field(default=None, alias="userId")
    day: str | None = None
    meal_time: str | None = Field(default=None, alias="mealTime")
    recipe: dict[str, object] | None = None


class PreferencesRequest(ApiModel):
    """Body of ``POST /profile/preferences``."""

    user_id: str | None = Field(default=None, alias="userId")
    preferences: dict[str, object] | None = None


class SuggestRequest(ApiModel):
    """Body of ``POST /suggest``."""

    user_id: str | None = Field(default=None, alias="userId")
    preferences: dict[str, object] | None = None
    max_minutes: int | None = Field(default=None, alias="maxMinutes", ge=0)
    protein_target: float | None = Field(default=None, alias="proteinTarget", ge=0)
    disliked_ingredients: list[str] = Field(
        default_factory=list, alias="dislikedIngredients"
    )


class MoodRequest(ApiModel):
    """Body of ``POST /mood-data``."""

    user_id: str | None = Field(default=None, alias="userId")
    meal_id: str | None = Field(default=None, alias="mealId")
    mood: str | None = None
    timestamp: datetime | None = None


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def serialize_ingredient(ingredient: Ingredient) -> dict[str, object]:
    return {"id": ingredient.id, "name": ingredient.name, "unit": ingredient.unit}


def serialize_pantry_entry(entry: PantryEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "qty": entry.quantity,
        "ingredients": serialize_ingredient(entry.ingredient),
        "createdAt": _iso(entry.created_at),
        "updatedAt": _iso(entry.updated_at),
    }


def serialize_pantry_add(result: PantryAddResult) -> dict[str, object]:
    return {
        **serialize_pantry_entry(result.entry),
        "message": result.message,
        "wasExisting": result.was_existing,
    }


def serialize_meal_plan_entry(entry: MealPlanEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "day": entry.day,
        "mealTime": entry.meal_time,
        "recipe": entry.recipe,
        "createdAt": _iso(entry.created_at),
    }


def serialize_meal_plan(
    plan: dict[str, dict[str, list[MealPlanEntry]]],
) -> dict[str, dict[str, list[dict[str, object]]]]:
    return {
        day: {
            meal_time: [serialize_meal_plan_entry(entry) for entry in entries]
            for meal_time, entries in slots.items()
        }
        for day, slots in plan.items()
    }


def serialize_mood_entry(entry: MoodEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "mealId": entry.meal_id,
        "mood": entry.mood,
        "timestamp": _iso(entry.timestamp),
        "reportedAt": _iso(entry.reported_at),
    }


def serialize_mood_option(option: MoodOption) -> dict[str, str]:
    return {"id": option.id, "label": option.label, "emoji": option.emoji}


def serialize_diet_option(option: DietOption) -> dict[str, str]:
    return {
        "value": option.value,
        "label": option.label,
        "description": option.description,
    }


def serialize_allergy_option(option: AllergyOption) -> dict[str, str]:
    return {"value": option.value, "label": option.label, "severity": option.severity}


def _serialize_coverage(item: IngredientCoverage) -> dict[str, object]:
    return {
        "name": item.name,
        "needed": item.needed,
        "available": item.available,
        "missing": item.missing,
        "unit": item.unit,
    }


def serialize_recipe_match(match: RecipeMatch) -> dict[str, object]:
    """Render a recipe with its coverage fields in the suggestion shape."""
    recipe = match.recipe
    return {
        "id": recipe.id,
        "title": recipe.title,
        "instructions": recipe.instructions,
        "minutes": recipe.minutes,
        "calories": recipe.calories,
        "protein": recipe.protein,
        "carbs": recipe.carbs,
        "fat": recipe.fat,
        "photo_url": recipe.photo_url,
        "ingredients": [
            {"name": item.name, "quantity": item.quantity, "unit": item.unit}
            for item in recipe.ingredients
        ],
        "availableIngredients": match.available_ingredients,
        "totalIngredients": match.total_ingredients,
        "coverage": match.coverage,
        "missingIngredients": [
            _serialize_coverage(item) for item in match.missing_ingredients
        ],
    }


def _serialize_summary(summary: DietarySummary) -> dict[str, object]:
    return {
        "diet": summary.diet,
        "allergies": summary.allergies,
        "restrictions": summary.restrictions,
        "filteredCount": summary.filtered_count,
        "usingSavedPreferences": summary.using_saved_preferences,
    }


def serialize_suggestions(result: SuggestionResult) -> dict[str, object]:
    return {
        "recipes": [serialize_recipe_match(match) for match in result.recipes],
        "message": result.message,
        "pantryCount": result.pantry_count,
        "dietarySummary": _serialize_summary(result.dietary_summary),
        "source": result.source,
    }
