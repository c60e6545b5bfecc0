"""Generative recipe suggestions using LLMs."""

from dataclasses import dataclass
from typing import Protocol

from replate.domain.generation import GeneratedRecipes
from replate.domain.pantry import PantryEntry
from replate.domain.preferences import DietaryPreferences
from replate.domain.recipes import Recipe, RecipeIngredient

_NULLABLE_NUMBER = {"anyOf": [{"type": "number", "minimum": 0}, {"type": "null"}]}

RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "recipes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "instructions": {"type": "string"},
                    "minutes": {"type": "integer", "minimum": 0},
                    "calories": _NULLABLE_NUMBER,
                    "protein": _NULLABLE_NUMBER,
                    "carbs": _NULLABLE_NUMBER,
                    "fat": _NULLABLE_NUMBER,
                    "ingredients": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "name": {"type": "string"},
                                "quantity": {"type": "number", "minimum": 0},
                                "unit": {"type": "string"},
                            },
                            "required": ["name", "quantity", "unit"],
                            "additionalProperties": False,
                        },
                    },
                },
                "required": [
                    "title",
                    "instructions",
                    "minutes",
                    "calories",
                    "protein",
                    "carbs",
                    "fat",
                    "ingredients",
                ],
                "additionalProperties": False,
            },
        }
    },
    "required": ["recipes"],
    "additionalProperties": False,
}


@dataclass(frozen=True)
class PantryContext:
    """What the generator is told about the user's kitchen."""

    pantry: list[PantryEntry]
    preferences: DietaryPreferences


class RecipeGenerator(Protocol):
    """Interface for any source of generated recipes."""

    async def generate_recipes(self, context: PantryContext) -> list[Recipe]:
        """Return recipes suited to the pantry context."""


class RecipeGenerationClient(Protocol):
    """Interface for LLM structured recipe generation."""

    async def generate(
        self,
        *,
        model: str,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured recipe data."""


@dataclass
class RecipeGenerationService(RecipeGenerator):
    """Service that prepares generation prompts and validates results."""

    client: RecipeGenerationClient
    model: str
    store: bool
    recipe_count: int = 5

    async def generate_recipes(self, context: PantryContext) -> list[Recipe]:
        """Generate recipes for the pantry via the configured client."""
        raw = await self.client.generate(
            model=self.model,
            store=self.store,
            schema=RECIPE_SCHEMA,
            prompt=build_prompt(context, self.recipe_count),
        )
        generated = GeneratedRecipes.model_validate(raw)
        return [
            Recipe(
                id=f"ai-{index}",
                title=item.title,
                instructions=item.instructions,
                minutes=item.minutes,
                calories=item.calories,
                protein=item.protein,
                carbs=item.carbs,
                fat=item.fat,
                ingredients=tuple(
                    RecipeIngredient(
                        name=ingredient.name,
                        quantity=ingredient.quantity,
                        unit=ingredient.unit,
                    )
                    for ingredient in item.ingredients
                ),
            )
            for index, item in enumerate(generated.recipes, start=1)
        ]


def build_prompt(context: PantryContext, recipe_count: int) -> str:
    """Render the fixed recipe prompt for a pantry context."""
    if context.pantry:
        pantry_lines = "\n".join(
            f"- {entry.ingredient.name}: {entry.quantity:g} {entry.ingredient.unit}"
            for entry in context.pantry
        )
    else:
        pantry_lines = "- (empty)"
    preferences = context.preferences
    allergies = ", ".join(preferences.allergies) or "none"
    restrictions = ", ".join(preferences.restricted_ingredients) or "none"
    return (
        f"Suggest {recipe_count} home-cooking recipes that make the most of "
        "this pantry. List the main pantry ingredient first in each recipe's "
        "ingredient list and use the pantry's units where possible.\n"
        f"Pantry:\n{pantry_lines}\n"
        f"Diet: {preferences.diet}\n"
        f"Allergies: {allergies}\n"
        f"Avoid: {restrictions}\n"
        "Give numbered step-by-step instructions, total minutes, and per-serving "
        "calories, protein, carbs and fat in grams."
    )
