"""Supabase-backed recipe catalog."""

from dataclasses import dataclass

from supabase import Client

from replate.domain.recipes import Recipe, RecipeIngredient
from replate.services.suggestions import RecipeCatalog


@dataclass
class SupabaseRecipeCatalog(RecipeCatalog):
    """Reads catalog recipes with their ingredient lists."""

    client: Client

    def list_recipes(self) -> list[Recipe]:
        """Return every catalog recipe ordered by id."""
        response = (
            self.client.table("recipes")
            .select(
                "id, title, instructions, minutes, calories, protein, carbs, fat, "
                "photo_url, ingredients"
            )
            .order("id", desc=False)
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]


def _parse_recipe(row: dict[str, object]) -> Recipe:
    raw_ingredients = row.get("ingredients")
    ingredients = tuple(
        RecipeIngredient(
            name=str(item.get("name", "")),
            quantity=float(item.get("quantity", 0.0)),
            unit=str(item.get("unit", "")),
        )
        for item in (raw_ingredients if isinstance(raw_ingredients, list) else [])
        if isinstance(item, dict)
    )
    photo_url = row.get("photo_url")
    return Recipe(
        id=str(row["id"]),
        title=str(row.get("title", "")),
        instructions=str(row.get("instructions", "")),
        minutes=int(row.get("minutes", 0) or 0),
        ingredients=ingredients,
        calories=_optional_float(row.get("calories")),
        protein=_optional_float(row.get("protein")),
        carbs=_optional_float(row.get("carbs")),
        fat=_optional_float(row.get("fat")),
        photo_url=str(photo_url) if photo_url else None,
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    if isinstance(value, int | float | str):
        return float(value)
    return None
