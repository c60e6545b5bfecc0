"""Pantry coverage calculation for recipes."""

from collections.abc import Iterable, Mapping

from replate.domain.pantry import PantryEntry
from replate.domain.recipes import IngredientCoverage, Recipe, RecipeMatch


def pantry_quantities(entries: Iterable[PantryEntry]) -> dict[str, float]:
    """Collapse pantry entries into a name -> quantity mapping."""
    quantities: dict[str, float] = {}
    for entry in entries:
        name = entry.ingredient.name
        quantities[name] = quantities.get(name, 0.0) + entry.quantity
    return quantities


def names_match(pantry_name: str, recipe_name: str) -> bool:
    """Return True when either name contains the other, ignoring case.

    The loose match lets a "Chicken" entry satisfy "Chicken Breast", and also
    lets "Lime" satisfy "Lime Juice".
    """
    pantry_lower = pantry_name.strip().lower()
    recipe_lower = recipe_name.strip().lower()
    if not pantry_lower or not recipe_lower:
        return False
    return pantry_lower in recipe_lower or recipe_lower in pantry_lower


def available_quantity(pantry: Mapping[str, float], ingredient_name: str) -> float:
    """Sum the quantities of every pantry item matching the ingredient."""
    return sum(
        quantity
        for name, quantity in pantry.items()
        if names_match(name, ingredient_name)
    )


def has_main_ingredient(pantry: Mapping[str, float], recipe: Recipe) -> bool:
    """Return True when the recipe's first ingredient is in the pantry."""
    if not recipe.ingredients:
        return False
    main = recipe.ingredients[0].name
    return any(names_match(name, main) for name in pantry)


def compute_coverage(pantry: Mapping[str, float], recipe: Recipe) -> RecipeMatch:
    """Annotate a recipe with available and missing ingredient amounts."""
    lines: list[IngredientCoverage] = []
    for ingredient in recipe.ingredients:
        available = available_quantity(pantry, ingredient.name)
        lines.append(
            IngredientCoverage(
                name=ingredient.name,
                needed=ingredient.quantity,
                available=available,
                missing=max(0.0, ingredient.quantity - available),
                unit=ingredient.unit,
            )
        )
    total = len(lines)
    available_count = sum(1 for line in lines if line.is_available)
    return RecipeMatch(
        recipe=recipe,
        available_ingredients=available_count,
        total_ingredients=total,
        coverage=available_count / total if total else 0.0,
        missing_ingredients=[line for line in lines if not line.is_available],
    )


def match_recipes(
    pantry: Mapping[str, float], recipes: Iterable[Recipe]
) -> list[RecipeMatch]:
    """Return coverage for recipes that pass the main-ingredient gate."""
    return [
        compute_coverage(pantry, recipe)
        for recipe in recipes
        if has_main_ingredient(pantry, recipe)
    ]
