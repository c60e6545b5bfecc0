"""Demo ingredients, pantry and recipe catalog."""

from replate.domain.pantry import Ingredient
from replate.domain.recipes import Recipe, RecipeIngredient

DEMO_INGREDIENTS: tuple[Ingredient, ...] = (
    Ingredient("1", "Chicken Breast", "lbs"),
    Ingredient("2", "Rice", "cups"),
    Ingredient("3", "Onion", "pieces"),
    Ingredient("4", "Garlic", "cloves"),
    Ingredient("5", "Tomato", "pieces"),
    Ingredient("6", "Olive Oil", "tbsp"),
    Ingredient("7", "Salt", "tsp"),
    Ingredient("8", "Black Pepper", "tsp"),
    Ingredient("9", "Eggs", "pieces"),
    Ingredient("10", "Milk", "cups"),
)

# (ingredient id, quantity) pairs stocked for the demo user.
DEMO_PANTRY: tuple[tuple[str, float], ...] = (
    ("1", 2),
    ("3", 1),
    ("4", 3),
    ("9", 6),
)


def _photo(slug: str) -> str:
    return f"https://images.unsplash.com/{slug}?w=500"


def _items(*rows: tuple[str, float, str]) -> tuple[RecipeIngredient, ...]:
    return tuple(RecipeIngredient(name, qty, unit) for name, qty, unit in rows)


DEMO_RECIPES: tuple[Recipe, ...] = (
    Recipe(
        id="1",
        title="Simple Chicken and Rice",
        minutes=30,
        calories=450,
        protein=35.5,
        carbs=45,
        fat=8,
        instructions=(
            "1. Season chicken with salt and pepper.\n"
            "2. Cook chicken in olive oil until golden.\n"
            "3. Add rice and water, simmer until cooked.\n"
            "4. Serve hot."
        ),
        photo_url=_photo("photo-1565299624946-b28f40a0ca4b"),
        ingredients=_items(
            ("Chicken Breast", 1, "lbs"),
            ("Rice", 1.5, "cups"),
            ("Onion", 1, "pieces"),
            ("Garlic", 2, "cloves"),
            ("Olive Oil", 2, "tbsp"),
        ),
    ),
    Recipe(
        id="2",
        title="Scrambled Eggs",
        minutes=10,
        calories=200,
        protein=15.0,
        carbs=2,
        fat=14,
        instructions=(
            "1. Beat eggs with milk, salt, and pepper.\n"
            "2. Heat butter in pan.\n"
            "3. Add eggs and scramble gently.\n"
            "4. Serve immediately."
        ),
        photo_url=_photo("photo-1525351484163-7529414344d8"),
        ingredients=_items(
            ("Eggs", 3, "pieces"),
            ("Milk", 0.25, "cups"),
            ("Butter", 1, "tbsp"),
            ("Salt", 0.25, "tsp"),
            ("Black Pepper", 0.25, "tsp"),
        ),
    ),
    Recipe(
        id="3",
        title="Vegan Buddha Bowl",
        minutes=25,
        calories=320,
        protein=12,
        carbs=35,
        fat=15,
        instructions=(
            "1. Roast vegetables with olive oil.\n"
            "2. Cook quinoa.\n"
            "3. Prepare tahini dressing.\n"
            "4. Combine all ingredients in a bowl."
        ),
        photo_url=_photo("photo-1512621776951-a57141f2eefd"),
        ingredients=_items(
            ("Quinoa", 1, "cups"),
            ("Chickpeas", 1, "cups"),
            ("Tomato", 1, "pieces"),
            ("Tahini", 2, "tbsp"),
            ("Olive Oil", 1, "tbsp"),
        ),
    ),
    Recipe(
        id="4",
        title="Keto Salmon with Asparagus",
        minutes=20,
        calories=380,
        protein=28,
        carbs=8,
        fat=25,
        instructions=(
            "1. Season salmon with herbs.\n"
            "2. Pan-sear salmon.\n"
            "3. Roast asparagus with olive oil.\n"
            "4. Serve together."
        ),
        photo_url=_photo("photo-1467003909585-2f8a72700288"),
        ingredients=_items(
            ("Salmon", 1, "lbs"),
            ("Asparagus", 1, "bunch"),
            ("Olive Oil", 1, "tbsp"),
            ("Garlic", 2, "cloves"),
        ),
    ),
    Recipe(
        id="5",
        title="Mediterranean Pasta",
        minutes=35,
        calories=420,
        protein=18,
        carbs=55,
        fat=12,
        instructions=(
            "1. Cook pasta.\n"
            "2. Sauté garlic and tomatoes in olive oil.\n"
            "3. Add herbs and olives.\n"
            "4. Toss with pasta."
        ),
        photo_url=_photo("photo-1621996346565-e3dbc353d2e5"),
        ingredients=_items(
            ("Garlic", 3, "cloves"),
            ("Pasta", 1, "lbs"),
            ("Tomato", 2, "pieces"),
            ("Olive Oil", 2, "tbsp"),
            ("Olives", 0.5, "cups"),
            ("Black Pepper", 0.5, "tsp"),
        ),
    ),
    Recipe(
        id="6",
        title="Tomato Onion Omelette",
        minutes=15,
        calories=260,
        protein=17,
        carbs=9,
        fat=17,
        instructions=(
            "1. Whisk eggs with salt.\n"
            "2. Soften onion and tomato in olive oil.\n"
            "3. Pour in eggs and cook until set.\n"
            "4. Fold and serve."
        ),
        ingredients=_items(
            ("Eggs", 2, "pieces"),
            ("Onion", 0.5, "pieces"),
            ("Tomato", 1, "pieces"),
            ("Olive Oil", 1, "tbsp"),
            ("Salt", 0.25, "tsp"),
        ),
    ),
    Recipe(
        id="7",
        title="Garlic Herb Chicken",
        minutes=40,
        calories=390,
        protein=42,
        carbs=4,
        fat=21,
        instructions=(
            "1. Rub chicken with garlic, herbs, salt and pepper.\n"
            "2. Sear in olive oil.\n"
            "3. Finish in the oven until cooked through.\n"
            "4. Rest before slicing."
        ),
        ingredients=_items(
            ("Chicken Breast", 1.5, "lbs"),
            ("Garlic", 4, "cloves"),
            ("Olive Oil", 2, "tbsp"),
            ("Salt", 1, "tsp"),
            ("Black Pepper", 0.5, "tsp"),
        ),
    ),
)
