"""Allergy, diet and restriction filtering for recipes."""

from collections.abc import Callable, Sequence

from replate.domain.preferences import DEFAULT_DIET, DietaryPreferences
from replate.domain.recipes import Recipe, RecipeMatch

ALLERGEN_KEYWORDS: dict[str, tuple[str, ...]] = {
    "peanuts": ("peanut", "peanut butter", "peanut oil", "groundnut", "arachis"),
    "tree nuts": (
        "almond",
        "walnut",
        "cashew",
        "pistachio",
        "hazelnut",
        "pecan",
        "brazil nut",
        "macadamia",
        "pine nut",
    ),
    "shellfish": (
        "shrimp",
        "crab",
        "lobster",
        "crayfish",
        "prawn",
        "scallop",
        "oyster",
        "mussel",
        "clam",
        "squid",
        "octopus",
    ),
    "fish": (
        "salmon",
        "tuna",
        "cod",
        "halibut",
        "mackerel",
        "sardine",
        "anchovy",
        "fish sauce",
        "seafood",
    ),
    "eggs": ("egg", "egg white", "egg yolk", "mayonnaise", "meringue", "albumen"),
    "dairy": (
        "milk",
        "cheese",
        "butter",
        "cream",
        "yogurt",
        "whey",
        "casein",
        "lactose",
        "dairy",
    ),
    "soy": (
        "soy",
        "soybean",
        "tofu",
        "tempeh",
        "miso",
        "soy sauce",
        "edamame",
        "soy milk",
    ),
    "wheat": ("wheat", "flour", "bread", "pasta", "couscous", "bulgur", "seitan"),
    "gluten": (
        "wheat",
        "barley",
        "rye",
        "oats",
        "flour",
        "bread",
        "pasta",
        "beer",
        "gluten",
    ),
    "sesame": ("sesame", "tahini", "sesame oil", "sesame seed", "benne"),
}

_MEAT_KEYWORDS = (
    "chicken",
    "beef",
    "pork",
    "fish",
    "meat",
    "bacon",
    "ham",
    "turkey",
    "lamb",
)

# Recipes mentioning any of these are rejected.
DIET_EXCLUSIONS: dict[str, tuple[str, ...]] = {
    "vegetarian": _MEAT_KEYWORDS,
    "vegan": (
        *_MEAT_KEYWORDS,
        "milk",
        "cheese",
        "butter",
        "cream",
        "yogurt",
        "egg",
    ),
    "halal": ("pork", "bacon", "ham", "alcohol", "wine", "beer", "liquor"),
    "kosher": (
        "pork",
        "shellfish",
        "bacon",
        "ham",
        "alcohol",
        "wine",
        "mixing meat dairy",
    ),
    "paleo": ("grain", "wheat", "rice", "dairy", "processed", "sugar", "legume"),
}

# Recipes must mention at least one of these to be accepted.
DIET_INCLUSIONS: dict[str, tuple[str, ...]] = {
    "mediterranean": (
        "olive oil",
        "fish",
        "vegetables",
        "herbs",
        "tomato",
        "garlic",
    ),
    "dash": ("vegetables", "fruits", "whole grain", "low sodium"),
}

CARB_PERCENT_LIMITS: dict[str, float] = {"keto": 10.0, "low-carb": 20.0}


def allergen_keywords(allergy: str) -> tuple[str, ...]:
    """Expand an allergy category into the keywords it covers."""
    key = allergy.strip().lower()
    return ALLERGEN_KEYWORDS.get(key, (key,))


def contains_allergen(recipe: Recipe, allergy: str) -> bool:
    """Return True when the recipe text mentions the allergen."""
    text = recipe.searchable_text
    return any(keyword in text for keyword in allergen_keywords(allergy) if keyword)


def carb_calorie_percent(recipe: Recipe) -> float:
    """Share of calories coming from carbohydrates, in percent."""
    if not recipe.carbs:
        return 0.0
    return recipe.carbs * 4 / (recipe.calories or 1) * 100


def is_diet_compatible(recipe: Recipe, diet: str) -> bool:
    """Return True when the recipe satisfies the diet's rule."""
    key = diet.strip().lower()
    if key in CARB_PERCENT_LIMITS:
        return carb_calorie_percent(recipe) <= CARB_PERCENT_LIMITS[key]
    text = recipe.searchable_text
    if key in DIET_EXCLUSIONS:
        return not any(keyword in text for keyword in DIET_EXCLUSIONS[key])
    if key in DIET_INCLUSIONS:
        return any(keyword in text for keyword in DIET_INCLUSIONS[key])
    return True


def violates_restriction(recipe: Recipe, restriction: str) -> bool:
    """Return True when the recipe text mentions a personal restriction."""
    needle = restriction.strip().lower()
    return bool(needle) and needle in recipe.searchable_text


def preference_violations(recipe: Recipe, preferences: DietaryPreferences) -> int:
    """Count the allergy, diet and restriction rules a recipe breaks."""
    violations = sum(
        1 for allergy in preferences.allergies if contains_allergen(recipe, allergy)
    )
    if preferences.diet != DEFAULT_DIET and not is_diet_compatible(
        recipe, preferences.diet
    ):
        violations += 1
    violations += sum(
        1
        for restriction in preferences.restricted_ingredients
        if violates_restriction(recipe, restriction)
    )
    return violations


def filter_matches(
    matches: Sequence[RecipeMatch], preferences: DietaryPreferences
) -> list[RecipeMatch]:
    """Drop recipes that break any allergy, diet or restriction rule."""
    checks: list[Callable[[Recipe], bool]] = []
    if preferences.allergies:
        checks.append(
            lambda recipe: not any(
                contains_allergen(recipe, allergy) for allergy in preferences.allergies
            )
        )
    if preferences.diet and preferences.diet != DEFAULT_DIET:
        checks.append(lambda recipe: is_diet_compatible(recipe, preferences.diet))
    if preferences.restricted_ingredients:
        checks.append(
            lambda recipe: not any(
                violates_restriction(recipe, restriction)
                for restriction in preferences.restricted_ingredients
            )
        )

    filtered = list(matches)
    for check in checks:
        filtered = [match for match in filtered if check(match.recipe)]
    return filtered
