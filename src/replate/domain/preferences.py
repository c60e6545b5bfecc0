"""Dietary preference models and option catalogs."""

from dataclasses import dataclass

from replate.domain.errors import ValidationError

DEFAULT_DIET = "none"


@dataclass(frozen=True)
class DietaryPreferences:
    """A user's declared diet, allergies and personal restrictions."""

    diet: str = DEFAULT_DIET
    allergies: tuple[str, ...] = ()
    restricted_ingredients: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: dict[str, object] | None) -> "DietaryPreferences":
        """Build preferences from a loosely shaped JSON payload."""
        if not payload:
            return cls()
        diet = payload.get("diet") or DEFAULT_DIET
        return cls(
            diet=str(diet).strip().lower(),
            allergies=_clean_strings(payload, "allergies"),
            restricted_ingredients=_clean_strings(payload, "restricted_ingredients"),
        )

    def to_payload(self) -> dict[str, object]:
        """Return the JSON shape used by the API and storage."""
        return {
            "diet": self.diet,
            "allergies": list(self.allergies),
            "restricted_ingredients": list(self.restricted_ingredients),
        }


@dataclass(frozen=True)
class DietOption:
    """A selectable diet."""

    value: str
    label: str
    description: str


@dataclass(frozen=True)
class AllergyOption:
    """A selectable allergy category."""

    value: str
    label: str
    severity: str


DIET_OPTIONS: tuple[DietOption, ...] = (
    DietOption("none", "No specific diet", "No dietary restrictions"),
    DietOption("keto", "Keto", "Very low carb, high fat diet"),
    DietOption("low-carb", "Low Carb", "Reduced carbohydrate intake"),
    DietOption("vegetarian", "Vegetarian", "No meat or fish"),
    DietOption("vegan", "Vegan", "No animal products"),
    DietOption("halal", "Halal", "Islamic dietary guidelines"),
    DietOption("kosher", "Kosher", "Jewish dietary laws"),
    DietOption("paleo", "Paleo", "Paleolithic diet principles"),
    DietOption("mediterranean", "Mediterranean", "Heart-healthy Mediterranean style"),
    DietOption("dash", "DASH", "Dietary Approaches to Stop Hypertension"),
)

ALLERGY_OPTIONS: tuple[AllergyOption, ...] = (
    AllergyOption("peanuts", "Peanuts", "high"),
    AllergyOption("tree nuts", "Tree Nuts", "high"),
    AllergyOption("shellfish", "Shellfish", "high"),
    AllergyOption("fish", "Fish", "high"),
    AllergyOption("eggs", "Eggs", "high"),
    AllergyOption("dairy", "Dairy", "high"),
    AllergyOption("soy", "Soy", "medium"),
    AllergyOption("wheat", "Wheat", "medium"),
    AllergyOption("gluten", "Gluten", "medium"),
    AllergyOption("sesame", "Sesame", "medium"),
)


def _clean_strings(payload: dict[str, object], key: str) -> tuple[str, ...]:
    """Normalize a list of strings, dropping blanks and duplicates.

    A bare string is read as a one-item list.
    """
    raw = payload.get(key)
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list | tuple | set | frozenset):
        raise ValidationError(f"{key} must be a list of strings")
    values: list[str] = []
    for item in raw:
        value = str(item).strip()
        if value and value not in values:
            values.append(value)
    return tuple(values)
