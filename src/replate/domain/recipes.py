"""Domain models for recipes and pantry coverage."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RecipeIngredient:
    """A line item in a recipe's ingredient list."""

    name: str
    quantity: float
    unit: str


@dataclass(frozen=True)
class Recipe:
    """A recipe from the catalog or a generative source."""

    id: str
    title: str
    instructions: str
    minutes: int
    ingredients: tuple[RecipeIngredient, ...] = ()
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    photo_url: str | None = None

    @property
    def searchable_text(self) -> str:
        """Lower-cased title and instructions used for keyword checks."""
        return f"{self.title} {self.instructions}".lower()


@dataclass(frozen=True)
class IngredientCoverage:
    """How much of one required ingredient the pantry holds."""

    name: str
    needed: float
    available: float
    missing: float
    unit: str

    @property
    def is_available(self) -> bool:
        return self.missing == 0


@dataclass(frozen=True)
class RecipeMatch:
    """A recipe annotated with its pantry coverage."""

    recipe: Recipe
    available_ingredients: int
    total_ingredients: int
    coverage: float
    missing_ingredients: list[IngredientCoverage] = field(default_factory=list)
