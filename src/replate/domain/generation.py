"""Models for generated recipe suggestions."""

from pydantic import BaseModel, Field


class GeneratedIngredient(BaseModel):
    """Single ingredient line returned by the recipe generator."""

    name: str
    quantity: float = Field(ge=0.0)
    unit: str


class GeneratedRecipe(BaseModel):
    """One recipe returned by the recipe generator."""

    title: str
    instructions: str
    minutes: int = Field(ge=0)
    calories: float | None = Field(default=None, ge=0.0)
    protein: float | None = Field(default=None, ge=0.0)
    carbs: float | None = Field(default=None, ge=0.0)
    fat: float | None = Field(default=None, ge=0.0)
    ingredients: list[GeneratedIngredient]


class GeneratedRecipes(BaseModel):
    """Structured output for recipe generation."""

    recipes: list[GeneratedRecipe]
