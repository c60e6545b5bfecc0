"""Domain models for ingredients and pantry entries."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Ingredient:
    """An ingredient with its canonical unit of measure."""

    id: str
    name: str
    unit: str


@dataclass(frozen=True)
class PantryEntry:
    """Quantity of one ingredient held in a user's pantry."""

    id: str
    user_id: str
    ingredient: Ingredient
    quantity: float
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PantryAddResult:
    """Outcome of adding an ingredient to a pantry."""

    entry: PantryEntry
    was_existing: bool
    message: str
