"""Pantry and ingredient catalog services."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from replate.domain.errors import NotFoundError, ValidationError
from replate.domain.pantry import Ingredient, PantryAddResult, PantryEntry

DEFAULT_UNIT = "pieces"
DEFAULT_QUANTITY = 1.0

_logger = logging.getLogger(__name__)


class IngredientRepository(Protocol):
    """Persistence interface for the ingredient catalog."""

    def list_ingredients(self) -> list[Ingredient]:
        """Return every known ingredient."""

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def find_by_name(self, name: str) -> Ingredient | None:
        """Return an ingredient whose name matches, ignoring case."""

    def create_ingredient(self, name: str, unit: str) -> Ingredient:
        """Create a custom ingredient and return it."""


class PantryRepository(Protocol):
    """Persistence interface for pantry entries."""

    def list_entries(self, user_id: str) -> list[PantryEntry]:
        """Return a user's pantry entries."""

    def get_entry(self, user_id: str, ingredient_id: str) -> PantryEntry | None:
        """Return the user's entry for an ingredient, if present."""

    def create_entry(
        self, user_id: str, ingredient: Ingredient, quantity: float
    ) -> PantryEntry:
        """Create a pantry entry and return it."""

    def update_quantity(self, entry: PantryEntry, quantity: float) -> PantryEntry:
        """Set an entry's quantity and return the updated entry."""

    def delete_entry(self, user_id: str, ingredient_id: str) -> None:
        """Delete the user's entry for an ingredient, if present."""


@dataclass
class PantryService:
    """Application service for pantry contents."""

    ingredient_repository: IngredientRepository
    pantry_repository: PantryRepository

    def list_pantry(self, user_id: str) -> list[PantryEntry]:
        """Return the user's pantry."""
        return self.pantry_repository.list_entries(user_id)

    def list_ingredients(self) -> list[Ingredient]:
        """Return the ingredient catalog."""
        return self.ingredient_repository.list_ingredients()

    def search_ingredients(self, query: str | None) -> list[Ingredient]:
        """Return ingredients whose name contains the query."""
        if not query or not query.strip():
            return []
        needle = query.strip().lower()
        return [
            ingredient
            for ingredient in self.ingredient_repository.list_ingredients()
            if needle in ingredient.name.lower()
        ]

    def add_ingredient(
        self,
        user_id: str,
        ingredient_id: str | None = None,
        quantity: float | None = None,
        custom_ingredient: dict[str, object] | None = None,
    ) -> PantryAddResult:
        """Add an ingredient, merging into an existing entry when present."""
        qty = DEFAULT_QUANTITY if quantity is None else float(quantity)
        if not math.isfinite(qty):
            raise ValidationError("Quantity must be a finite number")
        if qty < 0:
            raise ValidationError("Quantity must not be negative")
        ingredient = self._resolve_ingredient(ingredient_id, custom_ingredient)

        existing = self.pantry_repository.get_entry(user_id, ingredient.id)
        if existing is not None:
            new_qty = existing.quantity + qty
            entry = self.pantry_repository.update_quantity(existing, new_qty)
            _logger.info(
                "Pantry merge: user=%s ingredient=%s qty=%s",
                user_id,
                ingredient.id,
                new_qty,
            )
            return PantryAddResult(
                entry=entry,
                was_existing=True,
                message=f"Updated {ingredient.name} quantity to {_format_qty(new_qty)}",
            )

        entry = self.pantry_repository.create_entry(user_id, ingredient, qty)
        return PantryAddResult(
            entry=entry,
            was_existing=False,
            message=f"Added {_format_qty(qty)} {ingredient.name} to pantry",
        )

    def remove_ingredient(self, user_id: str, ingredient_id: str) -> None:
        """Remove an ingredient from the pantry; absent entries are ignored."""
        self.pantry_repository.delete_entry(user_id, ingredient_id)

    def _resolve_ingredient(
        self, ingredient_id: str | None, custom: dict[str, object] | None
    ) -> Ingredient:
        if ingredient_id:
            ingredient = self.ingredient_repository.get_ingredient(ingredient_id)
            if ingredient is None:
                raise NotFoundError("Ingredient not found")
            return ingredient
        if custom:
            name = str(custom.get("name") or "").strip()
            if not name:
                raise ValidationError("Custom ingredient name is required")
            existing = self.ingredient_repository.find_by_name(name)
            if existing is not None:
                return existing
            unit = str(custom.get("unit") or DEFAULT_UNIT).strip() or DEFAULT_UNIT
            return self.ingredient_repository.create_ingredient(name, unit)
        raise ValidationError("Ingredient ID or custom ingredient required")


def _format_qty(value: float) -> str:
    return f"{value:g}"
