"""Supabase repository for the ingredient catalog."""

from dataclasses import dataclass

from supabase import Client

from replate.domain.pantry import Ingredient
from replate.services.pantry import IngredientRepository


@dataclass
class SupabaseIngredientRepository(IngredientRepository):
    """Supabase-backed ingredient catalog."""

    client: Client

    def list_ingredients(self) -> list[Ingredient]:
        """Return every ingredient ordered by name."""
        response = (
            self.client.table("ingredients")
            .select("id, name, unit")
            .order("name", desc=False)
            .execute()
        )
        return [parse_ingredient(row) for row in response.data or []]

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient by id, if present."""
        response = (
            self.client.table("ingredients")
            .select("id, name, unit")
            .eq("id", ingredient_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_ingredient(response.data[0])

    def find_by_name(self, name: str) -> Ingredient | None:
        """Return an ingredient with the same name, ignoring case."""
        response = (
            self.client.table("ingredients")
            .select("id, name, unit")
            .ilike("name", escape_like(name.strip()))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_ingredient(response.data[0])

    def create_ingredient(self, name: str, unit: str) -> Ingredient:
        """Create a custom ingredient and return it."""
        response = (
            self.client.table("ingredients")
            .insert({"name": name, "unit": unit})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create ingredient")
        return parse_ingredient(response.data[0])


def parse_ingredient(row: dict[str, object]) -> Ingredient:
    """Parse an ingredient row into a domain model."""
    return Ingredient(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        unit=str(row.get("unit", "")),
    )


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
