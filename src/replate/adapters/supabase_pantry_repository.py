"""Supabase repository for pantry entries."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from replate.adapters.supabase_ingredient_repository import parse_ingredient
from replate.domain.pantry import Ingredient, PantryEntry
from replate.services.pantry import PantryRepository

_COLUMNS = (
    "id, user_id, ingredient_id, quantity, created_at, updated_at, "
    "ingredients(id, name, unit)"
)


@dataclass
class SupabasePantryRepository(PantryRepository):
    """Supabase implementation for pantry entries."""

    client: Client

    def list_entries(self, user_id: str) -> list[PantryEntry]:
        """Return a user's pantry entries."""
        response = (
            self.client.table("pantry_items")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def get_entry(self, user_id: str, ingredient_id: str) -> PantryEntry | None:
        """Return the user's entry for an ingredient, if present."""
        response = (
            self.client.table("pantry_items")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("ingredient_id", ingredient_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def create_entry(
        self, user_id: str, ingredient: Ingredient, quantity: float
    ) -> PantryEntry:
        """Insert a pantry entry and return it."""
        response = (
            self.client.table("pantry_items")
            .insert(
                {
                    "user_id": user_id,
                    "ingredient_id": ingredient.id,
                    "quantity": quantity,
                    "created_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create pantry entry")
        return _parse_entry(response.data[0], ingredient)

    def update_quantity(self, entry: PantryEntry, quantity: float) -> PantryEntry:
        """Update an entry's quantity and return it."""
        response = (
            self.client.table("pantry_items")
            .update(
                {
                    "quantity": quantity,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", entry.id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update pantry entry")
        return _parse_entry(response.data[0], entry.ingredient)

    def delete_entry(self, user_id: str, ingredient_id: str) -> None:
        """Delete the user's entry for an ingredient."""
        self.client.table("pantry_items").delete().eq("user_id", user_id).eq(
            "ingredient_id", ingredient_id
        ).execute()


def _parse_entry(
    row: dict[str, object], ingredient: Ingredient | None = None
) -> PantryEntry:
    """Parse a pantry row, using the embedded ingredient when present."""
    embedded = row.get("ingredients")
    if isinstance(embedded, dict):
        ingredient = parse_ingredient(embedded)
    if ingredient is None:
        ingredient = Ingredient(id=str(row.get("ingredient_id", "")), name="", unit="")
    return PantryEntry(
        id=str(row["id"]),
        user_id=str(row.get("user_id", "")),
        ingredient=ingredient,
        quantity=float(row.get("quantity", 0.0)),
        created_at=_parse_timestamp(row.get("created_at")) or datetime.now(tz=UTC),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
