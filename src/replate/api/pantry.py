"""Pantry and ingredient catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from replate.api.schemas import (
    PantryAddRequest,
    serialize_ingredient,
    serialize_pantry_add,
    serialize_pantry_entry,
)

if TYPE_CHECKING:
    from replate.containers import AppContainer

router = APIRouter(tags=["pantry"])


@router.get("/pantry/{user_id}")
async def get_pantry(user_id: str, request: Request) -> list[dict[str, object]]:
    """Return the user's pantry entries."""
    container: AppContainer = request.app.state.container
    entries = container.pantry_service.list_pantry(user_id)
    return [serialize_pantry_entry(entry) for entry in entries]


@router.post("/pantry")
async def add_to_pantry(body: PantryAddRequest, request: Request) -> dict[str, object]:
    """Add an ingredient, merging quantities with an existing entry."""
    container: AppContainer = request.app.state.container
    custom = (
        body.custom_ingredient.model_dump(exclude_none=True)
        if body.custom_ingredient is not None
        else None
    )
    result = container.pantry_service.add_ingredient(
        body.user_id or container.settings.demo_user_id,
        ingredient_id=body.ingredient_id,
        quantity=body.qty,
        custom_ingredient=custom,
    )
    return serialize_pantry_add(result)


@router.delete("/pantry/{user_id}/{ingredient_id}")
async def remove_from_pantry(
    user_id: str, ingredient_id: str, request: Request
) -> dict[str, bool]:
    """Remove an ingredient from the pantry."""
    container: AppContainer = request.app.state.container
    container.pantry_service.remove_ingredient(user_id, ingredient_id)
    return {"success": True}


@router.get("/ingredients")
async def list_ingredients(request: Request) -> list[dict[str, object]]:
    """Return the ingredient catalog."""
    container: AppContainer = request.app.state.container
    return [
        serialize_ingredient(ingredient)
        for ingredient in container.pantry_service.list_ingredients()
    ]


@router.get("/search-ingredients")
async def search_ingredients(
    request: Request, q: str | None = None
) -> list[dict[str, str]]:
    """Return ingredients whose name contains ``q``."""
    container: AppContainer = request.app.state.container
    return [
        {"id": ingredient.id, "name": ingredient.name}
        for ingredient in container.pantry_service.search_ingredients(q)
    ]
