"""Dietary preference endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from replate.api.schemas import (
    PreferencesRequest,
    serialize_allergy_option,
    serialize_diet_option,
)

if TYPE_CHECKING:
    from replate.containers import AppContainer

router = APIRouter(tags=["profile"])


@router.post("/profile/preferences")
async def save_preferences(
    body: PreferencesRequest, request: Request
) -> dict[str, object]:
    """Save a user's dietary preferences."""
    container: AppContainer = request.app.state.container
    preferences = container.preferences_service.save(body.user_id, body.preferences)
    return {
        "success": True,
        "message": "Dietary preferences saved successfully",
        "preferences": preferences.to_payload(),
    }


@router.get("/profile/preferences/{user_id}")
async def get_preferences(user_id: str, request: Request) -> dict[str, object]:
    """Return saved preferences, or the defaults."""
    container: AppContainer = request.app.state.container
    return {"preferences": container.preferences_service.get(user_id).to_payload()}


@router.get("/dietary-options")
async def dietary_options(request: Request) -> dict[str, object]:
    """Return the selectable diets and allergies."""
    container: AppContainer = request.app.state.container
    diets, allergies = container.preferences_service.options()
    return {
        "dietOptions": [serialize_diet_option(option) for option in diets],
        "allergyOptions": [serialize_allergy_option(option) for option in allergies],
    }
