"""Mood tracking endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from replate.api.schemas import (
    MoodRequest,
    serialize_mood_entry,
    serialize_mood_option,
)
from replate.domain.mood import MOOD_OPTIONS

if TYPE_CHECKING:
    from replate.containers import AppContainer

router = APIRouter(tags=["mood"])


@router.post("/mood-data")
async def record_mood(body: MoodRequest, request: Request) -> dict[str, object]:
    """Record a mood unless the user is inside the cooldown window."""
    container: AppContainer = request.app.state.container
    entry = container.mood_service.record(
        body.user_id or container.settings.demo_user_id,
        body.mood,
        meal_id=body.meal_id,
        timestamp=body.timestamp,
    )
    return serialize_mood_entry(entry)


@router.get("/mood-data/{user_id}")
async def list_moods(user_id: str, request: Request) -> dict[str, object]:
    """Return the user's mood entries, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.mood_service.list_entries(user_id)
    return {"moodEntries": [serialize_mood_entry(entry) for entry in entries]}


@router.get("/mood-options")
async def mood_options() -> list[dict[str, str]]:
    """Return the selectable mood tags."""
    return [serialize_mood_option(option) for option in MOOD_OPTIONS]
