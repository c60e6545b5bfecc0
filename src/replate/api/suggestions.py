"""Recipe suggestion endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from replate.api.schemas import SuggestRequest, serialize_suggestions
from replate.services.suggestions import SuggestionRequest

if TYPE_CHECKING:
    from replate.containers import AppContainer

router = APIRouter(tags=["suggestions"])


@router.post("/suggest")
async def suggest(
    request: Request, body: SuggestRequest | None = None
) -> dict[str, object]:
    """Return ranked recipes the user's pantry can mostly cover."""
    container: AppContainer = request.app.state.container
    resolved = body or SuggestRequest()
    result = await container.suggestion_service.suggest(
        resolved.user_id or container.settings.demo_user_id,
        SuggestionRequest(
            preferences=resolved.preferences,
            max_minutes=resolved.max_minutes,
            protein_target=resolved.protein_target,
            disliked_ingredients=tuple(resolved.disliked_ingredients),
        ),
    )
    return serialize_suggestions(result)
