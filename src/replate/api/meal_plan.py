"""Weekly meal plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from replate.api.schemas import (
    MealPlanAddRequest,
    serialize_meal_plan,
    serialize_meal_plan_entry,
)

if TYPE_CHECKING:
    from replate.containers import AppContainer

router = APIRouter(prefix="/meal-plan", tags=["meal-plan"])


@router.get("/{user_id}")
async def get_meal_plan(user_id: str, request: Request) -> dict[str, object]:
    """Return the user's plan grouped by day and meal slot."""
    container: AppContainer = request.app.state.container
    return serialize_meal_plan(container.meal_plan_service.get_plan(user_id))


@router.post("")
async def add_meal(body: MealPlanAddRequest, request: Request) -> dict[str, object]:
    """Schedule a recipe snapshot."""
    container: AppContainer = request.app.state.container
    entry = container.meal_plan_service.add_meal(
        body.user_id or container.settings.demo_user_id,
        day=body.day,
        meal_time=body.meal_time,
        recipe=body.recipe,
    )
    return serialize_meal_plan_entry(entry)


@router.delete("/{day}/{meal_id}")
async def remove_meal(day: str, meal_id: str, request: Request) -> dict[str, bool]:
    """Remove a scheduled meal."""
    container: AppContainer = request.app.state.container
    container.meal_plan_service.remove_meal(day, meal_id)
    return {"success": True}
