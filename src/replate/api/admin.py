"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from replate.domain.errors import ValidationError

if TYPE_CHECKING:
    from replate.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])

_logger = logging.getLogger(__name__)


def _get_admin_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str | None = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not admin_token or not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/reset", dependencies=[Depends(require_admin)])
async def reset_store(request: Request) -> dict[str, object]:
    """Clear the in-memory store and reload the demo data."""
    container: AppContainer = request.app.state.container
    store = container.store
    if store is None:
        raise ValidationError("Reset is only available with in-memory storage")
    store.reset()
    if container.settings.seed_demo_data:
        store.seed(container.settings.demo_user_id)
    _logger.info("In-memory store reset")
    return {"success": True, "seeded": container.settings.seed_demo_data}
