"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from replate.api.admin import router as admin_router
from replate.api.errors import install_exception_handlers
from replate.api.meal_plan import router as meal_plan_router
from replate.api.mood import router as mood_router
from replate.api.pantry import router as pantry_router
from replate.api.profile import router as profile_router
from replate.api.suggestions import router as suggestions_router
from replate.app_logging import configure_logging
from replate.config import parse_allowed_origins
from replate.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Replate API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(app)

    app.include_router(pantry_router)
    app.include_router(meal_plan_router)
    app.include_router(profile_router)
    app.include_router(suggestions_router)
    app.include_router(mood_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "OK", "message": "Replate API is running"}

    return app
