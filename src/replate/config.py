"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    recipe_source: str = "static"
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_store: bool = False
    suggestion_timeout_seconds: float = 8.0
    suggestion_limit: int = 5
    mood_cooldown_hours: float = 3
    demo_user_id: str = "demo-user-123"
    seed_demo_data: bool = True
    admin_token: str | None = None
    cors_allowed_origins: str = "*"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse the comma separated CORS origins setting."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().rstrip("/")
        if value and value not in origins:
            origins.append(value)
    return origins
