"""
sea_transport.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for the process entrypoint.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration, e.g. ``SEA_TRANSPORT_DATABASE_URL``.

    The app factory stores the instance on ``app.state.settings`` so request
    handlers see the same object the app was built with.
    """

    model_config = SettingsConfigDict(env_prefix="SEA_TRANSPORT_", case_sensitive=False)

    # dev/test create tables on startup; prod relies on Alembic.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "sea-transport"
    # Used as the prefix of alert headers (X-<app_name>-alert).
    app_name: str = "seaTransportApp"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "sea-transport"
    jwt_audience: str = "sea-transport-api"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./sea_transport.db"
    database_echo: bool = False

    # Pagination
    default_page_size: int = Field(default=20, ge=1)
    max_page_size: int = Field(default=2000, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build their own Settings(env="test", ...) and pass it to create_app;
# nothing below the app factory should call get_settings() directly.
