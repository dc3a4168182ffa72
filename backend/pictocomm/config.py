from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PICTOCOMM_",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8000",
    ]

    cors_origin_regex: str | None = None
    trusted_hosts: list[str] = ["*"]
    root_path: str = ""

    # Board
    page_size: int = Field(default=20, gt=0)  # Tiles shown in the "most used" view
    restricted_viewer: bool = False  # Hide unapproved pictograms from the catalog stream
    seed_demo_catalog: bool = True

    # Collaborator policies
    persist_favorites: bool = False  # Demo behaviour: favorite toggles live only in the session

    # Sessions
    max_sessions: int = Field(default=1000, gt=0)
    session_idle_minutes: int = Field(default=60, gt=0)  # Untouched boards are dropped after this


settings = Settings()
