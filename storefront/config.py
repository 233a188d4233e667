"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The admin passcode comes from the environment; the default is a placeholder
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: a bare checkout runs against a local SQLite file
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Durable slots
    storage_url: str = "sqlite:///storefront.db"

    @field_validator("storage_url", mode="before")
    @classmethod
    def strip_async_driver(cls, v: str) -> str:
        """Slot storage uses a synchronous engine: drop an +aiosqlite driver suffix."""
        if isinstance(v, str) and v.startswith("sqlite+aiosqlite://"):
            return v.replace("sqlite+aiosqlite://", "sqlite://", 1)
        return v

    # Seed the demo catalog when the products slot is empty
    seed_catalog: bool = True

    # Session gate (placeholder for real authentication)
    admin_passcode: str = "letmein"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
