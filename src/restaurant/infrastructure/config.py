"""Application configuration via pydantic-settings.

Reads ``RESTAURANT_*`` environment variables and an optional ``.env`` file
in the working directory.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="RESTAURANT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Logging ---
    log_level: str = "WARNING"

    # --- Catalog ---
    seed_demo_menu: bool = True

    # --- Receipts ---
    receipt_width: int = Field(default=50, ge=20, le=120)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (created once)."""
    return Settings()
