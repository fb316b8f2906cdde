"""Runtime configuration, read from ``VALIDBENCH_*`` environment variables or a local ``.env``."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Harness settings.

    Environment variables will be loaded and validated using Pydantic.
    """

    # Pins the "year >= current year" date-of-birth bound. Unset means today's year at call time.
    current_year: int | None = Field(default=None, ge=1, le=9999)

    default_validator: str = "bare"

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="VALIDBENCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Return the process-wide settings, loaded once.
    """
    return Settings()
