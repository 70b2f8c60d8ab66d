"""Configuration settings using pydantic-settings for environment variable loading."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be overridden with a ``DEADSHOWS_`` prefixed variable,
    e.g. ``DEADSHOWS_LAST_YEAR=1995``. Environment variables take precedence
    over the .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEADSHOWS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Internet Archive
    search_url: str = "https://archive.org/advancedsearch.php"
    details_url: str = "https://archive.org/details/"
    collection: str = "GratefulDead"
    creator: str = "Grateful Dead"

    # Years the band was active (inclusive)
    first_year: int = 1965
    last_year: int = 1995

    max_results: int = Field(default=500, gt=0)
    request_timeout: float | None = None

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
