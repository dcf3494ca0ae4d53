"""Settings for the advisory API and CLI.

Configuration is loaded from environment variables (and an optional .env
file) using pydantic-settings. Nothing is required; every value has a
default suitable for local use.

## Environment Variables

- DEBUG: Enable debug mode and the OpenAPI docs (default: false)
- LOG_LEVEL: Logging level for the CLI and API (default: INFO)
- REFRESH_INTERVAL_MINUTES: How often clients should re-evaluate (default: 30)
- DISABLED_CATEGORIES: JSON list of card categories hidden by default

## Example .env

```
LOG_LEVEL=DEBUG
DISABLED_CATEGORIES=["activity_indices"]
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_advisories.models.card import CardCategory
from weather_advisories.models.preferences import CardTypePreferences


class Settings(BaseSettings):
    """Settings read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identity and runtime
    app_name: str = "Weather Advisories"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="CORS allowed origins",
    )

    # Evaluation
    refresh_interval_minutes: int = Field(default=30, ge=1, le=1440)
    disabled_categories: list[str] = Field(
        default_factory=list,
        description="Card categories hidden unless a request enables them",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("disabled_categories")
    @classmethod
    def validate_categories(cls, v: list[str]) -> list[str]:
        """Reject category keys that do not exist."""
        known = {category.value for category in CardCategory}
        unknown = [key for key in v if key not in known]
        if unknown:
            raise ValueError(f"Unknown card categories: {', '.join(unknown)}")
        return v

    def default_preferences(self) -> CardTypePreferences:
        """Card preferences with the configured categories switched off."""
        return CardTypePreferences.from_mapping(
            {key: False for key in self.disabled_categories}
        )


@lru_cache
def get_settings() -> Settings:
    """Settings shared by the API and CLI, read once per process.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return Settings()
