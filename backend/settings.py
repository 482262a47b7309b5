"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Credentials entered by the user at runtime (PUT /settings, ``hevy-spotter
configure``) are persisted in the local store and take precedence over the
environment values below.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.data_dir)
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # External Services - Hevy
    # -------------------------------------------------------------------------
    hevy_api_base_url: str = Field(
        default="https://api.hevyapp.com/v1",
        description="Base URL of the Hevy public API",
    )
    hevy_api_key: Optional[str] = Field(
        default=None,
        description="Hevy API key (overridden by the stored user setting)",
    )

    # -------------------------------------------------------------------------
    # External Services - OpenAI
    # -------------------------------------------------------------------------
    openai_api_key: Optional[str] = Field(
        default=None,
        description="OpenAI API key (overridden by the stored user setting)",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="Chat model used for analysis and routine design",
    )

    # -------------------------------------------------------------------------
    # Networking
    # -------------------------------------------------------------------------
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout applied to Hevy and OpenAI requests",
    )

    # -------------------------------------------------------------------------
    # Local Storage
    # -------------------------------------------------------------------------
    data_dir: Path = Field(
        default=Path.home() / ".hevy-spotter",
        description="Directory holding the workout cache, analysis and settings",
    )
    workout_cache_ttl_hours: float = Field(
        default=24.0,
        gt=0,
        description="Freshness window of the workout cache",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
