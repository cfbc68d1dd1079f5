# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.MAPBOX_BASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Provider authentication is expected to fail until a real key is configured
MAPBOX_PLACEHOLDER_KEY = "MUST-REPLACE-WITH-APIKEY-TO-PASS-TEST"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # User Store
    # -------------------------------------------------------------------------

    USER_STORE: Literal["supabase", "memory"] = Field(
        default="supabase",
        description="Backend for user records ('memory' is process-local)"
    )

    # Only checked when the Supabase store is first used
    SUPABASE_URL: str = Field(
        default="",
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_SERVICE_KEY: str = Field(
        default="",
        description="Supabase service_role key (bypasses RLS)"
    )

    USERS_TABLE: str = Field(
        default="users",
        min_length=1,
        description="Table holding user records"
    )

    # -------------------------------------------------------------------------
    # Geocoding (Mapbox)
    # -------------------------------------------------------------------------

    MAPBOX_API_KEY: str = Field(
        default=MAPBOX_PLACEHOLDER_KEY,
        description="Mapbox access token for the place-search endpoint"
    )

    MAPBOX_BASE_URL: str = Field(
        default="https://api.mapbox.com",
        description="Mapbox API root"
    )

    GEOCODER_TIMEOUT_SECONDS: float | None = Field(
        default=None,
        gt=0,
        description="Timeout for geocoding requests (unset = wait indefinitely)"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty variables fall back to defaults
        env_ignore_empty=True,
        case_sensitive=True,
        # .env files may carry keys for other tools
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def mapbox_key_configured(self) -> bool:
        """True once a real Mapbox key replaces the placeholder."""
        return self.MAPBOX_API_KEY != MAPBOX_PLACEHOLDER_KEY

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
