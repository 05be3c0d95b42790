"""Application configuration using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.constants import (
    DEFAULT_PROVIDER_TIMEOUT_SECONDS,
    DEFAULT_SCREENSHOT_PROVIDER_URL,
    EXPORT_DELAY_SECONDS,
    MAX_CHUNK_HEIGHT,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Load .env first, then .env.local (for local/test overrides)
        # Later files override earlier ones, so .env.local takes precedence
        env_file=[".env", ".env.local"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["local", "railway", "prod"] = Field(
        default="local", description="Current environment"
    )
    log_level: str = Field(default="INFO", description="Python logging level")

    # Screenshot provider
    screenshot_provider_url: str = Field(
        default=DEFAULT_SCREENSHOT_PROVIDER_URL,
        description="Base URL of the remote screenshot service",
    )
    screenshot_provider_timeout_seconds: float = Field(
        default=DEFAULT_PROVIDER_TIMEOUT_SECONDS,
        description="HTTP timeout for a single screenshot capture (seconds)",
    )

    # Chunking / export
    max_chunk_height: int = Field(
        default=MAX_CHUNK_HEIGHT,
        gt=0,
        description="Maximum height of a single chunk in pixels",
    )
    slice_chunks: bool = Field(
        default=False,
        description=(
            "Crop each chunk out of the fetched image. When disabled every chunk "
            "carries the full image and heights come from the per-profile estimate"
        ),
    )
    export_delay_seconds: float = Field(
        default=EXPORT_DELAY_SECONDS,
        ge=0.0,
        description="Delay between successive exports in a batch (seconds)",
    )

    # CORS
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    # Sentry Configuration
    sentry_dsn: str | None = Field(
        default=None, description="Sentry DSN for error tracking (optional)"
    )
    sentry_traces_sample_rate: float = Field(
        default=1.0, description="Sentry traces sample rate (0.0 to 1.0)"
    )

    # Logfire Configuration
    logfire_token: str | None = Field(
        default=None, description="Pydantic Logfire token for observability"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
