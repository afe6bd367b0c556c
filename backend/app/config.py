"""Environment-derived settings for the generation backend."""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .integrations.video_generation.providers.base import DEFAULT_MAX_ATTEMPTS, DEFAULT_POLL_INTERVAL


class Settings(BaseSettings):
    """Provider credentials and polling knobs loaded from the environment.

    A provider counts as configured when its key is a non-empty string.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    # Providers
    runway_api_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("runway_api_key", "RUNWAY_API_KEY"), description="Runway ML API key"
    )
    luma_api_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("luma_api_key", "LUMA_API_KEY"), description="Luma AI API key"
    )
    pika_api_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("pika_api_key", "PIKA_API_KEY"), description="Pika Labs API key"
    )
    openai_api_key: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("openai_api_key", "OPENAI_API_KEY"),
        description="OpenAI key (image fallback and scripts)",
    )
    openai_script_model: str = Field(
        "gpt-4o-mini",
        validation_alias=AliasChoices("openai_script_model", "OPENAI_SCRIPT_MODEL"),
        description="Chat model used for scripts",
    )

    # Polling
    poll_max_attempts: int = Field(
        DEFAULT_MAX_ATTEMPTS,
        ge=1,
        validation_alias=AliasChoices("poll_max_attempts", "VIDEO_POLL_MAX_ATTEMPTS"),
        description="Status checks per provider job",
    )
    poll_interval: float = Field(
        DEFAULT_POLL_INTERVAL,
        ge=0,
        validation_alias=AliasChoices("poll_interval", "VIDEO_POLL_INTERVAL_SECONDS"),
        description="Seconds between status checks",
    )
    run_timeout: Optional[float] = Field(
        None,
        gt=0,
        validation_alias=AliasChoices("run_timeout", "VIDEO_RUN_TIMEOUT_SECONDS"),
        description="Global deadline in seconds across all providers (None: no global deadline)",
    )

    @field_validator("runway_api_key", "luma_api_key", "pika_api_key", "openai_api_key", mode="before")
    @classmethod
    def blank_key_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str):
            return value.strip() or None
        return value


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
