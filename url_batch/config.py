"""Configuration handling for the URL batch service."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    ``max_urls_per_task`` and ``credits_per_url`` are product policy rather
    than anything the parser depends on, so they live here instead of being
    baked into the gate and the estimator.
    """

    service_name: str = "URL Batch Service"
    version: str = "1.0.0"

    max_urls_per_task: int = Field(default=10000, ge=1)
    credits_per_url: int = Field(default=1, ge=1)
    invalid_line_preview_limit: int = Field(default=3, ge=1)

    task_api_url: AnyHttpUrl = Field(default="http://task-api:8080")
    task_api_token: Optional[str] = None
    task_api_timeout: float = Field(default=30.0, gt=0)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="URL_BATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
