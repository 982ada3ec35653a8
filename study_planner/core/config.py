from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    app_env: Literal["development", "production", "test"] = Field(default="development", validation_alias="APP_ENV")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO", validation_alias="LOG_LEVEL")

    schedule_apply_mode: Literal["append", "replace"] = Field(default="append", validation_alias="SCHEDULE_APPLY_MODE")
    upcoming_window_days: int = Field(default=7, ge=0, validation_alias="UPCOMING_WINDOW_DAYS")
    upcoming_limit: int = Field(default=5, ge=1, validation_alias="UPCOMING_LIMIT")


@lru_cache(1)
def get_settings() -> Settings:
    """Return cached settings instance to avoid reparsing env variables."""

    return Settings()
