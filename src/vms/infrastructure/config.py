"""Runtime settings, read from ``VMS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VMS_", env_file=".env", extra="ignore")

    # Database
    database_url: str = "sqlite:///data/vms.db"
    echo_sql: bool = False

    # Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
