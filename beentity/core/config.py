from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from beentity.core.constants import DEFAULT_DATABASE_URL, DEFAULT_LOG_LEVEL


class Settings(BaseSettings):
    """Fixture layer settings"""

    database_url: str = DEFAULT_DATABASE_URL
    debug: bool = False

    # Modules searched for factory classes named after the entity type
    factory_modules: list[str] = []

    # Commit after every table row instead of once per table
    per_row_commit: bool = False

    # Only plain equality when asserting field values
    strict_comparison: bool = False

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = DEFAULT_LOG_LEVEL
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="BEENTITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
