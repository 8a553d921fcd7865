"""Application configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UNBLOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Level file, or a directory containing levels.dat. None = bundled levels.
    levels_path: Path | None = None

    # Level navigation
    wrap_levels: bool = False
    auto_advance: bool = True

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
