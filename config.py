"""Application settings, read from environment variables or a .env file."""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the stats API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: Optional[str] = Field(
        default=None,
        description="PostgreSQL DSN; falls back to libpq PG* variables when unset",
    )
    db_min_pool_size: int = Field(default=2, ge=1)
    db_max_pool_size: int = Field(default=10, ge=1)

    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    log_level: str = Field(default="INFO", description="Root log level")
    debug: bool = Field(default=False, description="Force DEBUG logging")

    stats_round_limit: int = Field(
        default=500,
        ge=1,
        description="Maximum rounds loaded for one stats request",
    )


def get_settings() -> Settings:
    return Settings()
