"""Configuration management for CoinCollector.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MEMORY_DATABASE = ":memory:"


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COINCOLLECTOR_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "CoinCollector"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Database Settings
    database_path: str = Field(
        default="./cc_data/coincollector.db",
        description="Path of the SQLite database file (':memory:' for a transient store)",
    )
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_echo: bool = False

    # SQLite Pragmas (foreign key enforcement is always on)
    db_sqlite_journal_mode: str = "WAL"
    db_sqlite_synchronous: str = "NORMAL"
    db_sqlite_busy_timeout: int = 5000  # 5 seconds

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("database_path")
    @classmethod
    def validate_database_path(cls, v: str) -> str:
        """Reject an empty database path."""
        if not v or not v.strip():
            raise ValueError("database_path must not be empty")
        return v.strip()

    @field_validator("db_sqlite_journal_mode")
    @classmethod
    def validate_journal_mode(cls, v: str) -> str:
        """Validate the journal mode against the modes SQLite knows."""
        mode = v.upper()
        if mode not in {"DELETE", "TRUNCATE", "PERSIST", "MEMORY", "WAL", "OFF"}:
            raise ValueError(f"Unsupported SQLite journal mode: {v}")
        return mode

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_memory_database(self) -> bool:
        """Check if the store lives only in memory."""
        return self.database_path == MEMORY_DATABASE

    @property
    def database_url(self) -> str:
        """Get the SQLAlchemy URL for the configured database path."""
        if self.is_memory_database:
            return "sqlite://"
        return f"sqlite:///{self.database_path}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
