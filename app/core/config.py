"""Application configuration via Pydantic Settings v2."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "LsApp"
    app_env: Literal["development", "testing", "staging", "production"] = "development"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./lsapp.db"
    db_create_tables: bool = True

    # Startup
    seed_on_startup: bool = True

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # API
    api_host: str = "0.0.0.0"  # noqa: S104
    api_port: int = 8080

    @field_validator("database_url")
    @classmethod
    def validate_async_driver(cls, v: str) -> str:
        """Require an async driver in the database URL.

        Args:
            v: SQLAlchemy database URL.

        Returns:
            Validated database URL.

        Raises:
            ValueError: If the URL names a sync driver.
        """
        scheme = v.split("://", 1)[0]
        valid_schemes = ["sqlite+aiosqlite", "postgresql+asyncpg"]
        if scheme not in valid_schemes:
            raise ValueError(
                f"Unsupported database URL scheme '{scheme}'. Valid schemes: {valid_schemes}"
            )
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.app_env == "testing"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()
