"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- PORT and DB_PATH keep the names the service has always been deployed with
- Storage is an embedded SQLite file inside DB_PATH (no database server)
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]

BASE_DIR = Path(__file__).resolve().parent.parent

DB_FILE_NAME = "links.sqlite3"


class EnvSettingsOptions(Enum):
    """Environment options for deployment."""
    production = "production"
    staging = "staging"
    development = "dev"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    ENV_SETTING: EnvSettingsOptions = Field(
        default=EnvSettingsOptions.development,
        description="Environment setting (production, staging, dev)"
    )

    # Process Configuration
    HOST: str = Field(default="0.0.0.0", description="Interface to listen on")
    PORT: int = Field(default=3000, description="Port to listen on")
    LOG_LEVEL: str = Field(default="INFO", description="Root logging level")

    # Storage Configuration
    DB_PATH: str = Field(
        default="./db",
        description="Directory holding the embedded link database"
    )
    DATABASE_URL: Optional[str] = Field(
        default=None,
        description="Explicit connection string; derived from DB_PATH when unset"
    )

    # Short Link Configuration
    SHORT_ID_LENGTH: int = Field(
        default=20,
        ge=1,
        le=64,
        description="Fixed length of derived short ids (base62 characters, at most the 64-char key column)"
    )
    IMAGE_NAME: str = Field(
        default="demo-item.png",
        description="Static image advertised in the share page meta tags"
    )
    SERVICE_BANNER: str = Field(
        default="Swarm City shortener service",
        description="Plain text returned by the root endpoint"
    )

    def database_url(self) -> str:
        """
        Connection string for the link store.

        Uses DATABASE_URL when given, otherwise an aiosqlite file inside DB_PATH.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        db_file = Path(self.DB_PATH).expanduser().resolve() / DB_FILE_NAME
        return f"sqlite+aiosqlite:///{db_file}"


settings = Settings()
