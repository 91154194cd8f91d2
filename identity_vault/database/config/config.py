"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed application configuration using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- `extra="ignore"`: unknown env vars are ignored (not an error).
- `APP_ENV` selects the profile (`development`, `test`, `production`).

JWT secret posture
------------------
- `JWT_SECRET` is mandatory outside of `development`; a missing secret raises a
  validation error when the settings are built.
- In `development` only, a missing secret is replaced by a random one and a
  warning is logged. Tokens signed with it do not survive a restart.

Usage
-----
from identity_vault.database.config.config import get_settings

settings = get_settings()
port = settings.PORT
"""

import logging
import secrets
from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)

DEVELOPMENT = "development"


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_ENV: str = Field(DEVELOPMENT, description="Configuration profile (`development`, `test`, `production`).")
    HOST: str = Field("0.0.0.0", description="Interface the HTTP server binds to.")
    PORT: int = Field(3005, description="Port the HTTP server listens on.")
    FRONTEND_URL: str = Field("*", description="Allowed CORS origin.")
    LOG_LEVEL: str = Field("INFO", description="Root logging level.")

    DATABASE_URL: Optional[str] = Field(None, description="Full SQLAlchemy URL. Overrides the DB_* parts when set.")
    DB_DRIVER_NAME: str = Field("postgresql+psycopg2", description="SQLAlchemy driver name.")
    DB_USERNAME: Optional[str] = Field(None, description="Database username credential.")
    DB_PASSWORD: Optional[str] = Field(None, description="Database password credential.")
    DB_HOST: str = Field("localhost", description="Hostname or IP address of the database server.")
    DB_PORT: Optional[int] = Field(None, description="Port of the database server.")
    DB_DATABASE_NAME: str = Field("identity_vault", description="Name of the application's database.")
    SQL_ECHO: bool = Field(False, description="Echo emitted SQL to the log.")

    JWT_SECRET: Optional[str] = Field(None, description="Symmetric secret used to sign access tokens.")
    ALGORITHM: str = Field("HS256", description="JWT signing algorithm.")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60, description="Lifetime of access tokens in minutes.")
    BCRYPT_ROUNDS: int = Field(12, ge=4, le=31, description="bcrypt cost factor for password hashes.")

    @model_validator(mode="after")
    def require_jwt_secret(self) -> "Settings":
        if self.JWT_SECRET:
            return self
        if self.APP_ENV != DEVELOPMENT:
            raise ValueError(f"JWT_SECRET must be set when APP_ENV={self.APP_ENV!r}")
        self.JWT_SECRET = secrets.token_hex(32)
        logger.warning(
            "JWT_SECRET is not set; generated a throwaway secret for development. "
            "Issued tokens become invalid when the process restarts."
        )
        return self

    @property
    def database_url(self):
        """SQLAlchemy URL, built from the DB_* parts unless DATABASE_URL is given."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            drivername=self.DB_DRIVER_NAME,
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_DATABASE_NAME,
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings, built on first use."""
    return Settings()
