"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError
from sqlalchemy.engine import URL

from identity_vault.database.config.config import Settings, get_settings


class TestJwtSecretPosture:
    """A missing JWT secret is only tolerated in development."""

    def test_development_generates_secret(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        settings = Settings(_env_file=None, APP_ENV="development")

        assert settings.JWT_SECRET
        assert len(settings.JWT_SECRET) == 64

    def test_development_secrets_differ_between_builds(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        first = Settings(_env_file=None, APP_ENV="development")
        second = Settings(_env_file=None, APP_ENV="development")

        assert first.JWT_SECRET != second.JWT_SECRET

    @pytest.mark.parametrize("env", ["production", "test"])
    def test_missing_secret_rejected_outside_development(self, monkeypatch, env):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ValidationError, match="JWT_SECRET must be set"):
            Settings(_env_file=None, APP_ENV=env)

    def test_explicit_secret_kept(self):
        settings = Settings(_env_file=None, APP_ENV="production", JWT_SECRET="s3cret")

        assert settings.JWT_SECRET == "s3cret"


class TestDefaults:
    """Defaults mirror the documented configuration."""

    def test_port_and_token_lifetime(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("APP_ENV", raising=False)
        settings = Settings(_env_file=None, JWT_SECRET="x")

        assert settings.PORT == 3005
        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
        assert settings.ALGORITHM == "HS256"
        assert settings.APP_ENV == "development"

    def test_database_url_built_from_parts(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(
            _env_file=None,
            JWT_SECRET="x",
            DB_USERNAME="vault",
            DB_PASSWORD="pw",
            DB_HOST="db",
            DB_PORT=5433,
            DB_DATABASE_NAME="vault_db",
        )

        url = settings.database_url
        assert isinstance(url, URL)
        assert url.drivername == "postgresql+psycopg2"
        assert url.username == "vault"
        assert url.host == "db"
        assert url.port == 5433
        assert url.database == "vault_db"

    def test_database_url_override(self):
        settings = Settings(_env_file=None, JWT_SECRET="x", DATABASE_URL="sqlite:///vault.db")

        assert settings.database_url == "sqlite:///vault.db"

    def test_get_settings_reads_environment(self):
        settings = get_settings()

        assert settings.APP_ENV == "test"
        assert settings.DATABASE_URL == "sqlite://"
        assert settings is get_settings()
