"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import DatabaseSettings, Settings, get_settings


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings()
        assert settings.pool_min_connections >= 1
        assert settings.pool_max_connections >= settings.pool_min_connections
        assert settings.pool_max_connections <= 20
        assert settings.pool_enabled is True

    def test_pool_settings_from_fields(self):
        """Should accept pool settings via constructor."""
        settings = DatabaseSettings(
            pool_min_connections=5,
            pool_max_connections=15,
            pool_enabled=True,
        )
        assert settings.pool_min_connections == 5
        assert settings.pool_max_connections == 15
        assert settings.pool_enabled is True

    def test_pool_can_be_disabled(self):
        """Should allow disabling pool for tests."""
        settings = DatabaseSettings(pool_enabled=False)
        assert settings.pool_enabled is False

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        error_str = str(exc_info.value)
        assert "pool_max_connections" in error_str or "greater" in error_str.lower()

    def test_pool_max_equal_to_min_is_valid(self):
        """Should allow max == min."""
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=5)
        assert settings.pool_min_connections == 5
        assert settings.pool_max_connections == 5

    def test_pool_min_must_be_positive(self):
        """Pool min connections must be >= 1."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)

    def test_pool_max_respects_upper_limit(self):
        """Pool max should not exceed reasonable limit."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)


class TestDatabaseSettingsEnvironment:
    """Tests for loading database settings from the environment."""

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("LABDOCS_DB_HOST", "db.internal")
        monkeypatch.setenv("LABDOCS_DB_PORT", "6543")
        monkeypatch.setenv("LABDOCS_DB_PASSWORD", "s3cret")

        settings = DatabaseSettings()

        assert settings.host == "db.internal"
        assert settings.port == 6543
        assert settings.password.get_secret_value() == "s3cret"

    def test_password_is_not_displayed(self):
        settings = DatabaseSettings(password="s3cret")

        assert "s3cret" not in repr(settings)
        assert "s3cret" not in settings.connection_string


class TestDatabaseSettingsTimeouts:
    """Tests for statement and connect deadlines."""

    def test_default_statement_timeout(self):
        settings = DatabaseSettings()

        assert settings.statement_timeout_ms == 30000
        assert settings.connection_options == "-c statement_timeout=30000"

    def test_custom_statement_timeout(self):
        settings = DatabaseSettings(statement_timeout_ms=1500)

        assert settings.connection_options == "-c statement_timeout=1500"

    def test_negative_statement_timeout_is_rejected(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(statement_timeout_ms=-1)

    def test_connect_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(connect_timeout_seconds=0)


class TestApplicationSettings:
    """Tests for the top-level application settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.app_name == "Lab Docs API"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert "http://localhost:5173" in settings.cors_origins

    def test_cors_origins_from_comma_separated_env(self, monkeypatch):
        monkeypatch.setenv(
            "LABDOCS_CORS_ORIGINS", "https://app.example.com, https://admin.example.com,"
        )

        settings = Settings()

        assert settings.cors_origins == [
            "https://app.example.com",
            "https://admin.example.com",
        ]

    def test_log_level_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("LABDOCS_LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
