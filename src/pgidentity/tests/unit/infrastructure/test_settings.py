"""Unit tests for infrastructure settings."""

import pytest
from pydantic import SecretStr, ValidationError

from infrastructure.settings import (
    DEFAULT_CONNECTION_NAME,
    DatabaseSettings,
    StoreSettings,
)


class TestDatabaseSettingsRetryConfiguration:
    """Tests for connection-open retry configuration."""

    def test_default_retry_settings(self):
        """Ten retries with a fixed 50ms pause by default."""
        settings = DatabaseSettings()
        assert settings.open_retries == 10
        assert settings.open_retry_delay_ms == 50

    def test_retries_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(open_retries=-1)

    def test_retries_respect_upper_limit(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(open_retries=101)

    def test_retry_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("PGIDENTITY_DB_OPEN_RETRIES", "3")
        monkeypatch.setenv("PGIDENTITY_DB_OPEN_RETRY_DELAY_MS", "5")

        settings = DatabaseSettings()

        assert settings.open_retries == 3
        assert settings.open_retry_delay_ms == 5


class TestConnectionStrings:
    """Tests for resolving named connection strings."""

    def test_password_only_surfaces_in_dsn(self):
        settings = DatabaseSettings(
            username="app",
            password=SecretStr("secret"),
            connection_strings={"Audit": SecretStr("dbname=audit password=secret")},
        )

        assert "secret" not in repr(settings)
        assert "secret" not in str(settings.model_dump())
        assert "password=secret" in settings.dsn
        assert not hasattr(settings, "connection_string")

    def test_empty_password_is_omitted_from_dsn(self):
        assert "password" not in DatabaseSettings(password=SecretStr("")).dsn

    def test_dsn_includes_discrete_fields(self):
        settings = DatabaseSettings(
            host="db", port=5433, database="ids", username="app", password=SecretStr("pw")
        )

        dsn = settings.dsn

        assert "host=db" in dsn
        assert "port=5433" in dsn
        assert "dbname=ids" in dsn
        assert "user=app" in dsn
        assert "password=pw" in dsn

    def test_default_name_falls_back_to_dsn(self):
        settings = DatabaseSettings()

        assert settings.resolve_connection_string(DEFAULT_CONNECTION_NAME) == settings.dsn

    def test_named_entry_takes_precedence(self):
        settings = DatabaseSettings(
            connection_strings={DEFAULT_CONNECTION_NAME: SecretStr("dbname=override")}
        )

        assert settings.resolve_connection_string() == "dbname=override"

    def test_named_connections_from_environment(self, monkeypatch):
        monkeypatch.setenv(
            "PGIDENTITY_DB_CONNECTION_STRINGS", '{"Audit": "dbname=audit"}'
        )

        settings = DatabaseSettings()

        assert settings.resolve_connection_string("Audit") == "dbname=audit"

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Missing"):
            DatabaseSettings().resolve_connection_string("Missing")


class TestStoreSettings:
    """Tests for store behavior settings."""

    def test_write_through_enabled_by_default(self):
        assert StoreSettings().write_through is True

    def test_write_through_from_environment(self, monkeypatch):
        monkeypatch.setenv("PGIDENTITY_STORE_WRITE_THROUGH", "false")

        assert StoreSettings().write_through is False
