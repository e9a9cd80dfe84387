"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from psycopg2.extensions import make_dsn
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONNECTION_NAME = "DefaultConnection"


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        PGIDENTITY_DB_HOST: Database host (default: localhost)
        PGIDENTITY_DB_PORT: Database port (default: 5432)
        PGIDENTITY_DB_DATABASE: Database name (default: identity)
        PGIDENTITY_DB_USERNAME: Database user (default: identity)
        PGIDENTITY_DB_PASSWORD: Database password (required in production)
        PGIDENTITY_DB_CONNECT_TIMEOUT: Seconds to wait for a single open attempt (default: 10)
        PGIDENTITY_DB_OPEN_RETRIES: Retries after a failed open (default: 10)
        PGIDENTITY_DB_OPEN_RETRY_DELAY_MS: Fixed pause between open attempts (default: 50)
        PGIDENTITY_DB_CONNECTION_STRINGS: JSON object of named libpq connection strings
    """

    model_config = SettingsConfigDict(
        env_prefix="PGIDENTITY_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="identity", description="Database name")
    username: str = Field(default="identity", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    connect_timeout: int = Field(
        default=10,
        description="Seconds to wait for a single connection attempt",
        ge=1,
    )
    open_retries: int = Field(
        default=10,
        description="Retries after the first failed connection attempt",
        ge=0,
        le=100,
    )
    open_retry_delay_ms: int = Field(
        default=50,
        description="Fixed pause between connection attempts in milliseconds",
        ge=0,
        le=10_000,
    )
    connection_strings: dict[str, SecretStr] = Field(
        default_factory=dict,
        description="Named libpq connection strings",
    )

    @property
    def dsn(self) -> str:
        """Build a libpq DSN from the discrete connection fields."""
        return make_dsn(
            host=self.host,
            port=self.port,
            dbname=self.database,
            user=self.username,
            password=self.password.get_secret_value() or None,
            connect_timeout=self.connect_timeout,
        )

    def resolve_connection_string(self, name: str = DEFAULT_CONNECTION_NAME) -> str:
        """Resolve a named connection string.

        Named entries take precedence. The default name falls back to a DSN
        built from the discrete host/port/database fields.

        Raises:
            ValueError: If no connection string with that name is configured.
        """
        if name in self.connection_strings:
            return self.connection_strings[name].get_secret_value()
        if name == DEFAULT_CONNECTION_NAME:
            return self.dsn
        raise ValueError(f"No connection string named {name!r} is configured")


class StoreSettings(BaseSettings):
    """Behavior settings for the user and role stores.

    Environment variables:
        PGIDENTITY_STORE_WRITE_THROUGH: Persist field setters immediately (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="PGIDENTITY_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    write_through: bool = Field(
        default=True,
        description=(
            "When true, password hash, security stamp, email and email "
            "confirmation setters persist the user immediately"
        ),
    )


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_store_settings() -> StoreSettings:
    """Get cached store settings."""
    return StoreSettings()
