"""Integration test fixtures for database tests.

These fixtures require a running PostgreSQL instance. Point them at it
with the PGIDENTITY_DB_* environment variables.
"""

from collections.abc import Generator
import os

import pytest
from pydantic import SecretStr

from identity.infrastructure import RoleStore, UserStore
from infrastructure.database import ConnectionManager
from infrastructure.settings import DatabaseSettings, StoreSettings

SCHEMA = (
    'CREATE TABLE IF NOT EXISTS "AspNetUsers" ('
    '"Id" VARCHAR(128) PRIMARY KEY, "UserName" VARCHAR(256) NOT NULL, '
    '"PasswordHash" VARCHAR(256), "SecurityStamp" VARCHAR(256), '
    '"Email" VARCHAR(256), "EmailConfirmed" BOOLEAN NOT NULL DEFAULT FALSE)',
    'CREATE TABLE IF NOT EXISTS "AspNetRoles" ('
    '"Id" VARCHAR(128) PRIMARY KEY, "Name" VARCHAR(256) NOT NULL)',
    'CREATE TABLE IF NOT EXISTS "AspNetUserClaims" ('
    '"Id" SERIAL PRIMARY KEY, "ClaimType" VARCHAR(256), '
    '"ClaimValue" VARCHAR(256), "UserId" VARCHAR(128) NOT NULL)',
    'CREATE TABLE IF NOT EXISTS "AspNetUserLogins" ('
    '"UserId" VARCHAR(128) NOT NULL, "LoginProvider" VARCHAR(128) NOT NULL, '
    '"ProviderKey" VARCHAR(128) NOT NULL, '
    'PRIMARY KEY ("UserId", "LoginProvider", "ProviderKey"))',
    'CREATE TABLE IF NOT EXISTS "AspNetUserRoles" ('
    '"UserId" VARCHAR(128) NOT NULL, "RoleId" VARCHAR(128) NOT NULL, '
    'PRIMARY KEY ("UserId", "RoleId"))',
)

TABLES = (
    "AspNetUserRoles",
    "AspNetUserLogins",
    "AspNetUserClaims",
    "AspNetRoles",
    "AspNetUsers",
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    Override with environment variables:
        PGIDENTITY_DB_HOST, PGIDENTITY_DB_PORT, etc.
    """
    return DatabaseSettings(
        host=os.getenv("PGIDENTITY_DB_HOST", "localhost"),
        port=int(os.getenv("PGIDENTITY_DB_PORT", "5432")),
        database=os.getenv("PGIDENTITY_DB_DATABASE", "identity"),
        username=os.getenv("PGIDENTITY_DB_USERNAME", "identity"),
        password=SecretStr(os.getenv("PGIDENTITY_DB_PASSWORD", "identity_dev_password")),
        open_retries=2,
    )


@pytest.fixture
def database(
    integration_db_settings: DatabaseSettings,
) -> Generator[ConnectionManager, None, None]:
    """Provide a connection manager over a freshly emptied schema."""
    manager = ConnectionManager(settings=integration_db_settings)
    for statement in SCHEMA:
        manager.execute(statement)
    for table in TABLES:
        manager.execute(f'DELETE FROM "{table}"')

    yield manager

    for table in TABLES:
        manager.execute(f'DELETE FROM "{table}"')
    manager.close()


@pytest.fixture
def user_store(integration_db_settings, database) -> Generator[UserStore, None, None]:
    store = UserStore(
        database=ConnectionManager(settings=integration_db_settings),
        settings=StoreSettings(write_through=True),
    )
    yield store
    store.close()


@pytest.fixture
def role_store(integration_db_settings, database) -> Generator[RoleStore, None, None]:
    store = RoleStore(database=ConnectionManager(settings=integration_db_settings))
    yield store
    store.close()
