"""Unit test fixtures with mocked dependencies."""

from unittest.mock import MagicMock

import psycopg2
import pytest


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
        open_retries=10,
        open_retry_delay_ms=50,
    )


@pytest.fixture
def mock_psycopg2_connection():
    """Provide a mocked psycopg2 connection that tracks its closed state."""
    conn = MagicMock()
    conn.closed = 0

    def _close():
        conn.closed = 1

    conn.close.side_effect = _close

    cursor = MagicMock()
    cursor.fetchall.return_value = []
    cursor.fetchone.return_value = (1,)
    cursor.rowcount = 1
    cursor.description = None

    # Set up context manager
    cursor.__enter__ = MagicMock(return_value=cursor)
    cursor.__exit__ = MagicMock(return_value=False)
    conn.cursor.return_value = cursor

    return conn, cursor


@pytest.fixture
def connector_factory():
    """Build a fake ``psycopg2.connect`` that fails a fixed number of times."""

    def _factory(connection, failures: int = 0):
        calls: list[str] = []

        def _connect(dsn: str):
            calls.append(dsn)
            if len(calls) <= failures:
                raise psycopg2.OperationalError("could not connect to server")
            connection.closed = 0
            return connection

        _connect.calls = calls
        return _connect

    return _factory


@pytest.fixture
def mock_database():
    """Provide a mocked ConnectionManager for table accessor tests."""
    from infrastructure.database.connection import ConnectionManager

    database = MagicMock(spec=ConnectionManager)
    database.execute.return_value = 1
    database.query_rows.return_value = []
    database.query_str.return_value = None
    database.query_scalar.return_value = None
    return database


@pytest.fixture
def connected_manager(mock_db_settings, mock_psycopg2_connection, connector_factory):
    """Provide a real ConnectionManager over the mocked psycopg2 connection."""
    from infrastructure.database.connection import ConnectionManager
    from infrastructure.observability.probes import ConnectionProbe

    conn, _ = mock_psycopg2_connection
    return ConnectionManager(
        connection_string="dbname=testdb",
        settings=mock_db_settings,
        probe=MagicMock(spec=ConnectionProbe),
        connect=connector_factory(conn),
        sleep=lambda _: None,
    )
