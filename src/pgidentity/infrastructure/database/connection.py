"""Connection lifecycle management for the identity tables.

This module provides the connection manager every table accessor runs its
statements through. The manager owns exactly one psycopg2 connection
handle, opens it with a bounded constant-interval retry, and closes it
again at the end of every operation.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import psycopg2

from infrastructure.database.exceptions import (
    DatabaseConnectionError,
    QueryExecutionError,
)
from infrastructure.database.rows import ResultRow
from infrastructure.observability.probes import (
    ConnectionProbe,
    DefaultConnectionProbe,
)
from infrastructure.settings import (
    DEFAULT_CONNECTION_NAME,
    DatabaseSettings,
    get_database_settings,
)
from shared_kernel.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from psycopg2.extensions import connection as PsycopgConnection

Parameters = Mapping[str, Any]


class ConnectionManager:
    """Owner of a single PostgreSQL connection handle.

    Every public operation opens the connection (retrying a bounded number
    of times), runs one statement and closes the connection before it
    returns, whether the statement succeeded or not. Only the open is
    retried; a statement that fails after a successful open is raised
    immediately.

    One statement may be in flight per handle, so an instance must not be
    shared between threads. Callers needing concurrency create one manager
    (and one store) per thread.

    Example:
        with ConnectionManager("dbname=identity user=identity") as db:
            db.execute(
                'DELETE FROM "AspNetRoles" WHERE "Id" = %(id)s',
                {"id": role_id},
            )
    """

    def __init__(
        self,
        connection_string: str | None = None,
        settings: DatabaseSettings | None = None,
        probe: ConnectionProbe | None = None,
        connect: Callable[[str], PsycopgConnection] | None = None,
        sleep: Callable[[float], None] | None = None,
    ):
        """Initialize the connection manager.

        No connection is opened until the first operation.

        Args:
            connection_string: libpq connection string; resolved from the
                default named connection when omitted
            settings: Database settings (retry policy, named connections)
            probe: Optional observability probe
            connect: Connection factory, ``psycopg2.connect`` by default
            sleep: Pause function used between open attempts
        """
        self._settings = settings or get_database_settings()
        self._connection_string = (
            connection_string
            if connection_string is not None
            else self._settings.resolve_connection_string(DEFAULT_CONNECTION_NAME)
        )
        self._probe = probe or DefaultConnectionProbe()
        self._connect = connect or psycopg2.connect
        self._sleep = sleep or time.sleep
        self._connection: PsycopgConnection | None = None
        self._disposed = False

    @classmethod
    def from_name(
        cls,
        name: str = DEFAULT_CONNECTION_NAME,
        settings: DatabaseSettings | None = None,
        probe: ConnectionProbe | None = None,
    ) -> ConnectionManager:
        """Create a manager for a named connection string.

        Raises:
            ValueError: If the name is not configured.
        """
        settings = settings or get_database_settings()
        return cls(
            connection_string=settings.resolve_connection_string(name),
            settings=settings,
            probe=probe,
        )

    @property
    def max_open_attempts(self) -> int:
        """Total attempts made to open the connection (first try plus retries)."""
        return self._settings.open_retries + 1

    @property
    def disposed(self) -> bool:
        return self._disposed

    def is_open(self) -> bool:
        """Check whether the handle is currently open."""
        return self._connection is not None and not self._connection.closed

    def execute(self, command_text: str, parameters: Parameters | None = None) -> int:
        """Execute a non-query statement.

        Args:
            command_text: SQL with ``%(name)s`` placeholders
            parameters: Values for the placeholders; None binds SQL NULL

        Returns:
            The number of rows affected.

        Raises:
            InvalidArgumentError: If command_text is empty.
            DatabaseConnectionError: If the connection cannot be opened.
            QueryExecutionError: If the statement fails.
        """
        self._require_command(command_text)

        with self._session() as connection:
            try:
                with connection.cursor() as cursor:
                    cursor.execute(command_text, self._bind(parameters))
                    affected = cursor.rowcount
                connection.commit()
            except psycopg2.Error as e:
                raise self._statement_failed(command_text, e) from e

        return affected

    def query_scalar(
        self, command_text: str, parameters: Parameters | None = None
    ) -> Any | None:
        """Execute a query and return the first column of the first row.

        Returns:
            The native value, or None when the query returned no rows.
        """
        self._require_command(command_text)

        with self._session() as connection:
            try:
                with connection.cursor() as cursor:
                    cursor.execute(command_text, self._bind(parameters))
                    row = cursor.fetchone()
            except psycopg2.Error as e:
                raise self._statement_failed(command_text, e) from e

        if row is None:
            return None
        return row[0]

    def query_str(
        self, command_text: str, parameters: Parameters | None = None
    ) -> str | None:
        """Execute a query and return its scalar result as text."""
        value = self.query_scalar(command_text, parameters)
        if value is None:
            return None
        return str(value)

    def query_rows(
        self, command_text: str, parameters: Parameters | None = None
    ) -> list[ResultRow]:
        """Execute a query and return every row.

        Returns:
            Rows in result order. Each row maps column names to text (or
            None for NULL) and offers typed accessors.
        """
        self._require_command(command_text)

        with self._session() as connection:
            try:
                with connection.cursor() as cursor:
                    cursor.execute(command_text, self._bind(parameters))
                    if cursor.description is None:
                        return []
                    columns = [column[0] for column in cursor.description]
                    return [
                        ResultRow.from_cursor_row(columns, row)
                        for row in cursor.fetchall()
                    ]
            except psycopg2.Error as e:
                raise self._statement_failed(command_text, e) from e

    def close_connection(self) -> None:
        """Close the handle if it is open."""
        if self._connection is None:
            return
        if not self._connection.closed:
            self._connection.close()
            self._probe.connection_closed()
        self._connection = None

    def close(self) -> None:
        """Release the connection handle.

        Safe to call more than once; only the first call has an effect.
        """
        if self._disposed:
            return
        self.close_connection()
        self._disposed = True
        self._probe.connection_disposed()

    dispose = close

    def __enter__(self) -> ConnectionManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def _session(self) -> Iterator[PsycopgConnection]:
        """Open the handle for one operation and always close it afterwards."""
        connection = self._open_connection()
        try:
            yield connection
        finally:
            self.close_connection()

    def _open_connection(self) -> PsycopgConnection:
        """Open the handle, retrying at a fixed interval.

        Raises:
            DatabaseConnectionError: If the manager is disposed or every
                attempt failed. The last driver error is chained.
        """
        if self._disposed:
            raise DatabaseConnectionError("Connection manager has been disposed")

        if self._connection is not None and not self._connection.closed:
            return self._connection

        max_attempts = self.max_open_attempts
        delay = self._settings.open_retry_delay_ms / 1000

        for attempt in range(1, max_attempts + 1):
            try:
                connection = self._connect(self._connection_string)
            except psycopg2.Error as e:
                if attempt == max_attempts:
                    self._probe.connection_failed(attempts=attempt, error=e)
                    raise DatabaseConnectionError(
                        f"Failed to connect to database after {attempt} attempts: {e}",
                        attempts=attempt,
                    ) from e
                self._probe.connection_open_retry(attempt=attempt, error=e)
                self._sleep(delay)
                continue

            self._connection = connection
            self._probe.connection_opened(attempts=attempt)
            return connection

        raise DatabaseConnectionError("No connection attempt was made")

    def _statement_failed(
        self, command_text: str, error: psycopg2.Error
    ) -> QueryExecutionError:
        self._probe.statement_failed(command_text=command_text, error=error)
        return QueryExecutionError(
            f"Statement execution failed: {error}", query=command_text
        )

    @staticmethod
    def _bind(parameters: Parameters | None) -> dict[str, Any] | None:
        """Copy parameters for binding.

        None values are kept so psycopg2 binds them as SQL NULL.
        """
        if not parameters:
            return None
        return {name: value for name, value in parameters.items()}

    @staticmethod
    def _require_command(command_text: str) -> None:
        if not command_text:
            raise InvalidArgumentError(
                "command_text", "Command text cannot be null or empty."
            )
