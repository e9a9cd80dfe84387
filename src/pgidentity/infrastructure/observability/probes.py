"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

from infrastructure.logging import get_logger

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ConnectionProbe(Protocol):
    """Domain probe for database connection observability.

    This probe captures domain-significant events related to the connection
    lifecycle without exposing logging implementation details.
    """

    def connection_opened(self, attempts: int) -> None:
        """Record that a database connection was opened."""
        ...

    def connection_open_retry(self, attempt: int, error: Exception) -> None:
        """Record that an open attempt failed and will be retried."""
        ...

    def connection_failed(self, attempts: int, error: Exception) -> None:
        """Record that opening a connection failed after all attempts."""
        ...

    def connection_closed(self) -> None:
        """Record that a database connection was closed."""
        ...

    def statement_failed(self, command_text: str, error: Exception) -> None:
        """Record that a statement failed on an open connection."""
        ...

    def connection_disposed(self) -> None:
        """Record that the connection manager released its handle."""
        ...

    def with_context(self, context: ObservationContext) -> ConnectionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog.

    Supports observation context for including request-scoped metadata
    with all log events.
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or get_logger("connection")
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultConnectionProbe:
        """Create a new probe with observation context bound."""
        return DefaultConnectionProbe(logger=self._logger, context=context)

    def connection_opened(self, attempts: int) -> None:
        """Record that a database connection was opened."""
        self._logger.debug(
            "database_connection_opened",
            attempts=attempts,
            **self._get_context_kwargs(),
        )

    def connection_open_retry(self, attempt: int, error: Exception) -> None:
        """Record that an open attempt failed and will be retried."""
        self._logger.warning(
            "database_connection_open_retry",
            attempt=attempt,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def connection_failed(self, attempts: int, error: Exception) -> None:
        """Record that opening a connection failed after all attempts."""
        self._logger.error(
            "database_connection_failed",
            attempts=attempts,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def connection_closed(self) -> None:
        """Record that a database connection was closed."""
        self._logger.debug(
            "database_connection_closed",
            **self._get_context_kwargs(),
        )

    def statement_failed(self, command_text: str, error: Exception) -> None:
        """Record that a statement failed on an open connection."""
        self._logger.error(
            "database_statement_failed",
            command_text=command_text,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def connection_disposed(self) -> None:
        """Record that the connection manager released its handle."""
        self._logger.info(
            "database_connection_disposed",
            **self._get_context_kwargs(),
        )
