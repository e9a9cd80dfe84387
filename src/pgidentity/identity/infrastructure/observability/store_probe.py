"""Domain probes for user and role store operations.

Following Domain-Oriented Observability patterns, these probes capture
domain-significant events of the stores the identity framework calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

from infrastructure.logging import get_logger

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserStoreProbe(Protocol):
    """Domain probe for user store operations."""

    def user_created(self, user_id: str, user_name: str | None) -> None:
        """Record that a user was inserted."""
        ...

    def user_updated(self, user_id: str) -> None:
        """Record that a user row was rewritten."""
        ...

    def user_deleted(self, user_id: str) -> None:
        """Record that a user row was deleted."""
        ...

    def user_purged(
        self, user_id: str, claims: int, logins: int, memberships: int
    ) -> None:
        """Record that a user and its dependent rows were deleted."""
        ...

    def ambiguous_user_name(self, user_name: str, match_count: int) -> None:
        """Record that a name lookup matched more than one user."""
        ...

    def role_not_found(self, user_id: str, role_name: str) -> None:
        """Record that a membership change named an unknown role."""
        ...

    def with_context(self, context: ObservationContext) -> UserStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class RoleStoreProbe(Protocol):
    """Domain probe for role store operations."""

    def role_created(self, role_id: str, name: str | None) -> None:
        """Record that a role was inserted."""
        ...

    def role_updated(self, role_id: str, name: str | None) -> None:
        """Record that a role was renamed."""
        ...

    def role_deleted(self, role_id: str) -> None:
        """Record that a role was deleted."""
        ...

    def with_context(self, context: ObservationContext) -> RoleStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserStoreProbe:
    """Default implementation of UserStoreProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or get_logger("user_store")
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultUserStoreProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserStoreProbe(logger=self._logger, context=context)

    def user_created(self, user_id: str, user_name: str | None) -> None:
        """Record that a user was inserted."""
        self._logger.info(
            "user_created",
            user_id=user_id,
            user_name=user_name,
            **self._get_context_kwargs(),
        )

    def user_updated(self, user_id: str) -> None:
        """Record that a user row was rewritten."""
        self._logger.debug(
            "user_updated",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def user_deleted(self, user_id: str) -> None:
        """Record that a user row was deleted."""
        self._logger.info(
            "user_deleted",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def user_purged(
        self, user_id: str, claims: int, logins: int, memberships: int
    ) -> None:
        """Record that a user and its dependent rows were deleted."""
        self._logger.info(
            "user_purged",
            user_id=user_id,
            claims=claims,
            logins=logins,
            memberships=memberships,
            **self._get_context_kwargs(),
        )

    def ambiguous_user_name(self, user_name: str, match_count: int) -> None:
        """Record that a name lookup matched more than one user."""
        self._logger.warning(
            "ambiguous_user_name",
            user_name=user_name,
            match_count=match_count,
            **self._get_context_kwargs(),
        )

    def role_not_found(self, user_id: str, role_name: str) -> None:
        """Record that a membership change named an unknown role."""
        self._logger.debug(
            "role_not_found",
            user_id=user_id,
            role_name=role_name,
            **self._get_context_kwargs(),
        )


class DefaultRoleStoreProbe:
    """Default implementation of RoleStoreProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or get_logger("role_store")
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultRoleStoreProbe:
        return DefaultRoleStoreProbe(logger=self._logger, context=context)

    def role_created(self, role_id: str, name: str | None) -> None:
        self._logger.info(
            "role_created",
            role_id=role_id,
            name=name,
            **self._get_context_kwargs(),
        )

    def role_updated(self, role_id: str, name: str | None) -> None:
        self._logger.info(
            "role_updated",
            role_id=role_id,
            name=name,
            **self._get_context_kwargs(),
        )

    def role_deleted(self, role_id: str) -> None:
        self._logger.info(
            "role_deleted",
            role_id=role_id,
            **self._get_context_kwargs(),
        )
