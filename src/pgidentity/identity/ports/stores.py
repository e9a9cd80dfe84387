"""Store protocols (ports) for the identity context.

Each protocol is one capability the hosting identity framework may ask a
store for. A store object satisfies several of them at once; the framework
discovers capabilities structurally.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from identity.domain.entities import Claim, IdentityRole, IdentityUser, UserLoginInfo


@runtime_checkable
class IUserStore(Protocol):
    """Basic persistence of users."""

    def create_user(self, user: IdentityUser) -> None:
        """Insert a new user.

        Raises:
            InvalidArgumentError: If user is None
        """
        ...

    def update_user(self, user: IdentityUser) -> None:
        """Persist every column of an existing user."""
        ...

    def delete_user(self, user: IdentityUser) -> None:
        """Delete the user row (claims, logins and memberships are kept)."""
        ...

    def find_user_by_id(self, user_id: str) -> IdentityUser | None:
        """Retrieve a user by id, or None if not found."""
        ...

    def find_user_by_name(self, user_name: str) -> IdentityUser | None:
        """Retrieve a user by case-insensitive name.

        Raises:
            AmbiguousResultError: If more than one user has that name
        """
        ...

    def close(self) -> None:
        """Release the store's connection. Idempotent."""
        ...


@runtime_checkable
class IUserPasswordStore(Protocol):
    """Password hash storage."""

    def get_password_hash(self, user: IdentityUser) -> str | None: ...

    def set_password_hash(self, user: IdentityUser, password_hash: str | None) -> None: ...

    def has_password(self, user: IdentityUser) -> bool: ...


@runtime_checkable
class IUserSecurityStampStore(Protocol):
    """Security stamp storage."""

    def get_security_stamp(self, user: IdentityUser) -> str | None: ...

    def set_security_stamp(self, user: IdentityUser, stamp: str | None) -> None: ...


@runtime_checkable
class IUserEmailStore(Protocol):
    """Email address and confirmation storage."""

    def get_email(self, user: IdentityUser) -> str | None: ...

    def set_email(self, user: IdentityUser, email: str | None) -> None: ...

    def get_email_confirmed(self, user: IdentityUser) -> bool: ...

    def set_email_confirmed(self, user: IdentityUser, confirmed: bool) -> None: ...

    def find_user_by_email(self, email: str) -> IdentityUser | None:
        """Retrieve the first user with the case-insensitive email."""
        ...


@runtime_checkable
class IUserClaimStore(Protocol):
    """Claims attached to users."""

    def get_claims(self, user: IdentityUser) -> list[Claim]: ...

    def add_claim(self, user: IdentityUser, claim: Claim) -> None: ...

    def remove_claim(self, user: IdentityUser, claim: Claim) -> None: ...


@runtime_checkable
class IUserLoginStore(Protocol):
    """External login links."""

    def add_login(self, user: IdentityUser, login: UserLoginInfo) -> None: ...

    def remove_login(self, user: IdentityUser, login: UserLoginInfo) -> None: ...

    def get_logins(self, user: IdentityUser) -> list[UserLoginInfo]: ...

    def find_by_login(self, login: UserLoginInfo) -> IdentityUser | None:
        """Resolve an external login to its local user."""
        ...


@runtime_checkable
class IUserRoleStore(Protocol):
    """Role membership of users."""

    def add_to_role(self, user: IdentityUser, role_name: str) -> None: ...

    def remove_from_role(self, user: IdentityUser, role_name: str) -> None: ...

    def get_roles(self, user: IdentityUser) -> list[str]: ...

    def is_in_role(self, user: IdentityUser, role_name: str) -> bool: ...


@runtime_checkable
class IUserLockoutStore(Protocol):
    """Lockout bookkeeping."""

    def get_lockout_end_date(self, user: IdentityUser) -> datetime | None: ...

    def set_lockout_end_date(
        self, user: IdentityUser, lockout_end: datetime | None
    ) -> None: ...

    def increment_access_failed_count(self, user: IdentityUser) -> int: ...

    def reset_access_failed_count(self, user: IdentityUser) -> None: ...

    def get_access_failed_count(self, user: IdentityUser) -> int: ...

    def get_lockout_enabled(self, user: IdentityUser) -> bool: ...

    def set_lockout_enabled(self, user: IdentityUser, enabled: bool) -> None: ...


@runtime_checkable
class IUserTwoFactorStore(Protocol):
    """Two-factor authentication flag."""

    def get_two_factor_enabled(self, user: IdentityUser) -> bool: ...

    def set_two_factor_enabled(self, user: IdentityUser, enabled: bool) -> None: ...


class IQueryableUserStore(Protocol):
    """Access to every user as a collection.

    Not runtime checkable: checking the attribute would load the table.
    """

    @property
    def users(self) -> list[IdentityUser]: ...


@runtime_checkable
class IRoleStore(Protocol):
    """Basic persistence of roles."""

    def create_role(self, role: IdentityRole) -> None: ...

    def update_role(self, role: IdentityRole) -> None: ...

    def delete_role(self, role: IdentityRole) -> None: ...

    def find_role_by_id(self, role_id: str) -> IdentityRole | None: ...

    def find_role_by_name(self, role_name: str) -> IdentityRole | None: ...

    def close(self) -> None: ...


class IQueryableRoleStore(Protocol):
    """Access to every role as a collection."""

    @property
    def roles(self) -> list[IdentityRole]: ...
