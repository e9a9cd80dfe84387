"""Entities for the identity context.

Plain value holders shaped the way the hosting identity framework expects.
Users and roles are mutable because the framework's setters change them in
memory; claims and logins are immutable values.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ulid import ULID


def generate_id() -> str:
    """Generate a new globally unique identifier using ULID."""
    return str(ULID())


@dataclass(eq=False)
class IdentityUser:
    """A user row from AspNetUsers.

    The id is generated when not supplied. Two users are equal when they
    have the same id.
    """

    user_name: str | None = None
    id: str = field(default_factory=generate_id)
    email: str | None = None
    email_confirmed: bool = False
    password_hash: str | None = None
    security_stamp: str | None = None

    def __str__(self) -> str:
        """Return string representation."""
        return f"IdentityUser({self.user_name})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, IdentityUser):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)


@dataclass(eq=False)
class IdentityRole:
    """A role row from AspNetRoles."""

    name: str | None = None
    id: str = field(default_factory=generate_id)

    def __str__(self) -> str:
        return f"IdentityRole({self.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityRole):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class Claim:
    """A (type, value) attribute attached to a user."""

    type: str
    value: str


@dataclass(frozen=True)
class UserLoginInfo:
    """Link between a local user and an external identity provider.

    (login_provider, provider_key) identifies at most one user.
    """

    login_provider: str
    provider_key: str
