"""PostgreSQL-backed user store.

The UserStore is the single object the hosting identity framework talks to
for users. It composes the user, role, claim, login and membership table
accessors over one ConnectionManager and implements every user capability
protocol in ``identity.ports``.
"""

from __future__ import annotations

from infrastructure.database.connection import ConnectionManager
from infrastructure.settings import StoreSettings, get_store_settings
from identity.domain.entities import Claim, IdentityUser, UserLoginInfo, generate_id
from identity.infrastructure.guards import require, require_text
from identity.infrastructure.lockout import NoLockoutCapability
from identity.infrastructure.observability import (
    DefaultUserStoreProbe,
    UserStoreProbe,
)
from identity.infrastructure.role_table import RoleTable
from identity.infrastructure.user_claims_table import UserClaimsTable
from identity.infrastructure.user_logins_table import UserLoginsTable
from identity.infrastructure.user_roles_table import UserRolesTable
from identity.infrastructure.user_table import UserTable
from shared_kernel.exceptions import AmbiguousResultError


class UserStore(NoLockoutCapability):
    """User persistence for the identity framework.

    The store exclusively owns its ConnectionManager and therefore its one
    connection; close the store to release it. Stores are not thread-safe;
    use one store per thread.

    Field setters (password hash, security stamp, email, email confirmed)
    change the entity in memory and, when ``StoreSettings.write_through`` is
    enabled, persist it through ``update_user`` straight away.

    Database errors are never caught here.
    """

    def __init__(
        self,
        database: ConnectionManager | None = None,
        probe: UserStoreProbe | None = None,
        settings: StoreSettings | None = None,
    ) -> None:
        """Initialize the store and its table accessors.

        Args:
            database: Connection manager to own; a manager for the default
                named connection is created when omitted
            probe: Optional domain probe for observability
            settings: Store behavior settings
        """
        self._database = database if database is not None else ConnectionManager()
        self._probe = probe or DefaultUserStoreProbe()
        self._settings = settings or get_store_settings()
        self._user_table = UserTable(self._database)
        self._role_table = RoleTable(self._database)
        self._user_roles_table = UserRolesTable(self._database)
        self._user_claims_table = UserClaimsTable(self._database)
        self._user_logins_table = UserLoginsTable(self._database)

    @property
    def database(self) -> ConnectionManager:
        return self._database

    @property
    def users(self) -> list[IdentityUser]:
        """Every user, loaded into memory. Only suitable for small tables."""
        return self._user_table.get_all()

    def create_user(self, user: IdentityUser) -> None:
        """Insert a user, assigning a new id when it has none."""
        require(user, "user")
        if not user.id:
            user.id = generate_id()

        self._user_table.insert(user)
        self._probe.user_created(user.id, user.user_name)

    def update_user(self, user: IdentityUser) -> None:
        require(user, "user")

        self._user_table.update(user)
        self._probe.user_updated(user.id)

    def delete_user(self, user: IdentityUser) -> None:
        """Delete the user row.

        Claims, logins and role memberships stay in place; use
        ``purge_user`` to remove them as well.
        """
        require(user, "user")

        self._user_table.delete(user.id)
        self._probe.user_deleted(user.id)

    def purge_user(self, user: IdentityUser) -> None:
        """Delete a user together with its claims, logins and memberships.

        Each delete is its own statement; a failure part way leaves the
        earlier deletes in place.
        """
        require(user, "user")
        require_text(user.id, "user.id")

        claims = self._user_claims_table.delete_by_user_id(user.id)
        logins = self._user_logins_table.delete_by_user_id(user.id)
        memberships = self._user_roles_table.delete_by_user_id(user.id)
        self._user_table.delete(user.id)
        self._probe.user_purged(user.id, claims, logins, memberships)

    def find_user_by_id(self, user_id: str) -> IdentityUser | None:
        require_text(user_id, "user_id")

        return self._user_table.get_by_id(user_id)

    def find_user_by_name(self, user_name: str) -> IdentityUser | None:
        """Find a user by case-insensitive name.

        Raises:
            AmbiguousResultError: If several users share the name
        """
        require_text(user_name, "user_name")

        users = self._user_table.get_by_name(user_name)
        if len(users) > 1:
            self._probe.ambiguous_user_name(user_name, len(users))
            raise AmbiguousResultError(
                f"More than one user record returned for {user_name!r}",
                match_count=len(users),
            )
        return users[0] if users else None

    def find_user_by_email(self, email: str) -> IdentityUser | None:
        """Find the first user with the case-insensitive email."""
        require_text(email, "email")

        users = self._user_table.get_by_email(email)
        return users[0] if users else None

    def get_claims(self, user: IdentityUser) -> list[Claim]:
        require(user, "user")

        return self._user_claims_table.find_by_user_id(user.id)

    def add_claim(self, user: IdentityUser, claim: Claim) -> None:
        require(user, "user")
        require(claim, "claim")

        self._user_claims_table.insert(claim, user.id)

    def remove_claim(self, user: IdentityUser, claim: Claim) -> None:
        require(user, "user")
        require(claim, "claim")

        self._user_claims_table.delete(user, claim)

    def add_login(self, user: IdentityUser, login: UserLoginInfo) -> None:
        require(user, "user")
        require(login, "login")

        self._user_logins_table.insert(user, login)

    def remove_login(self, user: IdentityUser, login: UserLoginInfo) -> None:
        require(user, "user")
        require(login, "login")

        self._user_logins_table.delete(user, login)

    def get_logins(self, user: IdentityUser) -> list[UserLoginInfo]:
        require(user, "user")

        return self._user_logins_table.find_by_user_id(user.id)

    def find_by_login(self, login: UserLoginInfo) -> IdentityUser | None:
        """Resolve an external login to the full user row."""
        require(login, "login")

        user_id = self._user_logins_table.find_user_id_by_login(login)
        if user_id is None:
            return None
        return self._user_table.get_by_id(user_id)

    def add_to_role(self, user: IdentityUser, role_name: str) -> None:
        """Add a membership. An unknown role name changes nothing."""
        require(user, "user")
        require_text(role_name, "role_name")

        role_id = self._role_table.get_role_id(role_name)
        if not role_id:
            self._probe.role_not_found(user.id, role_name)
            return
        self._user_roles_table.insert(user, role_id)

    def remove_from_role(self, user: IdentityUser, role_name: str) -> None:
        """Remove a membership. An unknown role name changes nothing."""
        require(user, "user")
        require_text(role_name, "role_name")

        role_id = self._role_table.get_role_id(role_name)
        if not role_id:
            self._probe.role_not_found(user.id, role_name)
            return
        self._user_roles_table.delete(user.id, role_id)

    def get_roles(self, user: IdentityUser) -> list[str]:
        require(user, "user")

        return self._user_roles_table.find_by_user_id(user.id)

    def is_in_role(self, user: IdentityUser, role_name: str) -> bool:
        require(user, "user")
        require_text(role_name, "role_name")

        return role_name in self._user_roles_table.find_by_user_id(user.id)

    def get_password_hash(self, user: IdentityUser) -> str | None:
        require(user, "user")
        return user.password_hash

    def set_password_hash(self, user: IdentityUser, password_hash: str | None) -> None:
        require(user, "user")
        user.password_hash = password_hash
        self._write_through(user)

    def has_password(self, user: IdentityUser) -> bool:
        require(user, "user")
        return bool(user.password_hash)

    def get_security_stamp(self, user: IdentityUser) -> str | None:
        require(user, "user")
        return user.security_stamp

    def set_security_stamp(self, user: IdentityUser, stamp: str | None) -> None:
        require(user, "user")
        user.security_stamp = stamp
        self._write_through(user)

    def get_email(self, user: IdentityUser) -> str | None:
        require(user, "user")
        return user.email

    def set_email(self, user: IdentityUser, email: str | None) -> None:
        require(user, "user")
        user.email = email
        self._write_through(user)

    def get_email_confirmed(self, user: IdentityUser) -> bool:
        require(user, "user")
        return user.email_confirmed

    def set_email_confirmed(self, user: IdentityUser, confirmed: bool) -> None:
        require(user, "user")
        user.email_confirmed = confirmed
        self._write_through(user)

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        self._database.close()

    def __enter__(self) -> UserStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _write_through(self, user: IdentityUser) -> None:
        if self._settings.write_through:
            self.update_user(user)
