"""PostgreSQL-backed role store."""

from __future__ import annotations

from infrastructure.database.connection import ConnectionManager
from identity.domain.entities import IdentityRole, generate_id
from identity.infrastructure.guards import require, require_text
from identity.infrastructure.observability import (
    DefaultRoleStoreProbe,
    RoleStoreProbe,
)
from identity.infrastructure.role_table import RoleTable
from shared_kernel.exceptions import NotSupportedError


class RoleStore:
    """Role persistence for the identity framework.

    Owns its ConnectionManager exclusively, like UserStore.
    """

    def __init__(
        self,
        database: ConnectionManager | None = None,
        probe: RoleStoreProbe | None = None,
    ) -> None:
        self._database = database if database is not None else ConnectionManager()
        self._probe = probe or DefaultRoleStoreProbe()
        self._role_table = RoleTable(self._database)

    @property
    def database(self) -> ConnectionManager:
        return self._database

    @property
    def roles(self) -> list[IdentityRole]:
        """Queryable role collection.

        Raises:
            NotSupportedError: Always
        """
        raise NotSupportedError("RoleStore does not expose a queryable role collection")

    def create_role(self, role: IdentityRole) -> None:
        require(role, "role")
        if not role.id:
            role.id = generate_id()

        self._role_table.insert(role)
        self._probe.role_created(role.id, role.name)

    def update_role(self, role: IdentityRole) -> None:
        require(role, "role")

        self._role_table.update(role)
        self._probe.role_updated(role.id, role.name)

    def delete_role(self, role: IdentityRole) -> None:
        """Delete a role. Memberships referencing it are left in place."""
        require(role, "role")

        self._role_table.delete(role.id)
        self._probe.role_deleted(role.id)

    def find_role_by_id(self, role_id: str) -> IdentityRole | None:
        require_text(role_id, "role_id")

        return self._role_table.get_role_by_id(role_id)

    def find_role_by_name(self, role_name: str) -> IdentityRole | None:
        require_text(role_name, "role_name")

        return self._role_table.get_role_by_name(role_name)

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        self._database.close()

    def __enter__(self) -> RoleStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
