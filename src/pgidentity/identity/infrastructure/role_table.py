"""Table accessor for AspNetRoles."""

from __future__ import annotations

from infrastructure.database.connection import ConnectionManager
from infrastructure.database.rows import ResultRow
from identity.domain.entities import IdentityRole
from identity.infrastructure.guards import require, require_text


def row_to_role(row: ResultRow) -> IdentityRole:
    """Map an AspNetRoles row to a role."""
    return IdentityRole(name=row.get_str("Name"), id=row.get_str("Id"))


class RoleTable:
    """SQL access to the AspNetRoles table.

    Role names are compared case-sensitively. The schema does not enforce
    unique names, so name lookups use the first matching row.
    """

    def __init__(self, database: ConnectionManager):
        self._database = database

    def insert(self, role: IdentityRole) -> int:
        require(role, "role")
        require_text(role.id, "role.id")

        return self._database.execute(
            'INSERT INTO "AspNetRoles" ("Id", "Name") VALUES (%(id)s, %(name)s)',
            {"id": role.id, "name": role.name},
        )

    def update(self, role: IdentityRole) -> int:
        """Rename a role. Name is the only mutable column."""
        require(role, "role")
        require_text(role.id, "role.id")

        return self._database.execute(
            'UPDATE "AspNetRoles" SET "Name" = %(name)s WHERE "Id" = %(id)s',
            {"id": role.id, "name": role.name},
        )

    def delete(self, role_id: str) -> int:
        require_text(role_id, "role_id")

        return self._database.execute(
            'DELETE FROM "AspNetRoles" WHERE "Id" = %(id)s', {"id": role_id}
        )

    def get_role_name(self, role_id: str) -> str | None:
        require_text(role_id, "role_id")

        return self._database.query_str(
            'SELECT "Name" FROM "AspNetRoles" WHERE "Id" = %(id)s', {"id": role_id}
        )

    def get_role_id(self, role_name: str) -> str | None:
        require_text(role_name, "role_name")

        return self._database.query_str(
            'SELECT "Id" FROM "AspNetRoles" WHERE "Name" = %(name)s',
            {"name": role_name},
        )

    def get_role_by_id(self, role_id: str) -> IdentityRole | None:
        role_name = self.get_role_name(role_id)
        if role_name is None:
            return None
        return IdentityRole(name=role_name, id=role_id)

    def get_role_by_name(self, role_name: str) -> IdentityRole | None:
        role_id = self.get_role_id(role_name)
        if role_id is None:
            return None
        return IdentityRole(name=role_name, id=role_id)

    def get_all_roles(self) -> list[IdentityRole]:
        rows = self._database.query_rows('SELECT "Id", "Name" FROM "AspNetRoles"')
        return [row_to_role(row) for row in rows]

    def get_all_role_names(self) -> list[str]:
        rows = self._database.query_rows('SELECT "Name" FROM "AspNetRoles"')
        return [row.get_str("Name") for row in rows]
