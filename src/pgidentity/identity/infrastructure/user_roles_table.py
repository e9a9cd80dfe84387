"""Table accessor for AspNetUserRoles."""

from __future__ import annotations

from infrastructure.database.connection import ConnectionManager
from identity.domain.entities import IdentityUser
from identity.infrastructure.guards import require, require_text


class UserRolesTable:
    """SQL access to the AspNetUserRoles membership table.

    Reads join AspNetRoles so callers get role names rather than ids.
    """

    def __init__(self, database: ConnectionManager):
        self._database = database

    def insert(self, user: IdentityUser, role_id: str) -> int:
        require(user, "user")
        require_text(user.id, "user.id")
        require_text(role_id, "role_id")

        return self._database.execute(
            'INSERT INTO "AspNetUserRoles" ("UserId", "RoleId") '
            "VALUES (%(user_id)s, %(role_id)s)",
            {"user_id": user.id, "role_id": role_id},
        )

    def delete(self, user_id: str, role_id: str) -> int:
        require_text(user_id, "user_id")
        require_text(role_id, "role_id")

        return self._database.execute(
            'DELETE FROM "AspNetUserRoles" '
            'WHERE "UserId" = %(user_id)s AND "RoleId" = %(role_id)s',
            {"user_id": user_id, "role_id": role_id},
        )

    def delete_by_user_id(self, user_id: str) -> int:
        """Delete every role membership of a user."""
        require_text(user_id, "user_id")

        return self._database.execute(
            'DELETE FROM "AspNetUserRoles" WHERE "UserId" = %(user_id)s',
            {"user_id": user_id},
        )

    def find_by_user_id(self, user_id: str) -> list[str]:
        """Return the names of the roles a user belongs to."""
        require_text(user_id, "user_id")

        rows = self._database.query_rows(
            'SELECT "AspNetRoles"."Name" FROM "AspNetRoles" '
            'INNER JOIN "AspNetUserRoles" '
            'ON "AspNetUserRoles"."RoleId" = "AspNetRoles"."Id" '
            'WHERE "AspNetUserRoles"."UserId" = %(user_id)s',
            {"user_id": user_id},
        )
        return [row.get_str("Name") for row in rows]
