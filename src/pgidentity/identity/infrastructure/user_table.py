"""Table accessor for AspNetUsers.

Owns the SQL for the users table and the mapping between its rows and
IdentityUser entities.
"""

from __future__ import annotations

from infrastructure.database.connection import ConnectionManager
from infrastructure.database.rows import ResultRow
from identity.domain.entities import IdentityUser
from identity.infrastructure.guards import require, require_text

_SELECT_USERS = (
    'SELECT "Id", "UserName", "PasswordHash", "SecurityStamp", "Email", '
    '"EmailConfirmed" FROM "AspNetUsers"'
)


def row_to_user(row: ResultRow) -> IdentityUser:
    """Map an AspNetUsers row to a user.

    Empty strings in PasswordHash, SecurityStamp and Email are read as
    absent values.
    """
    return IdentityUser(
        id=row.get_str("Id"),
        user_name=row.get_str("UserName"),
        password_hash=row.get_optional_str("PasswordHash"),
        security_stamp=row.get_optional_str("SecurityStamp"),
        email=row.get_optional_str("Email"),
        email_confirmed=row.get_bool("EmailConfirmed"),
    )


class UserTable:
    """SQL access to the AspNetUsers table.

    Name and email lookups apply PostgreSQL LOWER() to both the column and
    the argument, so they are case-insensitive while stored values keep
    their casing.
    """

    def __init__(self, database: ConnectionManager):
        self._database = database

    def insert(self, user: IdentityUser) -> int:
        """Insert a new user row.

        Returns:
            Number of rows inserted
        """
        require(user, "user")
        require_text(user.id, "user.id")

        command_text = (
            'INSERT INTO "AspNetUsers" ("Id", "UserName", "PasswordHash", '
            '"SecurityStamp", "Email", "EmailConfirmed") '
            "VALUES (%(id)s, %(name)s, %(pwd_hash)s, %(sec_stamp)s, "
            "%(email)s, %(email_confirmed)s)"
        )
        return self._database.execute(command_text, self._user_parameters(user))

    def update(self, user: IdentityUser) -> int:
        """Update every mutable column of a user, keyed by id."""
        require(user, "user")
        require_text(user.id, "user.id")

        command_text = (
            'UPDATE "AspNetUsers" SET "UserName" = %(name)s, '
            '"PasswordHash" = %(pwd_hash)s, "SecurityStamp" = %(sec_stamp)s, '
            '"Email" = %(email)s, "EmailConfirmed" = %(email_confirmed)s '
            'WHERE "Id" = %(id)s'
        )
        return self._database.execute(command_text, self._user_parameters(user))

    def delete(self, user_id: str) -> int:
        """Delete a user row. Dependent rows in other tables are untouched."""
        require_text(user_id, "user_id")

        command_text = 'DELETE FROM "AspNetUsers" WHERE "Id" = %(user_id)s'
        return self._database.execute(command_text, {"user_id": user_id})

    def get_by_id(self, user_id: str) -> IdentityUser | None:
        """Return the user with the given id, or None."""
        require_text(user_id, "user_id")

        rows = self._database.query_rows(
            f'{_SELECT_USERS} WHERE "Id" = %(id)s', {"id": user_id}
        )
        if len(rows) != 1:
            return None
        return row_to_user(rows[0])

    def get_by_name(self, user_name: str) -> list[IdentityUser]:
        """Return every user whose name matches case-insensitively."""
        require_text(user_name, "user_name")

        rows = self._database.query_rows(
            f'{_SELECT_USERS} WHERE LOWER("UserName") = LOWER(%(name)s)',
            {"name": user_name},
        )
        return [row_to_user(row) for row in rows]

    def get_by_email(self, email: str) -> list[IdentityUser]:
        """Return every user whose email matches case-insensitively."""
        require_text(email, "email")

        rows = self._database.query_rows(
            f'{_SELECT_USERS} WHERE LOWER("Email") = LOWER(%(email)s)',
            {"email": email},
        )
        return [row_to_user(row) for row in rows]

    def get_all(self) -> list[IdentityUser]:
        """Return every user. Loads the whole table into memory."""
        return [row_to_user(row) for row in self._database.query_rows(_SELECT_USERS)]

    def get_user_name(self, user_id: str) -> str | None:
        require_text(user_id, "user_id")

        return self._database.query_str(
            'SELECT "UserName" FROM "AspNetUsers" WHERE "Id" = %(id)s',
            {"id": user_id},
        )

    def get_user_id(self, user_name: str) -> str | None:
        require_text(user_name, "user_name")

        return self._database.query_str(
            'SELECT "Id" FROM "AspNetUsers" '
            'WHERE LOWER("UserName") = LOWER(%(name)s)',
            {"name": user_name},
        )

    def get_password_hash(self, user_id: str) -> str | None:
        """Return the stored password hash; an empty hash reads as None."""
        require_text(user_id, "user_id")

        password_hash = self._database.query_str(
            'SELECT "PasswordHash" FROM "AspNetUsers" WHERE "Id" = %(id)s',
            {"id": user_id},
        )
        return password_hash or None

    def set_password_hash(self, user_id: str, password_hash: str | None) -> int:
        require_text(user_id, "user_id")

        return self._database.execute(
            'UPDATE "AspNetUsers" SET "PasswordHash" = %(pwd_hash)s WHERE "Id" = %(id)s',
            {"pwd_hash": password_hash, "id": user_id},
        )

    def get_security_stamp(self, user_id: str) -> str | None:
        require_text(user_id, "user_id")

        security_stamp = self._database.query_str(
            'SELECT "SecurityStamp" FROM "AspNetUsers" WHERE "Id" = %(id)s',
            {"id": user_id},
        )
        return security_stamp or None

    @staticmethod
    def _user_parameters(user: IdentityUser) -> dict[str, object]:
        return {
            "id": user.id,
            "name": user.user_name,
            "pwd_hash": user.password_hash,
            "sec_stamp": user.security_stamp,
            "email": user.email,
            "email_confirmed": user.email_confirmed,
        }
