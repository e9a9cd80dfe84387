"""Table accessor for AspNetUserLogins."""

from __future__ import annotations

from infrastructure.database.connection import ConnectionManager
from identity.domain.entities import IdentityUser, UserLoginInfo
from identity.infrastructure.guards import require, require_text


class UserLoginsTable:
    """SQL access to the AspNetUserLogins table."""

    def __init__(self, database: ConnectionManager):
        self._database = database

    def insert(self, user: IdentityUser, login: UserLoginInfo) -> int:
        require(user, "user")
        require(login, "login")
        require_text(user.id, "user.id")

        return self._database.execute(
            'INSERT INTO "AspNetUserLogins" ("LoginProvider", "ProviderKey", "UserId") '
            "VALUES (%(login_provider)s, %(provider_key)s, %(user_id)s)",
            {
                "login_provider": login.login_provider,
                "provider_key": login.provider_key,
                "user_id": user.id,
            },
        )

    def delete(self, user: IdentityUser, login: UserLoginInfo) -> int:
        require(user, "user")
        require(login, "login")
        require_text(user.id, "user.id")

        return self._database.execute(
            'DELETE FROM "AspNetUserLogins" WHERE "UserId" = %(user_id)s '
            'AND "LoginProvider" = %(login_provider)s '
            'AND "ProviderKey" = %(provider_key)s',
            {
                "user_id": user.id,
                "login_provider": login.login_provider,
                "provider_key": login.provider_key,
            },
        )

    def delete_by_user_id(self, user_id: str) -> int:
        """Delete every login of a user."""
        require_text(user_id, "user_id")

        return self._database.execute(
            'DELETE FROM "AspNetUserLogins" WHERE "UserId" = %(user_id)s',
            {"user_id": user_id},
        )

    def find_user_id_by_login(self, login: UserLoginInfo) -> str | None:
        """Resolve (provider, key) to the id of the user it belongs to."""
        require(login, "login")

        return self._database.query_str(
            'SELECT "UserId" FROM "AspNetUserLogins" '
            'WHERE "LoginProvider" = %(login_provider)s '
            'AND "ProviderKey" = %(provider_key)s',
            {
                "login_provider": login.login_provider,
                "provider_key": login.provider_key,
            },
        )

    def find_by_user_id(self, user_id: str) -> list[UserLoginInfo]:
        require_text(user_id, "user_id")

        rows = self._database.query_rows(
            'SELECT "LoginProvider", "ProviderKey" FROM "AspNetUserLogins" '
            'WHERE "UserId" = %(user_id)s',
            {"user_id": user_id},
        )
        return [
            UserLoginInfo(
                login_provider=row.get_str("LoginProvider"),
                provider_key=row.get_str("ProviderKey"),
            )
            for row in rows
        ]
