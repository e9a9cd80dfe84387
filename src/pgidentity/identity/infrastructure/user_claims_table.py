"""Table accessor for AspNetUserClaims."""

from __future__ import annotations

from infrastructure.database.connection import ConnectionManager
from identity.domain.entities import Claim, IdentityUser
from identity.infrastructure.guards import require, require_text


class UserClaimsTable:
    """SQL access to the AspNetUserClaims table.

    Claims have no key of their own; a claim row is identified by the
    (UserId, ClaimType, ClaimValue) triple.
    """

    def __init__(self, database: ConnectionManager):
        self._database = database

    def insert(self, claim: Claim, user_id: str) -> int:
        require(claim, "claim")
        require_text(user_id, "user_id")

        return self._database.execute(
            'INSERT INTO "AspNetUserClaims" ("ClaimValue", "ClaimType", "UserId") '
            "VALUES (%(value)s, %(type)s, %(user_id)s)",
            {"value": claim.value, "type": claim.type, "user_id": user_id},
        )

    def find_by_user_id(self, user_id: str) -> list[Claim]:
        require_text(user_id, "user_id")

        rows = self._database.query_rows(
            'SELECT "ClaimType", "ClaimValue" FROM "AspNetUserClaims" '
            'WHERE "UserId" = %(user_id)s',
            {"user_id": user_id},
        )
        return [
            Claim(type=row.get_str("ClaimType"), value=row.get_str("ClaimValue"))
            for row in rows
        ]

    def delete_by_user_id(self, user_id: str) -> int:
        """Delete every claim of a user."""
        require_text(user_id, "user_id")

        return self._database.execute(
            'DELETE FROM "AspNetUserClaims" WHERE "UserId" = %(user_id)s',
            {"user_id": user_id},
        )

    def delete(self, user: IdentityUser, claim: Claim) -> int:
        """Delete one claim, matching user id, value and type exactly."""
        require(user, "user")
        require(claim, "claim")
        require_text(user.id, "user.id")

        return self._database.execute(
            'DELETE FROM "AspNetUserClaims" WHERE "UserId" = %(user_id)s '
            'AND "ClaimValue" = %(value)s AND "ClaimType" = %(type)s',
            {"user_id": user.id, "value": claim.value, "type": claim.type},
        )
