"""Domain layer for the identity context."""

from identity.domain.entities import (
    Claim,
    IdentityRole,
    IdentityUser,
    UserLoginInfo,
    generate_id,
)

__all__ = [
    "Claim",
    "IdentityRole",
    "IdentityUser",
    "UserLoginInfo",
    "generate_id",
]
