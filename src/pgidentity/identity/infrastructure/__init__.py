"""PostgreSQL adapters for the identity context."""

from identity.infrastructure.role_store import RoleStore
from identity.infrastructure.user_store import UserStore

__all__ = [
    "RoleStore",
    "UserStore",
]
