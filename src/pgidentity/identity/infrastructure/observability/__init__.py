"""Domain-Oriented Observability for identity infrastructure.

Probes for store operations following Domain-Oriented Observability patterns.
"""

from identity.infrastructure.observability.store_probe import (
    DefaultRoleStoreProbe,
    DefaultUserStoreProbe,
    RoleStoreProbe,
    UserStoreProbe,
)

__all__ = [
    "DefaultRoleStoreProbe",
    "DefaultUserStoreProbe",
    "RoleStoreProbe",
    "UserStoreProbe",
]
