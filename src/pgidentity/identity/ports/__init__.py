"""Ports for the identity context.

The protocols here describe the storage capabilities the hosting identity
framework consumes. Implementations live in ``identity.infrastructure``.
"""

from identity.ports.stores import (
    IQueryableRoleStore,
    IQueryableUserStore,
    IRoleStore,
    IUserClaimStore,
    IUserEmailStore,
    IUserLockoutStore,
    IUserLoginStore,
    IUserPasswordStore,
    IUserRoleStore,
    IUserSecurityStampStore,
    IUserStore,
    IUserTwoFactorStore,
)

__all__ = [
    "IQueryableRoleStore",
    "IQueryableUserStore",
    "IRoleStore",
    "IUserClaimStore",
    "IUserEmailStore",
    "IUserLockoutStore",
    "IUserLoginStore",
    "IUserPasswordStore",
    "IUserRoleStore",
    "IUserSecurityStampStore",
    "IUserStore",
    "IUserTwoFactorStore",
]
