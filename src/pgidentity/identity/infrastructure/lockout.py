"""Placeholder lockout and two-factor capability.

The schema has no lockout or two-factor columns. Stores mix this class in
so the framework finds the capability, but nothing is stored: users are
never locked out and never have two-factor enabled.
"""

from __future__ import annotations

from datetime import datetime

from identity.domain.entities import IdentityUser


class NoLockoutCapability:
    """Lockout and two-factor operations that store nothing."""

    def get_lockout_end_date(self, user: IdentityUser) -> datetime | None:
        return None

    def set_lockout_end_date(
        self, user: IdentityUser, lockout_end: datetime | None
    ) -> None:
        pass

    def increment_access_failed_count(self, user: IdentityUser) -> int:
        return 0

    def reset_access_failed_count(self, user: IdentityUser) -> None:
        pass

    def get_access_failed_count(self, user: IdentityUser) -> int:
        return 0

    def get_lockout_enabled(self, user: IdentityUser) -> bool:
        return False

    def set_lockout_enabled(self, user: IdentityUser, enabled: bool) -> None:
        pass

    def get_two_factor_enabled(self, user: IdentityUser) -> bool:
        return False

    def set_two_factor_enabled(self, user: IdentityUser, enabled: bool) -> None:
        pass
