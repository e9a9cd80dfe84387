"""Argument checks run before any SQL is built."""

from __future__ import annotations

from typing import Any

from shared_kernel.exceptions import InvalidArgumentError


def require(value: Any, argument: str) -> None:
    """Reject a missing entity or value object."""
    if value is None:
        raise InvalidArgumentError(argument)


def require_text(value: str | None, argument: str) -> None:
    """Reject a None or empty identifier or name."""
    if not value:
        raise InvalidArgumentError(argument)
