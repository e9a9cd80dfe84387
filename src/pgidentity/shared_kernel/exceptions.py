"""Exceptions shared across the infrastructure and identity layers.

These exceptions describe caller mistakes and unsupported operations. They
are raised synchronously, before any statement reaches the database.
Database-layer failures live in ``infrastructure.database.exceptions``.
"""


class InvalidArgumentError(ValueError):
    """Raised when a required argument is None or empty.

    Raised before any SQL is built, so no I/O has happened when a caller
    sees this exception.
    """

    def __init__(self, argument: str, message: str | None = None):
        super().__init__(message or f"Null or empty argument: {argument}")
        self.argument = argument


class NotSupportedError(NotImplementedError):
    """Raised when a capability is part of the contract but not implemented."""

    pass


class AmbiguousResultError(LookupError):
    """Raised when a lookup expected to be unique matches more than one row."""

    def __init__(self, message: str, match_count: int):
        super().__init__(message)
        self.match_count = match_count
