"""Database-specific exceptions for the identity store."""


class DatabaseError(Exception):
    """Base exception for database operations.

    Every storage failure surfaces as a subclass of this exception. The
    table accessors and stores never catch it.
    """

    pass


class DatabaseConnectionError(DatabaseError):
    """Raised when a database connection cannot be opened."""

    def __init__(self, message: str, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


class QueryExecutionError(DatabaseError):
    """Raised when a statement fails on an open connection."""

    def __init__(self, message: str, query: str | None = None):
        super().__init__(message)
        self.query = query
