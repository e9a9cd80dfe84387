"""Database infrastructure - shared connection primitives."""

from infrastructure.database.connection import ConnectionManager
from infrastructure.database.exceptions import (
    DatabaseConnectionError,
    DatabaseError,
    QueryExecutionError,
)
from infrastructure.database.rows import ResultRow

__all__ = [
    "ConnectionManager",
    "DatabaseConnectionError",
    "DatabaseError",
    "QueryExecutionError",
    "ResultRow",
]
