"""Result rows returned by the connection manager.

A ``ResultRow`` is a read-only mapping of column name to the column's
textual value (or None for SQL NULL). The native driver values are kept
alongside so callers can read typed values without re-parsing text.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

TRUE_LITERAL = "True"
FALSE_LITERAL = "False"


def to_text(value: Any) -> str | None:
    """Render a driver value the way it crosses the row boundary."""
    if value is None:
        return None
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    return str(value)


class ResultRow(Mapping[str, str | None]):
    """One row of a query result.

    Indexing returns text (``row["EmailConfirmed"] == "True"``); the
    ``get_*`` accessors return typed values.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any]):
        self._values = dict(values)

    @classmethod
    def from_cursor_row(cls, columns: list[str], row: tuple[Any, ...]) -> ResultRow:
        """Build a row from a cursor description and a fetched tuple."""
        return cls(dict(zip(columns, row)))

    def __getitem__(self, column: str) -> str | None:
        return to_text(self._values[column])

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ResultRow({self._values!r})"

    def raw(self, column: str) -> Any:
        """Return the native driver value of a column."""
        return self._values[column]

    def get_str(self, column: str) -> str | None:
        """Return the textual value of a column, or None for NULL."""
        return self[column]

    def get_optional_str(self, column: str) -> str | None:
        """Return the textual value, treating an empty string as absent."""
        value = self[column]
        return value or None

    def get_bool(self, column: str) -> bool:
        """Return a column as a boolean.

        Native booleans are returned unchanged. Textual values are true only
        when they match the true literal exactly. NULL is False.
        """
        value = self._values[column]
        if isinstance(value, bool):
            return value
        return to_text(value) == TRUE_LITERAL
