"""Unit tests for ResultRow."""

import pytest

from infrastructure.database.rows import ResultRow, to_text


class TestTextualView:
    """Rows read as mappings of column name to text."""

    def test_values_render_as_text(self):
        row = ResultRow({"Id": 7, "Name": "admin", "Missing": None})

        assert row["Id"] == "7"
        assert row["Name"] == "admin"
        assert row["Missing"] is None

    def test_booleans_use_literals(self):
        assert to_text(True) == "True"
        assert to_text(False) == "False"

    def test_mapping_protocol(self):
        row = ResultRow.from_cursor_row(["Id", "Name"], ("r1", "admin"))

        assert list(row) == ["Id", "Name"]
        assert len(row) == 2
        assert "Name" in row

    def test_unknown_column_raises_key_error(self):
        row = ResultRow({"Id": "u1"})

        with pytest.raises(KeyError):
            row["UserName"]


class TestTypedAccessors:
    """Typed accessors avoid re-parsing text."""

    def test_raw_returns_native_value(self):
        row = ResultRow({"EmailConfirmed": True})

        assert row.raw("EmailConfirmed") is True

    def test_get_optional_str_treats_empty_as_absent(self):
        row = ResultRow({"PasswordHash": "", "SecurityStamp": None, "Email": "a@x.com"})

        assert row.get_optional_str("PasswordHash") is None
        assert row.get_optional_str("SecurityStamp") is None
        assert row.get_optional_str("Email") == "a@x.com"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, True),
            (False, False),
            ("True", True),
            ("true", False),
            ("False", False),
            (None, False),
        ],
    )
    def test_get_bool(self, value, expected):
        row = ResultRow({"EmailConfirmed": value})

        assert row.get_bool("EmailConfirmed") is expected
