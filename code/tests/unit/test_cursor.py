"""Unit tests for sorted iteration."""

import pytest

from libbids.catalog import Table
from libbids.query import ColumnNotFoundError, TableCursor, iter_rows, version_key


@pytest.mark.unit
@pytest.mark.ai_generated
class TestVersionKey:
    """Tests for version_key function."""

    def test_numeric_chunks(self) -> None:
        """Test that digit runs compare numerically."""
        assert sorted(["sub-10", "sub-9", "sub-1"], key=version_key) == ["sub-1", "sub-9", "sub-10"]

    def test_prefix_first(self) -> None:
        """Test that a prefix sorts before its extensions."""
        assert sorted(["run-1", "run"], key=version_key) == ["run", "run-1"]

    def test_text_then_number(self) -> None:
        """Test mixed alphanumeric values."""
        assert sorted(["a2b", "a10a", "a2a"], key=version_key) == ["a2a", "a2b", "a10a"]


@pytest.mark.unit
@pytest.mark.ai_generated
class TestTableCursor:
    """Tests for TableCursor class."""

    TABLE = Table.from_csv("sub,ses\nsub-02,ses-1\nsub-10,ses-1\nsub-9,ses-2\nsub-02,NA\n")

    def test_sort_by_column(self) -> None:
        """Test version-aware ordering on one column."""
        cursor = TableCursor(self.TABLE, sort_columns=["sub"])
        assert [row["sub"] for row in cursor] == ["sub-02", "sub-02", "sub-9", "sub-10"]

    def test_sort_is_stable(self) -> None:
        """Test that ties keep table order."""
        cursor = TableCursor(self.TABLE, sort_columns=["sub"])
        assert [row["ses"] for row in cursor][:2] == ["ses-1", None]

    def test_secondary_key(self) -> None:
        """Test that later sort columns break ties."""
        rows = list(iter_rows(self.TABLE, sort_columns=["ses", "sub"]))
        assert [(row["ses"], row["sub"]) for row in rows] == [
            (None, "sub-02"),
            ("ses-1", "sub-02"),
            ("ses-1", "sub-10"),
            ("ses-2", "sub-9"),
        ]

    def test_default_sorts_all_columns(self) -> None:
        """Test that all columns are used left to right by default."""
        rows = list(TableCursor(self.TABLE))
        assert [(row["sub"], row["ses"]) for row in rows] == [
            ("sub-02", None),
            ("sub-02", "ses-1"),
            ("sub-9", "ses-2"),
            ("sub-10", "ses-1"),
        ]

    def test_reverse(self) -> None:
        """Test descending order."""
        cursor = TableCursor(self.TABLE, sort_columns=["2"], reverse=True)
        assert [row["ses"] for row in cursor] == ["ses-2", "ses-1", "ses-1", None]

    def test_next_row_until_exhausted(self) -> None:
        """Test explicit stepping and position tracking."""
        cursor = TableCursor(self.TABLE, sort_columns=["sub"])
        assert cursor.columns == ("sub", "ses")
        assert len(cursor) == 4
        for _ in range(4):
            assert cursor.next_row() is not None
        assert cursor.position == 4
        assert cursor.next_row() is None
        assert cursor.next_row() is None

    def test_empty_table(self) -> None:
        """Test that a header-only table produces nothing."""
        assert list(TableCursor(Table.from_csv("sub\n"))) == []

    def test_unknown_sort_column(self) -> None:
        """Test error for an unresolvable sort column."""
        with pytest.raises(ColumnNotFoundError):
            TableCursor(self.TABLE, sort_columns=["run"])
