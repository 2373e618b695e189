"""Sorted iteration over table rows."""

import re
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from libbids.catalog.table import Cell, Row, Table, to_text
from libbids.query.columns import ColumnSelector, resolve_columns

_DIGITS_RE = re.compile(r"(\d+)")

VersionKey = Tuple[Tuple[str, int], ...]


def version_key(value: str) -> VersionKey:
    """Sort key comparing digit runs numerically, like ``sort --version-sort``.

    Example:
        >>> sorted(["sub-10", "sub-9"], key=version_key)
        ['sub-9', 'sub-10']
    """
    chunks = _DIGITS_RE.split(value)
    # split() alternates text and digit runs, starting and ending with text
    chunks.append("")
    return tuple((chunks[i], int(chunks[i + 1] or -1)) for i in range(0, len(chunks) - 1, 2))


class TableCursor:
    """Iterator over table rows in version-aware sorted order.

    The sort is computed once, when the cursor is created. Rows are produced
    as column-name to cell mappings.

    Attributes:
        columns: Header of the table
        sort_columns: 0-based positions used as sort keys, primary first
        reverse: Whether the order is descending
    """

    def __init__(
        self,
        table: Table,
        sort_columns: Optional[Sequence[ColumnSelector]] = None,
        reverse: bool = False,
    ):
        """Initialize the cursor.

        Args:
            table: Table to iterate over
            sort_columns: Sort keys, primary first; all columns left to right if None/empty
            reverse: Sort in descending order

        Raises:
            ColumnNotFoundError: If a sort column cannot be resolved
        """
        self.columns = table.columns
        if sort_columns:
            self.sort_columns = resolve_columns(table, sort_columns)
        else:
            self.sort_columns = list(range(len(table.columns)))
        self.reverse = reverse
        self._rows: List[Row] = sorted(table.rows, key=self._sort_key, reverse=reverse)
        self._position = 0

    def _sort_key(self, row: Row) -> Tuple[VersionKey, ...]:
        return tuple(version_key(to_text(row[col])) for col in self.sort_columns)

    @property
    def position(self) -> int:
        """Number of rows produced so far."""
        return self._position

    def __len__(self) -> int:
        return len(self._rows)

    def next_row(self) -> Optional[Dict[str, Cell]]:
        """Produce the next row, or None once all rows have been produced."""
        if self._position >= len(self._rows):
            return None
        row = self._rows[self._position]
        self._position += 1
        return dict(zip(self.columns, row))

    def __iter__(self) -> "TableCursor":
        return self

    def __next__(self) -> Dict[str, Cell]:
        row = self.next_row()
        if row is None:
            raise StopIteration
        return row


def iter_rows(
    table: Table,
    sort_columns: Optional[Sequence[ColumnSelector]] = None,
    reverse: bool = False,
) -> Iterator[Dict[str, Cell]]:
    """Iterate over rows sorted by the given columns (see TableCursor)."""
    return TableCursor(table, sort_columns=sort_columns, reverse=reverse)
