"""Column projection and row filtering."""

import re
from typing import Optional, Sequence, Tuple

from libbids.catalog.table import Table, to_text
from libbids.query.columns import ColumnSelector, QueryError, resolve_column, resolve_columns

RowFilter = Tuple[ColumnSelector, str]


def parse_row_filter(spec: str) -> RowFilter:
    """Split a "column:pattern" filter at its first colon.

    Raises:
        QueryError: If there is no colon
    """
    column, sep, pattern = spec.partition(":")
    if not sep:
        raise QueryError(f"Row filter must look like column:pattern, got '{spec}'")
    return column, pattern


def filter_table(
    table: Table,
    columns: Optional[Sequence[ColumnSelector]] = None,
    row_filters: Optional[Sequence[RowFilter]] = None,
    drop_na: Optional[Sequence[ColumnSelector]] = None,
) -> Table:
    """Project columns and keep rows matching every filter.

    Args:
        table: Input table
        columns: Columns to keep, in output order (duplicates allowed); all if None/empty
        row_filters: (column, pattern) pairs; a row is kept only if every pattern
                     is found (re.search) in the text form of its cell
        drop_na: Columns in which an absent value rejects the row

    Returns:
        New Table

    Raises:
        ColumnNotFoundError: If any selector cannot be resolved; nothing is returned
        QueryError: If a pattern is not a valid regular expression
    """
    out_columns = resolve_columns(table, columns) if columns else list(range(len(table.columns)))

    predicates = []
    for selector, pattern in row_filters or []:
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise QueryError(f"Invalid pattern '{pattern}' for column '{selector}': {e}") from e
        predicates.append((resolve_column(table, selector), regex))

    na_columns = resolve_columns(table, drop_na) if drop_na else []

    rows = []
    for row in table.rows:
        if not all(regex.search(to_text(row[col])) for col, regex in predicates):
            continue
        if any(row[col] is None for col in na_columns):
            continue
        rows.append(tuple(row[col] for col in out_columns))

    return Table(
        columns=tuple(table.columns[col] for col in out_columns),
        rows=tuple(rows),
    )
