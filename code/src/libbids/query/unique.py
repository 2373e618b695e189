"""Extraction of the values of a single column."""

from typing import List

from libbids.catalog.table import Cell, Table
from libbids.query.columns import ColumnSelector, resolve_column


def column_values(
    table: Table,
    column: ColumnSelector,
    unique: bool = True,
    exclude_na: bool = True,
) -> List[Cell]:
    """Collect the values of one column in row order.

    Args:
        table: Input table
        column: Column name or 1-based index
        unique: Keep only the first occurrence of each value
        exclude_na: Leave out absent values (applied before de-duplication)

    Returns:
        List of values

    Raises:
        ColumnNotFoundError: If the column cannot be resolved and the table has rows
    """
    if not table.rows:
        return []

    col = resolve_column(table, column)
    values = [row[col] for row in table.rows]
    if exclude_na:
        values = [value for value in values if value is not None]
    if unique:
        values = list(dict.fromkeys(values))
    return values
