"""Removal of columns without any value."""

from libbids.catalog.table import Table


def drop_na_columns(table: Table) -> Table:
    """Drop columns whose cells are absent in every data row.

    Column order is otherwise kept. A table without data rows loses all
    its columns.
    """
    keep = [
        col
        for col in range(len(table.columns))
        if any(row[col] is not None for row in table.rows)
    ]
    return Table(
        columns=tuple(table.columns[col] for col in keep),
        rows=tuple(tuple(row[col] for col in keep) for row in table.rows),
    )
