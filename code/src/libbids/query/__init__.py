"""Query operations over catalog tables.

Every operation takes a Table and returns a new value; input tables are
never modified.
"""

from libbids.query.columns import (
    ColumnNotFoundError,
    MissingColumnError,
    QueryError,
    resolve_column,
    resolve_columns,
)
from libbids.query.cursor import TableCursor, iter_rows, version_key
from libbids.query.filter import filter_table, parse_row_filter
from libbids.query.prune import drop_na_columns
from libbids.query.sidecar import JSON_PATH_COLUMN, attach_json_sidecars
from libbids.query.unique import column_values

__all__ = [
    "filter_table",
    "parse_row_filter",
    "drop_na_columns",
    "column_values",
    "attach_json_sidecars",
    "JSON_PATH_COLUMN",
    "TableCursor",
    "iter_rows",
    "version_key",
    "resolve_column",
    "resolve_columns",
    "QueryError",
    "ColumnNotFoundError",
    "MissingColumnError",
]
