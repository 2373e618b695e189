"""Column selectors and query errors."""

from typing import List, Sequence, Union

from libbids.catalog.table import Table

ColumnSelector = Union[str, int]


class QueryError(Exception):
    """Base class for errors raised by query operations."""

    pass


class ColumnNotFoundError(QueryError):
    """Raised when a column selector does not resolve to a column."""

    pass


class MissingColumnError(QueryError):
    """Raised when a column required by an operation is absent."""

    pass


def resolve_column(table: Table, selector: ColumnSelector) -> int:
    """Resolve a selector to a 0-based column position.

    A selector is first matched against the header names; failing that, a
    purely numeric selector is taken as a 1-based column index.

    Raises:
        ColumnNotFoundError: If the selector matches no column
    """
    if isinstance(selector, str) and selector in table.columns:
        return table.columns.index(selector)

    text = str(selector)
    if text.isascii() and text.isdigit():
        index = int(text)
        if 1 <= index <= len(table.columns):
            return index - 1
        raise ColumnNotFoundError(
            f"Column index {index} out of range (table has {len(table.columns)} columns)"
        )

    raise ColumnNotFoundError(f"Column '{selector}' not found in header")


def resolve_columns(table: Table, selectors: Sequence[ColumnSelector]) -> List[int]:
    """Resolve several selectors, keeping order and duplicates."""
    return [resolve_column(table, selector) for selector in selectors]
