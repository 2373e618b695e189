"""Catalog tables of BIDS datasets."""

from libbids.catalog.builder import (
    CatalogError,
    build_catalog,
    catalog_columns,
    record_to_row,
)
from libbids.catalog.table import (
    NA,
    Table,
    TableFormatError,
    read_table,
    write_table,
)

__all__ = [
    "build_catalog",
    "catalog_columns",
    "record_to_row",
    "CatalogError",
    "NA",
    "Table",
    "TableFormatError",
    "read_table",
    "write_table",
]
