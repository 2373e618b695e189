"""libbids: Catalog and query BIDS datasets as comma-separated tables.

This package provides tools to:
- Match BIDS filenames against an extensible entity/suffix vocabulary
- Parse matched paths into structured file records
- Build a catalog table of a dataset and filter, prune, join and iterate it

Example usage:

    from libbids.catalog import build_catalog
    from libbids.query import attach_json_sidecars, filter_table

    table = build_catalog("/path/to/bids")
    bold = filter_table(table, columns=["subject", "path"], row_filters=[("suffix", "^bold$")])
"""

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = ["__version__", "__license__"]
