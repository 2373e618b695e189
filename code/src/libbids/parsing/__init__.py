"""Filename parsing."""

from libbids.parsing.filename import FileRecord, parse_filename

__all__ = ["FileRecord", "parse_filename"]
