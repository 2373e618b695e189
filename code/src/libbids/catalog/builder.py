"""Catalog building: walk a BIDS dataset into a table."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from libbids.catalog.table import Row, Table
from libbids.config import LibBIDSConfig, load_vocabulary
from libbids.discovery import DiscoveryError, build_discovery_pattern, iter_bids_files
from libbids.parsing import FileRecord, parse_filename
from libbids.vocabulary import Vocabulary

logger = logging.getLogger(__name__)

LEADING_COLUMNS = ["derivatives", "data_type"]
TRAILING_COLUMNS = ["suffix", "extension", "path"]


class CatalogError(Exception):
    """Raised when a catalog cannot be built."""

    pass


def catalog_columns(vocabulary: Vocabulary) -> List[str]:
    """Column schema of a catalog table for the given vocabulary."""
    return LEADING_COLUMNS + vocabulary.display_names + TRAILING_COLUMNS


def record_to_row(record: FileRecord, vocabulary: Vocabulary) -> Row:
    """Lay out a record as a catalog row.

    Entities are placed in canonical order; entities absent from the file
    and entities outside the vocabulary get no value.
    """
    return (
        record.derivatives,
        record.data_type,
        *(record.entities.get(code) for code in vocabulary.codes),
        record.suffix,
        record.extension,
        record.path,
    )


def build_catalog(
    root: Union[str, Path],
    vocabulary: Optional[Vocabulary] = None,
    config: Optional[LibBIDSConfig] = None,
) -> Table:
    """Catalog all BIDS files under a dataset root.

    Rows come in discovery order (sorted directory walk). Use a TableCursor
    with explicit sort columns when a specific order matters.

    Args:
        root: Dataset root directory
        vocabulary: Vocabulary to use. If None, the built-in vocabulary is
                    extended with the documents from config.custom_dirs.
        config: Configuration; defaults are used if None

    Returns:
        Catalog Table

    Raises:
        CatalogError: If root is not an existing directory
    """
    config = config or LibBIDSConfig()
    if vocabulary is None:
        vocabulary = load_vocabulary(config)

    pattern = build_discovery_pattern(vocabulary)
    logger.debug(f"Discovery pattern: {pattern.glob}")

    rows = []
    try:
        for path in iter_bids_files(root, pattern, follow_symlinks=config.follow_symlinks):
            record = parse_filename(path, vocabulary)
            rows.append(record_to_row(record, vocabulary))
    except DiscoveryError as e:
        raise CatalogError(str(e)) from e

    logger.info(f"Cataloged {len(rows)} files under {root}")
    return Table(columns=tuple(catalog_columns(vocabulary)), rows=tuple(rows))
