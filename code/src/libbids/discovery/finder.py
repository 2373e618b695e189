"""Recursive discovery of files matching the BIDS grammar."""

import logging
import os
from pathlib import Path
from typing import Iterator, Union

from libbids.discovery.pattern import DiscoveryPattern

logger = logging.getLogger(__name__)


class DiscoveryError(Exception):
    """Raised when the dataset root cannot be walked."""

    pass


def iter_bids_files(
    root: Union[str, Path],
    pattern: DiscoveryPattern,
    follow_symlinks: bool = False,
) -> Iterator[str]:
    """Yield paths under root whose filename satisfies the grammar.

    Directories and filenames are visited in sorted order. Only non-directory
    entries are yielded; symlinked directories are not descended into unless
    follow_symlinks is set.

    Args:
        root: Dataset root directory
        pattern: Discovery grammar
        follow_symlinks: Whether to descend into symlinked directories

    Yields:
        Paths joined onto root as given (not resolved)

    Raises:
        DiscoveryError: If root is not an existing directory
    """
    root = str(root)
    if not os.path.isdir(root):
        raise DiscoveryError(f"Dataset root is not a directory: {root}")

    def _on_error(e: OSError) -> None:
        logger.warning(f"Cannot list {e.filename}: {e.strerror}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=follow_symlinks):
        dirnames.sort()
        for filename in sorted(filenames):
            if pattern.matches(filename):
                yield os.path.join(dirpath, filename)
            else:
                logger.debug(f"Not a BIDS filename: {os.path.join(dirpath, filename)}")
