"""Parsing of BIDS paths into file records."""

import logging
import os
import re
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from libbids.vocabulary import Vocabulary

logger = logging.getLogger(__name__)

_ENTITY_TOKEN_RE = re.compile(r"^([^-]+)-(.*)$")
_DERIVATIVES_RE = re.compile(r"(?:^|/)derivatives/([^/]+)/")
_SEPARATORS_RE = re.compile(r"/+")


class FileRecord(BaseModel):
    """Structured view of one BIDS file.

    Attributes:
        path: Path with repeated separators collapsed
        extension: Everything after the first dot of the filename (e.g., "nii.gz")
        data_type: First datatype folder among the directory components, if any
        derivatives: Pipeline name following a derivatives/ segment, if any
        entities: Entity code to full "code-value" token, in filename order
        suffix: Last underscore-delimited token of the filename stem
    """

    model_config = ConfigDict(frozen=True)

    path: str
    extension: str
    data_type: Optional[str] = None
    derivatives: Optional[str] = None
    entities: Dict[str, str] = Field(default_factory=dict)
    suffix: str

    def filename(self, vocabulary: Optional[Vocabulary] = None) -> str:
        """Rebuild the filename from the entity tokens in canonical order.

        Entities unknown to the vocabulary are appended in filename order.
        """
        vocabulary = vocabulary or Vocabulary.default()
        tokens = []
        for code in dict.fromkeys(vocabulary.codes):
            if code in self.entities:
                tokens.append(self.entities[code])
        tokens.extend(token for code, token in self.entities.items() if code not in vocabulary.codes)
        tokens.append(self.suffix)
        name = "_".join(tokens)
        return f"{name}.{self.extension}" if self.extension else name


def parse_filename(path: str, vocabulary: Optional[Vocabulary] = None) -> FileRecord:
    """Decompose a BIDS path into a FileRecord.

    The path is expected to satisfy the discovery grammar, but nothing is
    validated here: tokens without a dash are ignored and the suffix is
    taken verbatim.

    Args:
        path: Path to a BIDS file
        vocabulary: Vocabulary providing the datatype folder names; built-in if None

    Returns:
        FileRecord for the path

    Example:
        >>> parse_filename("ds/sub-01/func/sub-01_task-rest_bold.nii.gz").entities
        {'sub': 'sub-01', 'task': 'task-rest'}
    """
    vocabulary = vocabulary or Vocabulary.default()
    path = _SEPARATORS_RE.sub("/", str(path))

    directory, filename = os.path.split(path)
    stem, _, extension = filename.partition(".")

    parts = stem.split("_")
    entities: Dict[str, str] = {}
    for part in parts[:-1]:
        match = _ENTITY_TOKEN_RE.match(part)
        if match:
            key, value = match.groups()
            entities[key] = f"{key}-{value}"
        else:
            logger.debug(f"Ignoring token '{part}' in {filename}")

    data_type = None
    for component in directory.split("/"):
        if component in vocabulary.datatypes:
            data_type = component
            break

    derivatives_match = _DERIVATIVES_RE.search(path)
    derivatives = derivatives_match.group(1) if derivatives_match else None

    return FileRecord(
        path=path,
        extension=extension,
        data_type=data_type,
        derivatives=derivatives,
        entities=entities,
        suffix=parts[-1],
    )
