"""Discovery grammar composed from the vocabulary."""

import re
from dataclasses import dataclass
from re import Pattern
from typing import Optional

from libbids.vocabulary import Vocabulary


@dataclass(frozen=True)
class DiscoveryPattern:
    """Filename grammar for BIDS files.

    Attributes:
        glob: The grammar as a bash extglob expression (directory wildcard,
              optional entity groups, suffix group, extension group)
        regex: Anchored regex for the filename part of the grammar, applied
               to the filename with a leading underscore
    """

    glob: str
    regex: Pattern[str]

    def matches(self, filename: str) -> bool:
        """Check whether a filename (no directories) satisfies the grammar."""
        return self.regex.fullmatch("_" + filename) is not None


def build_discovery_pattern(vocabulary: Optional[Vocabulary] = None) -> DiscoveryPattern:
    """Build the discovery grammar.

    Entities are independently optional but must appear in canonical order;
    the suffix and the extension are mandatory. Since the extension list
    holds an empty entry, files without extension match as well.

    Args:
        vocabulary: Vocabulary to compose; built-in vocabulary if None

    Returns:
        DiscoveryPattern
    """
    vocabulary = vocabulary or Vocabulary.default()

    glob = "*"
    glob += "".join(entity.glob_fragment() for entity in vocabulary.entities)
    glob += "_@(" + "|".join(vocabulary.suffixes) + ")"
    glob += "@(" + "|".join(vocabulary.extensions) + ")"

    suffixes = "|".join(re.escape(s) for s in vocabulary.suffixes)
    extensions = "|".join(re.escape(e) for e in vocabulary.extensions)
    regex = (
        "^"
        + "".join(entity.regex_fragment() for entity in vocabulary.entities)
        + f"_(?:{suffixes})(?:{extensions})\\Z"
    )

    return DiscoveryPattern(glob=glob, regex=re.compile(regex))
