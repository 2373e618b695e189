"""Vocabulary models: entities, suffixes, extensions."""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from libbids.vocabulary.builtin import (
    ALNUM,
    BIDS_DATATYPES,
    BUILTIN_ENTITIES,
    BUILTIN_EXTENSIONS,
    BUILTIN_SUFFIXES,
)

logger = logging.getLogger(__name__)

# Extglob fragment form, e.g. "*(_foo-+([a-zA-Z0-9]))"
_GLOB_FRAGMENT_RE = re.compile(r"^\*\(_[^-]+-\+\((\[[^\]]+\])\)\)$")
_CHAR_CLASS_RE = re.compile(r"^\[[^\]]+\]$")


class Entity(BaseModel):
    """A filename entity such as ``sub`` or ``task``.

    Attributes:
        code: Key used in filenames (e.g., "sub")
        display_name: Column header used in catalog tables (e.g., "subject")
        pattern: Character class allowed in the entity value (e.g., "[0-9]")
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(..., alias="name", pattern=r"^[a-zA-Z0-9]+$")
    display_name: str = Field(..., min_length=1, pattern=r"^[^,\s]+$")
    pattern: str = ALNUM

    @field_validator("pattern")
    @classmethod
    def normalize_pattern(cls, v: str) -> str:
        """Accept a bare character class or an extglob entity fragment."""
        v = v.strip()
        match = _GLOB_FRAGMENT_RE.match(v)
        if match:
            v = match.group(1)
        if not _CHAR_CLASS_RE.match(v):
            raise ValueError(f"Entity pattern must be a character class like [a-z0-9], got {v!r}")
        # glob negation "[!...]" has the regex spelling "[^...]"
        if v.startswith("[!"):
            v = "[^" + v[2:]
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid entity pattern {v!r}: {e}") from e
        return v

    def glob_fragment(self) -> str:
        """Optional extglob group matching ``_<code>-<value>``."""
        glob_class = "[!" + self.pattern[2:] if self.pattern.startswith("[^") else self.pattern
        return f"*(_{self.code}-+({glob_class}))"

    def regex_fragment(self) -> str:
        """Optional regex group matching ``_<code>-<value>``."""
        return f"(?:_{re.escape(self.code)}-{self.pattern}+)?"


class VocabularyExtension(BaseModel):
    """User-supplied additions to the vocabulary (one extension document).

    Attributes:
        entities: Entities appended after the built-in ones
        suffixes: Suffixes appended after the built-in ones
        source: Where the document was loaded from, if anywhere
    """

    entities: List[Entity] = Field(default_factory=list)
    suffixes: List[str] = Field(default_factory=list)
    source: Optional[str] = None

    @field_validator("suffixes")
    @classmethod
    def suffixes_not_empty(cls, v: List[str]) -> List[str]:
        """Validate that suffixes are non-empty tokens without separators."""
        for suffix in v:
            if not suffix or any(c in suffix for c in "_.-,/"):
                raise ValueError(f"Invalid suffix: {suffix!r}")
        return v


class Vocabulary(BaseModel):
    """Immutable vocabulary used to build the discovery grammar and catalog columns.

    Attributes:
        entities: Entities in canonical order (built-ins first, then extensions)
        suffixes: Known suffixes
        extensions: Known extensions, including the leading dot
        datatypes: Datatype folder names recognized in paths
    """

    model_config = ConfigDict(frozen=True)

    entities: Tuple[Entity, ...]
    suffixes: Tuple[str, ...]
    extensions: Tuple[str, ...]
    datatypes: Tuple[str, ...]

    @classmethod
    def default(cls) -> "Vocabulary":
        """Build the vocabulary holding only the built-in BIDS entries."""
        return cls(
            entities=tuple(
                Entity(code=code, display_name=display_name, pattern=pattern)
                for code, display_name, pattern in BUILTIN_ENTITIES
            ),
            suffixes=tuple(BUILTIN_SUFFIXES),
            extensions=tuple(BUILTIN_EXTENSIONS),
            datatypes=tuple(BIDS_DATATYPES),
        )

    def extend(self, extensions: Iterable[VocabularyExtension]) -> "Vocabulary":
        """Return a new vocabulary with the given extensions appended.

        Entries are appended in order. Nothing is de-duplicated or overridden:
        an extension entity reusing an existing code coexists with it, and the
        earlier entity keeps its earlier position.

        Args:
            extensions: Extension documents in load order

        Returns:
            New Vocabulary instance
        """
        entities = list(self.entities)
        suffixes = list(self.suffixes)
        known_codes = set(self.codes)
        for extension in extensions:
            for entity in extension.entities:
                if entity.code in known_codes:
                    logger.warning(
                        f"Entity code '{entity.code}' from {extension.source or 'extension'} "
                        f"duplicates an existing entity; both are kept"
                    )
                entities.append(entity)
                known_codes.add(entity.code)
            suffixes.extend(extension.suffixes)

        return self.model_copy(update={"entities": tuple(entities), "suffixes": tuple(suffixes)})

    @property
    def codes(self) -> List[str]:
        """Entity codes in canonical order."""
        return [e.code for e in self.entities]

    @property
    def display_names(self) -> List[str]:
        """Entity display names in canonical order."""
        return [e.display_name for e in self.entities]
