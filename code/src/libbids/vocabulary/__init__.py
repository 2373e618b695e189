"""Entity, suffix and extension vocabulary."""

from libbids.vocabulary.builtin import (
    BIDS_DATATYPES,
    BUILTIN_ENTITIES,
    BUILTIN_EXTENSIONS,
    BUILTIN_SUFFIXES,
)
from libbids.vocabulary.models import Entity, Vocabulary, VocabularyExtension

__all__ = [
    "Entity",
    "Vocabulary",
    "VocabularyExtension",
    "BUILTIN_ENTITIES",
    "BUILTIN_SUFFIXES",
    "BUILTIN_EXTENSIONS",
    "BIDS_DATATYPES",
]
