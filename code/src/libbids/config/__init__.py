"""Configuration module for libbids."""

from libbids.config.loader import (
    ConfigLoadError,
    VocabularyLoadError,
    create_example_config,
    load_config,
    load_extension_file,
    load_vocabulary,
    load_vocabulary_extensions,
)
from libbids.config.models import LibBIDSConfig

__all__ = [
    "LibBIDSConfig",
    "load_config",
    "create_example_config",
    "load_extension_file",
    "load_vocabulary_extensions",
    "load_vocabulary",
    "ConfigLoadError",
    "VocabularyLoadError",
]
