"""Configuration and vocabulary extension loading utilities."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import yaml
from pydantic import ValidationError

from libbids.config.models import LibBIDSConfig
from libbids.vocabulary import Vocabulary, VocabularyExtension

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = ".libbids/config.yaml"
EXTENSION_SUFFIXES = (".json", ".yaml", ".yml")


class ConfigLoadError(Exception):
    """Raised when configuration cannot be loaded or validated."""

    pass


class VocabularyLoadError(Exception):
    """Raised when a vocabulary extension document cannot be used."""

    pass


def load_config(config_path: Optional[str] = None) -> LibBIDSConfig:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to configuration file. If None, .libbids/config.yaml
                    in the current directory is used when present, and the
                    defaults otherwise.

    Returns:
        Validated LibBIDSConfig instance

    Raises:
        ConfigLoadError: If an explicit file is not found, YAML is invalid,
                         or validation fails
    """
    if config_path is None:
        if not Path(DEFAULT_CONFIG_PATH).exists():
            return LibBIDSConfig()
        config_path = DEFAULT_CONFIG_PATH

    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigLoadError(f"Failed to read {config_path}: {e}") from e

    if config_data is None:
        return LibBIDSConfig()

    if not isinstance(config_data, dict):
        raise ConfigLoadError(f"Configuration must be a mapping: {config_path}")

    try:
        config = LibBIDSConfig(**config_data)
    except ValidationError as e:
        raise ConfigLoadError(f"Configuration validation failed:\n{e}") from e

    return config


def create_example_config(output_path: str = DEFAULT_CONFIG_PATH) -> None:
    """Create an example configuration file.

    Args:
        output_path: Where to write the example config

    Raises:
        ConfigLoadError: If file cannot be written
    """
    example_config = {
        "custom_dirs": [".libbids/custom"],
        "follow_symlinks": False,
    }

    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(output_file, "w", encoding="utf-8") as f:
            yaml.dump(example_config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigLoadError(f"Failed to write example config to {output_path}: {e}") from e


def load_extension_file(path: Union[str, Path]) -> VocabularyExtension:
    """Load one vocabulary extension document.

    JSON documents are read through the YAML loader, which accepts them as well.

    Args:
        path: Path to the document

    Returns:
        Validated VocabularyExtension

    Raises:
        VocabularyLoadError: If the document cannot be read, parsed or validated
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise VocabularyLoadError(f"Invalid document {path}: {e}") from e
    except OSError as e:
        raise VocabularyLoadError(f"Failed to read {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise VocabularyLoadError(f"Extension document must be a mapping: {path}")

    try:
        return VocabularyExtension(
            entities=data.get("entities") or [],
            suffixes=data.get("suffixes") or [],
            source=str(path),
        )
    except ValidationError as e:
        raise VocabularyLoadError(f"Extension validation failed for {path}:\n{e}") from e


def load_vocabulary_extensions(custom_dirs: Iterable[Union[str, Path]]) -> List[VocabularyExtension]:
    """Load all extension documents from the given directories.

    Missing directories are ignored. Documents that cannot be used are
    skipped with a warning; this never aborts.

    Args:
        custom_dirs: Directories to scan, in order; files sorted by name within each

    Returns:
        Extensions in load order
    """
    extensions = []
    for custom_dir in custom_dirs:
        directory = Path(custom_dir)
        if not directory.is_dir():
            logger.debug(f"Custom vocabulary directory not found: {directory}")
            continue

        for path in sorted(directory.iterdir()):
            if not path.is_file() or path.suffix.lower() not in EXTENSION_SUFFIXES:
                continue
            try:
                extension = load_extension_file(path)
            except VocabularyLoadError as e:
                logger.warning(f"Skipping vocabulary extension: {e}")
                continue
            logger.debug(
                f"Loaded {len(extension.entities)} entities and "
                f"{len(extension.suffixes)} suffixes from {path}"
            )
            extensions.append(extension)

    return extensions


def load_vocabulary(config: Optional[LibBIDSConfig] = None) -> Vocabulary:
    """Build the vocabulary: built-ins extended with the configured documents.

    Args:
        config: Configuration; defaults are used if None

    Returns:
        Vocabulary instance
    """
    config = config or LibBIDSConfig()
    return Vocabulary.default().extend(load_vocabulary_extensions(config.custom_dirs))
