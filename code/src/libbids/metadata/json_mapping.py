"""Flattening of JSON sidecars into type-tagged strings."""

import json
from pathlib import Path
from typing import Any, Dict, Union


class JSONMappingError(Exception):
    """Raised when a JSON document cannot be flattened."""

    pass


def _type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _to_string(value: Any) -> str:
    """Render a scalar the way jq's tostring does."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def tag_value(value: Any) -> str:
    """Render a JSON value as "<type>:<value>".

    Arrays are joined with commas (null items become empty strings),
    objects are rendered as compact JSON.

    Example:
        >>> tag_value([1, "a"])
        'array:1,a'
    """
    type_name = _type_name(value)
    if type_name == "array":
        items = ("" if item is None else _to_string(item) for item in value)
        return "array:" + ",".join(items)
    return f"{type_name}:{_to_string(value)}"


def json_to_mapping(document: Dict[str, Any]) -> Dict[str, str]:
    """Flatten the top-level keys of a JSON object into tagged strings."""
    return {str(key): tag_value(value) for key, value in document.items()}


def load_json_mapping(json_path: Union[str, Path]) -> Dict[str, str]:
    """Load a JSON file and flatten its top-level keys.

    Args:
        json_path: Path to a JSON file holding an object

    Returns:
        Mapping from key to "<type>:<value>"

    Raises:
        JSONMappingError: If the file cannot be read or is not a JSON object
    """
    try:
        with open(json_path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise JSONMappingError(f"Invalid JSON in {json_path}: {e}") from e
    except OSError as e:
        raise JSONMappingError(f"Failed to read {json_path}: {e}") from e

    if not isinstance(document, dict):
        raise JSONMappingError(f"Expected a JSON object in {json_path}")

    return json_to_mapping(document)
