"""Sidecar metadata helpers."""

from libbids.metadata.json_mapping import (
    JSONMappingError,
    json_to_mapping,
    load_json_mapping,
    tag_value,
)

__all__ = ["load_json_mapping", "json_to_mapping", "tag_value", "JSONMappingError"]
