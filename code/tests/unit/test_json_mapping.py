"""Unit tests for JSON sidecar flattening."""

import json
from pathlib import Path

import pytest

from libbids.metadata import JSONMappingError, load_json_mapping, tag_value


@pytest.mark.unit
@pytest.mark.ai_generated
class TestTagValue:
    """Tests for tag_value function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("rest", "string:rest"),
            (2, "number:2"),
            (0.5, "number:0.5"),
            (True, "boolean:true"),
            (None, "null:null"),
            ([0.1, "b", None], "array:0.1,b,"),
            ({"a": [1, 2]}, 'object:{"a":[1,2]}'),
        ],
    )
    def test_tags(self, value: object, expected: str) -> None:
        """Test the type tag and rendering of each JSON type."""
        assert tag_value(value) == expected


@pytest.mark.unit
@pytest.mark.ai_generated
class TestLoadJsonMapping:
    """Tests for load_json_mapping function."""

    def test_sidecar(self, tmp_path: Path) -> None:
        """Test flattening a typical BOLD sidecar."""
        sidecar = tmp_path / "sub-01_task-rest_bold.json"
        sidecar.write_text(
            json.dumps({"RepetitionTime": 2, "TaskName": "rest", "SliceTiming": [0, 1]})
        )
        assert load_json_mapping(sidecar) == {
            "RepetitionTime": "number:2",
            "TaskName": "string:rest",
            "SliceTiming": "array:0,1",
        }

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test error for malformed JSON."""
        sidecar = tmp_path / "bad.json"
        sidecar.write_text("{")
        with pytest.raises(JSONMappingError, match="Invalid JSON"):
            load_json_mapping(sidecar)

    def test_not_an_object(self, tmp_path: Path) -> None:
        """Test error for a top-level array."""
        sidecar = tmp_path / "list.json"
        sidecar.write_text("[1, 2]")
        with pytest.raises(JSONMappingError, match="Expected a JSON object"):
            load_json_mapping(sidecar)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test error for a missing file."""
        with pytest.raises(JSONMappingError, match="Failed to read"):
            load_json_mapping(tmp_path / "missing.json")
