"""Unit tests for JSON sidecar association."""

import logging

import pytest

from libbids.catalog import Table
from libbids.query import MissingColumnError, attach_json_sidecars


@pytest.mark.unit
@pytest.mark.ai_generated
class TestAttachJsonSidecars:
    """Tests for attach_json_sidecars function."""

    def test_sidecar_absorbed(self) -> None:
        """Test that a matching JSON row becomes the json_path of its data row."""
        table = Table.from_csv(
            "sub,data_type,suffix,extension,path\n"
            "sub-01,func,bold,.nii.gz,/d/sub-01_task-rest_bold.nii.gz\n"
            "sub-01,func,bold,.json,/d/sub-01_task-rest_bold.json\n"
        )
        result = attach_json_sidecars(table)
        assert result.columns[-1] == "json_path"
        assert result.rows == (
            (
                "sub-01",
                "func",
                "bold",
                ".nii.gz",
                "/d/sub-01_task-rest_bold.nii.gz",
                "/d/sub-01_task-rest_bold.json",
            ),
        )

    def test_unmatched_rows(self) -> None:
        """Test JSON rows without partner and data rows without sidecar."""
        table = Table.from_csv(
            "sub,suffix,extension,path\n"
            "sub-01,bold,nii.gz,/d/a.nii.gz\n"
            "sub-02,bold,json,/d/b.json\n"
            "sub-01,events,tsv,/d/c.tsv\n"
        )
        result = attach_json_sidecars(table)
        assert [row[-1] for row in result.rows] == [None, "/d/b.json", None]

    def test_sidecar_shared_by_several_files(self) -> None:
        """Test that one JSON row is attached to every data row of its group."""
        table = Table.from_csv(
            "sub,suffix,extension,path\n"
            "sub-01,dwi,json,/d/dwi.json\n"
            "sub-01,dwi,nii.gz,/d/dwi.nii.gz\n"
            "sub-01,dwi,bval,/d/dwi.bval\n"
        )
        result = attach_json_sidecars(table)
        assert [(row[2], row[-1]) for row in result.rows] == [
            ("nii.gz", "/d/dwi.json"),
            ("bval", "/d/dwi.json"),
        ]

    def test_last_json_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that the last of several JSON rows in a group is used."""
        table = Table.from_csv(
            "sub,extension,path\n"
            "sub-01,json,/d/first.json\n"
            "sub-01,JSON,/d/second.json\n"
            "sub-01,nii,/d/x.nii\n"
        )
        with caplog.at_level(logging.WARNING):
            result = attach_json_sidecars(table)
        assert result.rows == (("sub-01", "nii", "/d/x.nii", "/d/second.json"),)
        assert "keeping the last one" in caplog.text

    def test_case_insensitive_header(self) -> None:
        """Test that required columns are found regardless of case."""
        table = Table.from_csv("sub,Extension,PATH\nsub-01,json,/d/a.json\n")
        assert attach_json_sidecars(table).rows == (("sub-01", "json", "/d/a.json", "/d/a.json"),)

    def test_missing_required_column(self) -> None:
        """Test error when the path column is absent."""
        with pytest.raises(MissingColumnError, match="extension, path"):
            attach_json_sidecars(Table.from_csv("sub,extension\nsub-01,json\n"))
