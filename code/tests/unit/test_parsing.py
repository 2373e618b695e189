"""Unit tests for filename parsing."""

import pytest

from libbids.discovery import build_discovery_pattern
from libbids.parsing import FileRecord, parse_filename
from libbids.vocabulary import Vocabulary


@pytest.mark.unit
@pytest.mark.ai_generated
class TestParseFilename:
    """Tests for parse_filename function."""

    def test_basic_fields(self) -> None:
        """Test parsing a raw functional file."""
        record = parse_filename("/data/ds//sub-01/func/sub-01_task-rest_run-1_bold.nii.gz")
        assert record.path == "/data/ds/sub-01/func/sub-01_task-rest_run-1_bold.nii.gz"
        assert record.extension == "nii.gz"
        assert record.suffix == "bold"
        assert record.data_type == "func"
        assert record.derivatives is None
        assert record.entities == {"sub": "sub-01", "task": "task-rest", "run": "run-1"}

    def test_entities_keep_full_token(self) -> None:
        """Test that entity values keep their key prefix."""
        record = parse_filename("sub-control01_ses-pre_T1w.nii")
        assert record.entities["sub"] == "sub-control01"
        assert record.entities["ses"] == "ses-pre"

    def test_derivatives_pipeline(self) -> None:
        """Test extraction of the derivatives pipeline name."""
        record = parse_filename(
            "ds/derivatives/fmriprep/sub-01/anat/sub-01_space-MNI_desc-brain_mask.nii.gz"
        )
        assert record.derivatives == "fmriprep"
        assert record.data_type == "anat"
        assert record.suffix == "mask"

    def test_first_datatype_wins(self) -> None:
        """Test that the first datatype folder in directory order is used."""
        record = parse_filename("ds/derivatives/x/func/sub-01/anat/sub-01_T1w.nii.gz")
        assert record.data_type == "func"

    def test_datatype_exact_component_match(self) -> None:
        """Test that datatype names inside longer components are ignored."""
        record = parse_filename("ds/funcdata/sub-01/sub-01_bold.nii.gz")
        assert record.data_type is None

    def test_datatype_ignores_filename(self) -> None:
        """Test that only directories are searched for a datatype."""
        record = parse_filename("sub-01_dwi.nii.gz")
        assert record.data_type is None

    def test_tokens_without_dash_ignored(self) -> None:
        """Test that malformed tokens are skipped without error."""
        record = parse_filename("sub-01_garbage_bold.json")
        assert record.entities == {"sub": "sub-01"}
        assert record.extension == "json"

    def test_value_with_dash(self) -> None:
        """Test that only the first dash separates key and value."""
        record = parse_filename("sub-01_acq-a-b_bold.json")
        assert record.entities["acq"] == "acq-a-b"

    def test_no_extension(self) -> None:
        """Test a filename without a dot."""
        record = parse_filename("meg/sub-01_meg")
        assert record.extension == ""
        assert record.suffix == "meg"
        assert record.data_type == "meg"

    def test_empty_suffix(self) -> None:
        """Test that an empty trailing token gives an empty suffix."""
        record = parse_filename("sub-01_.json")
        assert record.suffix == ""

    def test_custom_datatypes(self) -> None:
        """Test that datatype folders come from the vocabulary."""
        vocabulary = Vocabulary.default().model_copy(update={"datatypes": ("xyz",)})
        record = parse_filename("ds/xyz/func/sub-01_bold.nii", vocabulary)
        assert record.data_type == "xyz"


@pytest.mark.unit
@pytest.mark.ai_generated
class TestFileRecordFilename:
    """Tests for rebuilding filenames from records."""

    @pytest.mark.parametrize(
        "filename",
        [
            "sub-01_ses-02_task-rest_acq-fast_run-3_echo-1_bold.nii.gz",
            "sub-01_T1w.json",
            "task-rest_bold.json",
            "sub-01_space-T1w_desc-aseg_dseg.tsv",
        ],
    )
    def test_roundtrip(self, filename: str) -> None:
        """Test that a grammar-valid filename is rebuilt unchanged."""
        assert build_discovery_pattern().matches(filename)
        assert parse_filename(f"ds/{filename}").filename() == filename

    def test_unknown_entities_appended(self) -> None:
        """Test that entities outside the vocabulary come after the known ones."""
        record = FileRecord(
            path="x",
            extension="tsv",
            entities={"foo": "foo-1", "sub": "sub-01"},
            suffix="events",
        )
        assert record.filename() == "sub-01_foo-1_events.tsv"
