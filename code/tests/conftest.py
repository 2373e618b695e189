"""Shared fixtures: a small BIDS dataset on disk."""

from pathlib import Path

import pytest

DATASET_FILES = [
    "dataset_description.json",
    "participants.tsv",
    "task-rest_bold.json",
    "sub-01/anat/sub-01_T1w.nii.gz",
    "sub-01/anat/sub-01_T1w.json",
    "sub-01/func/sub-01_task-rest_run-1_bold.nii.gz",
    "sub-01/func/sub-01_task-rest_run-1_events.tsv",
    "sub-02/func/sub-02_task-rest_run-1_bold.nii.gz",
    # entities out of canonical order are not cataloged
    "sub-02/func/task-rest_sub-02_bold.nii.gz",
    "derivatives/fmriprep/sub-01/anat/sub-01_space-MNI_desc-brain_mask.nii.gz",
]


@pytest.fixture
def bids_dataset(tmp_path: Path) -> Path:
    """Create an empty-file BIDS dataset and return its root.

    Args:
        tmp_path: pytest temporary directory fixture

    Returns:
        Path to the dataset root
    """
    root = tmp_path / "ds000001"
    for relpath in DATASET_FILES:
        path = root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")
    return root
