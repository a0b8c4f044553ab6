"""Shared fixtures for the readdirtree test suite."""

from pathlib import Path

import pytest


def create_test_bed(base_dir: Path) -> Path:
    """Create the standard test bed below base_dir.

    Structure:
    bed/
    ├── root_dir1/
    │   ├── root_dir1_file1.ext1
    │   ├── root_dir1_file2.ext2
    │   ├── root_dir1_file3.ext3
    │   ├── root_dir1_subdir1/
    │   │   └── root1_dir1_subdir1_file1.ext1
    │   └── root_dir1_subdir2/
    │       └── .gitignore
    ├── root_dir2/
    │   ├── root_dir2_file1.ext1
    │   ├── root_dir2_file2.ext2
    │   ├── root_dir2_subdir1/
    │   │   └── .gitignore
    │   └── root_dir2_subdir2/
    │       └── .gitignore
    ├── root_file1.ext1
    ├── root_file2.ext2
    └── root_file3.ext3

    6 directories, 12 files
    """
    bed = base_dir / "bed"
    files = [
        "root_dir1/root_dir1_file1.ext1",
        "root_dir1/root_dir1_file2.ext2",
        "root_dir1/root_dir1_file3.ext3",
        "root_dir1/root_dir1_subdir1/root1_dir1_subdir1_file1.ext1",
        "root_dir1/root_dir1_subdir2/.gitignore",
        "root_dir2/root_dir2_file1.ext1",
        "root_dir2/root_dir2_file2.ext2",
        "root_dir2/root_dir2_subdir1/.gitignore",
        "root_dir2/root_dir2_subdir2/.gitignore",
        "root_file1.ext1",
        "root_file2.ext2",
        "root_file3.ext3",
    ]
    for relative in files:
        path = bed / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(relative)
    return bed


@pytest.fixture
def bed(tmp_path):
    """Path of a freshly created test bed."""
    return create_test_bed(tmp_path)


@pytest.fixture
def bed_factory():
    """create_test_bed, for tests that need the bed somewhere specific."""
    return create_test_bed
