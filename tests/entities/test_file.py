"""
Tests for the File entity.
"""

import os
from datetime import datetime
from unittest.mock import patch

import pytest

from fileshell.entities.file import File
from fileshell.exceptions import FileRepositoryError


class TestFile:
    """Test cases for the File entity."""

    def test_file_initialization_success(self, temp_directory: str):
        """Test successful File initialization with a valid file."""
        test_file = os.path.join(temp_directory, "test1.txt")
        file_entity = File(test_file)

        assert file_entity.path == os.path.abspath(test_file)
        assert file_entity.name == "test1.txt"
        assert file_entity.size == len("This is a test file.")
        assert file_entity.is_dir is False

    def test_file_initialization_with_directory(self, temp_directory: str):
        """Directories are valid entries."""
        file_entity = File(os.path.join(temp_directory, "subdir"))

        assert file_entity.is_dir is True
        assert file_entity.name == "subdir"

    def test_file_initialization_with_nonexistent_file(self):
        """Test File initialization with a non-existent file."""
        with pytest.raises(FileRepositoryError, match="File does not exist"):
            File("/nonexistent/path/file.txt")

    def test_file_initialization_with_empty_path(self):
        """Test File initialization with an empty path."""
        with pytest.raises(FileRepositoryError, match="Path must be a non-empty string"):
            File("")

    def test_dangling_symlink_uses_link_attributes(self, temp_directory: str):
        """A broken symlink is still a readable entry."""
        link = os.path.join(temp_directory, "broken")
        os.symlink(os.path.join(temp_directory, "missing"), link)

        file_entity = File(link)

        assert file_entity.name == "broken"
        assert file_entity.is_dir is False

    def test_stat_error(self, temp_directory: str):
        """Test File entity when reading attributes raises an OSError."""
        test_file = os.path.join(temp_directory, "test1.txt")

        with patch("os.stat", side_effect=PermissionError("Permission denied")):
            with pytest.raises(FileRepositoryError, match="Cannot read attributes"):
                File(test_file)

    def test_detail_line_columns(self, temp_directory: str):
        """The detail line is name/30, size/15, then the timestamp."""
        test_file = os.path.join(temp_directory, "test1.txt")
        mtime = datetime(2024, 3, 5, 7, 8, 9).timestamp()
        os.utime(test_file, (mtime, mtime))

        line = File(test_file).detail_line()

        assert line[:30] == "test1.txt".ljust(30)
        assert line[30:45] == "20".ljust(15)
        assert line[45:] == "2024-03-05 07:08:09"

    def test_repr(self, temp_directory: str):
        """Test detailed string representation of File."""
        test_file = os.path.join(temp_directory, "test1.txt")
        file_entity = File(test_file)

        assert repr(file_entity) == f"File(path='{os.path.abspath(test_file)}')"
