"""
Tests for the DeletePathUseCase and DeleteTreeVisitor.
"""

import os
from unittest.mock import MagicMock

import pytest

from fileshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fileshell.exceptions import FileRepositoryError
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.use_cases.files.delete_path import DeletePathUseCase, DeleteTreeVisitor


class TestDeleteTreeVisitor:
    """Test cases for the DeleteTreeVisitor."""

    def test_callbacks_delete_through_repository(self):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        visitor = DeleteTreeVisitor(mock_repository)

        visitor.on_file("/x/a", os.stat_result((0,) * 10))
        visitor.on_directory_finished("/x")

        mock_repository.delete_file.assert_called_once_with("/x/a")
        mock_repository.delete_directory.assert_called_once_with("/x")
        assert visitor.deleted == 2


class TestDeletePathUseCase:
    """Test cases for the DeletePathUseCase."""

    def test_delete_single_file(self, temp_directory, mock_logger):
        use_case = DeletePathUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)
        path = os.path.join(temp_directory, "test1.txt")

        assert use_case.execute(path) == 1
        assert not os.path.exists(path)

    def test_delete_tree_removes_every_entry(self, temp_directory, mock_logger):
        """2 files + 1 subdirectory + the directory itself = 4 entries."""
        use_case = DeletePathUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)
        subdir = os.path.join(temp_directory, "subdir")

        assert use_case.execute(subdir) == 4
        assert not os.path.exists(subdir)
        assert sorted(os.listdir(temp_directory)) == ["test1.txt", "test2.py"]

    def test_delete_symlink_to_directory_keeps_target(self, temp_directory, mock_logger):
        use_case = DeletePathUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)
        target = os.path.join(temp_directory, "subdir")
        link = os.path.join(temp_directory, "link")
        os.symlink(target, link)

        use_case.execute(link)

        assert not os.path.lexists(link)
        assert os.path.isfile(os.path.join(target, "test3.md"))

    def test_first_failure_aborts(self, mock_logger):
        """A failed deletion stops the walk and is reported."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.is_dir.return_value = True
        mock_repository.walk.side_effect = FileRepositoryError("Failed to delete /x/a")

        use_case = DeletePathUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="Failed to delete /x/a"):
            use_case.execute("/x")
        mock_repository.is_dir.assert_called_once_with("/x", follow_symlinks=False)
        mock_logger.error.assert_called_once()
