"""
Use case for deleting a file or a whole directory tree.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from fileshell.exceptions import FileRepositoryError
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.ports.files.tree_visitor_port import TreeVisitor


class DeleteTreeVisitor(TreeVisitor):
    """Delete files as they are visited and each directory once it is empty."""

    def __init__(self, file_repository: FileRepositoryPort):
        self._file_repository = file_repository
        self.deleted = 0

    @override
    def on_file(self, path: str, attrs: os.stat_result) -> None:
        self._file_repository.delete_file(path)
        self.deleted += 1

    @override
    def on_directory_finished(self, path: str) -> None:
        self._file_repository.delete_directory(path)
        self.deleted += 1


class DeletePathUseCase:
    """Use case for deleting a filesystem entry, recursing into directories."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> int:
        """
        Delete path. Directories are removed leaves first.

        A failure part way through stops the deletion and leaves whatever was
        not yet removed in place.

        Args:
            path: Entry to delete

        Returns:
            Number of filesystem entries removed

        Raises:
            FileRepositoryError: On the first failed deletion
        """
        try:
            self._logger.info(f"Deleting: {path}")
            if not self._file_repository.is_dir(path, follow_symlinks=False):
                self._file_repository.delete_file(path)
                return 1
            visitor = DeleteTreeVisitor(self._file_repository)
            self._file_repository.walk(path, visitor)
            self._logger.info(f"Deleted {visitor.deleted} entries under {path}")
            return visitor.deleted
        except FileRepositoryError as e:
            self._logger.error(f"Error deleting {path}: {e}")
            raise
