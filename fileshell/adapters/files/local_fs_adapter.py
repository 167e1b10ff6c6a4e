"""
Local filesystem adapter implementation for file operations.
"""

import errno
import logging
import os
import shutil
from typing import Optional

from typing_extensions import override

from fileshell.adapters.files.tree_walker import TreeWalker
from fileshell.entities.file import File
from fileshell.exceptions import FileRepositoryError
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.ports.files.tree_visitor_port import TreeVisitor


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local filesystem implementation of the file repository port."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        tree_walker: Optional[TreeWalker] = None,
    ):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            tree_walker: Walker used for recursive traversals
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._tree_walker = tree_walker or TreeWalker(self._logger)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def is_dir(self, path: str, follow_symlinks: bool = True) -> bool:
        if not follow_symlinks and os.path.islink(path):
            return False
        return os.path.isdir(path)

    @override
    def get_file(self, path: str) -> File:
        return File(path)

    @override
    def list_files(self, directory: str) -> list[File]:
        """
        List the immediate children of a directory.

        Args:
            directory: Path to the directory

        Returns:
            List of File entities in host enumeration order

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._validate_directory(directory)

            with os.scandir(directory) as it:
                paths = [entry.path for entry in it]
            return [File(path) for path in paths]

        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to list files in {directory}: {str(e)}")

    @override
    def mkdir(self, path: str) -> File:
        try:
            os.mkdir(path)
        except FileExistsError:
            raise FileRepositoryError(f"Already exists: {path}")
        except FileNotFoundError:
            raise FileRepositoryError(
                f"Parent directory does not exist: {os.path.dirname(path)}"
            )
        except OSError as e:
            raise FileRepositoryError(f"Failed to create directory {path}: {str(e)}")
        self._logger.debug(f"Created directory {path}")
        return File(path)

    @override
    def delete_file(self, path: str) -> None:
        try:
            os.unlink(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to delete {path}: {str(e)}")

    @override
    def delete_directory(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to delete directory {path}: {str(e)}")

    @override
    def move(self, source: str, destination: str) -> None:
        try:
            try:
                os.replace(source, destination)
            except OSError as e:
                if e.errno != errno.EXDEV:
                    raise
                # Cross-device: copy then delete, not atomic.
                self._logger.info(f"Cross-device move {source} -> {destination}")
                shutil.move(source, destination)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to move {source} to {destination}: {str(e)}"
            )

    @override
    def copy_file(self, source: str, destination: str) -> None:
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )

    @override
    def walk(self, root: str, visitor: TreeVisitor) -> None:
        self._tree_walker.walk(root, visitor)
