"""
Use case for finding files by exact name in a directory tree.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from fileshell.exceptions import FileRepositoryError
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.ports.files.tree_visitor_port import TreeVisitor


class FindByNameVisitor(TreeVisitor):
    """Collect the absolute path of every file whose base name equals the target."""

    def __init__(self, name: str):
        self.name = name
        self.matches: list[str] = []

    @override
    def on_file(self, path: str, attrs: os.stat_result) -> None:
        if os.path.basename(path) == self.name:
            self.matches.append(os.path.abspath(path))


class SearchFilesUseCase:
    """Use case for searching a directory tree for files with a given name."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str, name: str) -> list[str]:
        """
        Find every file named exactly ``name`` anywhere under a directory.

        The search does not stop at the first match.

        Args:
            directory: Root of the search
            name: Base name to match (case-sensitive)

        Returns:
            Absolute paths of the matching files, in traversal order

        Raises:
            FileRepositoryError: If the traversal fails
        """
        try:
            self._logger.info(
                f"Searching for files named '{name}' under directory: {directory}"
            )
            visitor = FindByNameVisitor(name)
            self._file_repository.walk(directory, visitor)
            self._logger.info(f"Found {len(visitor.matches)} files named '{name}'")
            return visitor.matches
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error searching files: {e}")
            raise FileRepositoryError(
                f"Failed to search {directory} for {name}: {str(e)}"
            )
