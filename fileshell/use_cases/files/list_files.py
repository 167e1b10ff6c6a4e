"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from fileshell.entities.file import File
from fileshell.exceptions import FileRepositoryError
from fileshell.ports.files.file_repository_port import FileRepositoryPort


class ListFilesUseCase:
    """Use case for listing the entries of a directory."""

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

    def execute(self, directory: str) -> list[File]:
        """
        List the immediate children of a directory, sorted by name.

        The repository returns entries in host enumeration order.

        Args:
            directory: Path to the directory

        Returns:
            List of File entities ordered by name

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._logger.info(f"Listing entries in directory: {directory}")
            files = sorted(
                self._file_repository.list_files(directory), key=lambda f: f.name
            )
            self._logger.info(f"Found {len(files)} entries")
            return files
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing files: {e}")
            raise FileRepositoryError(f"Failed to list files in {directory}: {str(e)}")
