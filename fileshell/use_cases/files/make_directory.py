"""
Use case for creating a directory.
"""

import logging
from typing import Optional

from fileshell.entities.file import File
from fileshell.ports.files.file_repository_port import FileRepositoryPort


class MakeDirectoryUseCase:
    """Create a single directory; missing parents are an error."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> File:
        self._logger.info(f"Creating directory: {path}")
        return self._file_repository.mkdir(path)
