"""
Use case for reading the attributes of one entry.
"""

import logging
from typing import Optional

from fileshell.entities.file import File
from fileshell.ports.files.file_repository_port import FileRepositoryPort


class FileInfoUseCase:
    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> File:
        """Return a fresh File entity for path. Raises FileRepositoryError if unreadable."""
        self._logger.info(f"Reading file info: {path}")
        return self._file_repository.get_file(path)
