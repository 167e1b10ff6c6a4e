"""
Use cases for moving and copying entries.
"""

import logging
from typing import Optional

from fileshell.ports.files.file_repository_port import FileRepositoryPort


class MovePathUseCase:
    """Move or rename an entry, replacing an existing destination."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> None:
        self._logger.info(f"Moving {source} -> {destination}")
        self._file_repository.move(source, destination)


class CopyFileUseCase:
    """Copy a regular file's content, replacing an existing destination."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> None:
        self._logger.info(f"Copying {source} -> {destination}")
        self._file_repository.copy_file(source, destination)
