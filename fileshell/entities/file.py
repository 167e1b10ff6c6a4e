"""
File domain entity.
"""

import os
from datetime import datetime

from fileshell.exceptions import FileRepositoryError

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class File:
    """
    Filesystem entry entity (file or directory) with attributes read on creation.
    """

    def __init__(self, path: str):
        """
        Initialize the File entity.

        Args:
            path: Path to the entry

        Raises:
            FileRepositoryError: If path is empty or the entry doesn't exist
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        if not os.path.lexists(path):
            raise FileRepositoryError(f"File does not exist: {path}")

        self.path = os.path.abspath(path)
        self.name = self._find_file_name()
        stat_result = self._read_stat()
        self.is_dir = os.path.isdir(self.path)
        self.size = stat_result.st_size
        self.modified = datetime.fromtimestamp(stat_result.st_mtime)

    def _find_file_name(self) -> str:
        """Extract the entry name from the path."""
        return os.path.basename(self.path) or self.path

    def _read_stat(self) -> os.stat_result:
        """Read attributes, falling back to the link itself for dangling symlinks."""
        try:
            return os.stat(self.path)
        except FileNotFoundError:
            try:
                return os.lstat(self.path)
            except OSError as e:
                raise FileRepositoryError(f"Cannot read attributes: {e}")
        except OSError as e:
            raise FileRepositoryError(f"Cannot read attributes: {e}")

    def detail_line(self) -> str:
        """Render name, size and modification time as fixed-width columns."""
        return f"{self.name:<30}{self.size:<15}{self.modified.strftime(DATE_FORMAT)}"

    def __repr__(self) -> str:
        return f"File(path='{self.path}')"
