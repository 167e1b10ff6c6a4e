"""
Visitor port driven by the directory tree walker.
"""

import os
from abc import ABC, abstractmethod


class TreeVisitor(ABC):
    """Callbacks invoked during a depth-first, post-order directory walk."""

    @abstractmethod
    def on_file(self, path: str, attrs: os.stat_result) -> None:
        """
        Handle a non-directory entry (regular file, symlink, special file).

        Args:
            path: Path of the entry
            attrs: Attributes read with lstat
        """
        pass

    def on_directory_finished(self, path: str) -> None:
        """
        Handle a directory once every entry beneath it has been visited.

        Args:
            path: Path of the directory
        """
        pass
