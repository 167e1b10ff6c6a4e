"""
Depth-first, post-order directory tree walker.
"""

import logging
import os
import stat
from typing import Optional

from fileshell.exceptions import FileRepositoryError
from fileshell.ports.files.tree_visitor_port import TreeVisitor


class TreeWalker:
    """
    Walk a directory tree and drive a TreeVisitor.

    Non-directory entries go to ``on_file``. Each directory goes to
    ``on_directory_finished`` only after every entry beneath it, so the root comes
    last. Symlinks are never descended into, even when they point at a directory.
    The first error aborts the walk.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def _read_entries(self, directory: str) -> list[os.DirEntry]:
        # Directory streams are closed before any child is visited.
        with os.scandir(directory) as it:
            entries = list(it)
        entries.reverse()
        return entries

    def walk(self, root: str, visitor: TreeVisitor) -> None:
        """
        Traverse the tree rooted at root.

        Args:
            root: Directory (or single entry) to start from
            visitor: Callbacks to drive

        Raises:
            FileRepositoryError: If reading an entry or a visitor callback fails
        """
        self._logger.debug(f"Walking tree: {root}")
        try:
            root_attrs = os.lstat(root)
            if not stat.S_ISDIR(root_attrs.st_mode):
                visitor.on_file(root, root_attrs)
                return

            stack: list[tuple[str, list[os.DirEntry]]] = [
                (root, self._read_entries(root))
            ]
            while stack:
                directory, pending = stack[-1]
                if not pending:
                    stack.pop()
                    visitor.on_directory_finished(directory)
                    continue
                entry = pending.pop()
                if entry.is_dir(follow_symlinks=False):
                    stack.append((entry.path, self._read_entries(entry.path)))
                else:
                    visitor.on_file(entry.path, entry.stat(follow_symlinks=False))
        except FileRepositoryError:
            raise
        except OSError as e:
            self._logger.error(f"Tree walk aborted under {root}: {e}")
            raise FileRepositoryError(f"Failed to walk {root}: {e}")
