"""
Shell session state.
"""

import os


class Session:
    """Owns the current directory that relative arguments are resolved against."""

    def __init__(self, cwd: str | None = None):
        self._cwd = os.path.abspath(cwd or os.getcwd())

    @property
    def cwd(self) -> str:
        return self._cwd

    def change_directory(self, path: str) -> None:
        """Replace the current directory. Callers must check that path is a directory."""
        self._cwd = os.path.abspath(path)

    def prompt(self) -> str:
        return f"{self._cwd}> "
