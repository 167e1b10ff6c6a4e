"""
File repository port interface defining the contract for filesystem operations.
"""

from abc import ABC, abstractmethod

from fileshell.entities.file import File
from fileshell.ports.files.tree_visitor_port import TreeVisitor


class FileRepositoryPort(ABC):
    """Port interface for filesystem operations."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if an entry exists at path (dangling symlinks included)."""
        pass

    @abstractmethod
    def is_dir(self, path: str, follow_symlinks: bool = True) -> bool:
        """
        Return True if path is a directory.

        Args:
            path: Path to check
            follow_symlinks: If False, a symlink to a directory is not a directory
        """
        pass

    @abstractmethod
    def get_file(self, path: str) -> File:
        """
        Read the attributes of a single entry.

        Args:
            path: Path of the entry

        Returns:
            File entity for the entry

        Raises:
            FileRepositoryError: If the entry cannot be read
        """
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def mkdir(self, path: str) -> File:
        """
        Create a single directory. Parents are not created.

        Args:
            path: Directory path to create

        Returns:
            A File entity representing the created directory

        Raises:
            FileRepositoryError: If the directory exists or its parent is missing
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """Delete a file or symlink. Raises FileRepositoryError on failure."""
        pass

    @abstractmethod
    def delete_directory(self, path: str) -> None:
        """Delete an empty directory. Raises FileRepositoryError on failure."""
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """
        Move or rename an entry, replacing the destination if present.

        Raises:
            FileRepositoryError: If the move fails
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Copy file content, replacing the destination if present.

        Raises:
            FileRepositoryError: If the copy fails
        """
        pass

    @abstractmethod
    def walk(self, root: str, visitor: TreeVisitor) -> None:
        """
        Walk the tree under root, driving the visitor depth-first and post-order.

        Raises:
            FileRepositoryError: On the first failure, which aborts the walk
        """
        pass
