"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from rich.console import Console

from fileshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fileshell.adapters.files.tree_walker import TreeWalker
from fileshell.entities.session import Session
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.use_cases.files.delete_path import DeletePathUseCase
from fileshell.use_cases.files.file_info import FileInfoUseCase
from fileshell.use_cases.files.list_files import ListFilesUseCase
from fileshell.use_cases.files.make_directory import MakeDirectoryUseCase
from fileshell.use_cases.files.search_files import SearchFilesUseCase
from fileshell.use_cases.files.transfer_files import CopyFileUseCase, MovePathUseCase
from fileshell.use_cases.shell.command_handlers import ShellCommandHandler
from fileshell.use_cases.shell.dispatcher import Dispatcher, LineReader
from fileshell.ui.console import ShellRenderer, create_console


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger("fileshell")

    def get_tree_walker(self) -> TreeWalker:
        if "tree_walker" not in self._instances:
            self._instances["tree_walker"] = TreeWalker(self._logger)
        return self._instances["tree_walker"]

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(
                self._logger, self.get_tree_walker()
            )
        return self._instances["file_repository"]

    def get_list_files_use_case(self) -> ListFilesUseCase:
        if "list_files_use_case" not in self._instances:
            self._instances["list_files_use_case"] = ListFilesUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["list_files_use_case"]

    def get_search_files_use_case(self) -> SearchFilesUseCase:
        if "search_files_use_case" not in self._instances:
            self._instances["search_files_use_case"] = SearchFilesUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["search_files_use_case"]

    def get_delete_path_use_case(self) -> DeletePathUseCase:
        if "delete_path_use_case" not in self._instances:
            self._instances["delete_path_use_case"] = DeletePathUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["delete_path_use_case"]

    def get_make_directory_use_case(self) -> MakeDirectoryUseCase:
        if "make_directory_use_case" not in self._instances:
            self._instances["make_directory_use_case"] = MakeDirectoryUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["make_directory_use_case"]

    def get_move_path_use_case(self) -> MovePathUseCase:
        if "move_path_use_case" not in self._instances:
            self._instances["move_path_use_case"] = MovePathUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["move_path_use_case"]

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        if "copy_file_use_case" not in self._instances:
            self._instances["copy_file_use_case"] = CopyFileUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["copy_file_use_case"]

    def get_file_info_use_case(self) -> FileInfoUseCase:
        if "file_info_use_case" not in self._instances:
            self._instances["file_info_use_case"] = FileInfoUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["file_info_use_case"]

    def get_command_handler(self) -> ShellCommandHandler:
        """
        Get the handler registry for the shell verbs, backed by the Files use cases.

        Returns:
            Configured ShellCommandHandler
        """
        if "command_handler" not in self._instances:
            self._instances["command_handler"] = ShellCommandHandler(
                file_repository=self.get_file_repository(),
                list_files_uc=self.get_list_files_use_case(),
                make_directory_uc=self.get_make_directory_use_case(),
                delete_path_uc=self.get_delete_path_use_case(),
                move_path_uc=self.get_move_path_use_case(),
                copy_file_uc=self.get_copy_file_use_case(),
                file_info_uc=self.get_file_info_use_case(),
                search_files_uc=self.get_search_files_use_case(),
                logger=self._logger,
            )
        return self._instances["command_handler"]

    def create_dispatcher(
        self,
        session: Optional[Session] = None,
        console: Optional[Console] = None,
        reader: Optional[LineReader] = None,
    ) -> Dispatcher:
        """
        Build a dispatcher for one session. Dispatchers are not cached.

        Args:
            session: Session to drive; defaults to one in the process working directory
            console: Output console; defaults to a plain stdout console
            reader: Line reader; defaults to the console's input

        Returns:
            Configured Dispatcher
        """
        renderer = ShellRenderer(console or create_console())
        return Dispatcher(
            self.get_command_handler(),
            session or Session(),
            renderer,
            reader=reader,
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
