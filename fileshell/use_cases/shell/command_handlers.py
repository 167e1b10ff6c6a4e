"""
Handlers for the shell verbs, mapped to the Files use cases.
"""

import logging
import os
from typing import Callable, Optional

from fileshell.entities.command import Command, CommandResult
from fileshell.entities.session import Session
from fileshell.exceptions import FileRepositoryError
from fileshell.ports.files.file_repository_port import FileRepositoryPort
from fileshell.ports.shell.command_port import CommandHandlerPort, CommandSpec
from fileshell.use_cases.files.delete_path import DeletePathUseCase
from fileshell.use_cases.files.file_info import FileInfoUseCase
from fileshell.use_cases.files.list_files import ListFilesUseCase
from fileshell.use_cases.files.make_directory import MakeDirectoryUseCase
from fileshell.use_cases.files.search_files import SearchFilesUseCase
from fileshell.use_cases.files.transfer_files import CopyFileUseCase, MovePathUseCase
from fileshell.utils import path_resolver

INVALID_COMMAND = "Invalid command. Type 'help' for a list of commands."
EXIT_MESSAGE = "Program finished."

Handler = Callable[[Command, Session], CommandResult]


def _spec(name: str, usage: str, description: str) -> CommandSpec:
    return {"name": name, "usage": usage, "description": description}


COMMAND_SPECS: list[CommandSpec] = [
    _spec("ls", "ls [-l]", "list entries in the current directory"),
    _spec("cd", "cd [path]", "change the current directory"),
    _spec("mkdir", "mkdir [name]", "create a new directory"),
    _spec("rm", "rm [name]", "delete a file or directory"),
    _spec("mv", "mv [source] [target]", "move or rename a file or directory"),
    _spec("cp", "cp [source] [target]", "copy a file"),
    _spec("finfo", "finfo [name]", "show information about a file"),
    _spec(
        "find",
        "find [name]",
        "find files with the given name in the current directory and subdirectories",
    ),
    _spec("help", "help", "show the list of commands"),
    _spec("exit", "exit", "quit the file manager"),
]


def _contains(path: str, cwd: str) -> bool:
    try:
        return os.path.commonpath([path, cwd]) == path
    except ValueError:
        return False


def _is_same_or_ancestor(path: str, cwd: str) -> bool:
    """True if path is cwd or above it, lexically or once symlinks are resolved."""
    path = os.path.normpath(path)
    if _contains(path, os.path.normpath(cwd)):
        return True
    # rm and mv act on a final-component symlink itself, not on its target.
    parent, name = os.path.split(path)
    physical = os.path.join(os.path.realpath(parent), name)
    return _contains(os.path.normpath(physical), os.path.realpath(cwd))


class ShellCommandHandler(CommandHandlerPort):
    """Validate arguments for each verb and run the matching use case."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        list_files_uc: ListFilesUseCase,
        make_directory_uc: MakeDirectoryUseCase,
        delete_path_uc: DeletePathUseCase,
        move_path_uc: MovePathUseCase,
        copy_file_uc: CopyFileUseCase,
        file_info_uc: FileInfoUseCase,
        search_files_uc: SearchFilesUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._list_files_uc = list_files_uc
        self._make_directory_uc = make_directory_uc
        self._delete_path_uc = delete_path_uc
        self._move_path_uc = move_path_uc
        self._copy_file_uc = copy_file_uc
        self._file_info_uc = file_info_uc
        self._search_files_uc = search_files_uc
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Handler] = {
            "ls": self._handle_ls,
            "cd": self._handle_cd,
            "mkdir": self._handle_mkdir,
            "rm": self._handle_rm,
            "mv": self._handle_mv,
            "cp": self._handle_cp,
            "finfo": self._handle_finfo,
            "find": self._handle_find,
            "help": self._handle_help,
            "exit": self._handle_exit,
        }

    # ------------------------- port -------------------------
    def available_commands(self) -> list[CommandSpec]:
        return list(COMMAND_SPECS)

    def dispatch(self, command: Command, session: Session) -> CommandResult:
        handler = self._handlers.get(command.verb)
        if handler is None:
            self._logger.debug(f"Unknown command: {command.verb}")
            return CommandResult.user_error(INVALID_COMMAND)
        try:
            return handler(command, session)
        except FileRepositoryError as e:
            self._logger.warning(f"Command '{command.verb}' failed: {e}")
            return CommandResult.failure(str(e))

    def help_lines(self) -> list[str]:
        lines = ["Commands:"]
        for spec in self.available_commands():
            lines.append(f"{spec['usage']} - {spec['description']}")
        return lines

    # ------------------------- internal helpers -------------------------
    def _resolve(self, session: Session, raw: str) -> str:
        # '..' at the root resolves to the root itself for everything but cd.
        return path_resolver.resolve(session.cwd, raw) or session.cwd

    # ------------------------- handlers -------------------------
    def _handle_ls(self, command: Command, session: Session) -> CommandResult:
        detailed = command.arg(0) == "-l"
        files = self._list_files_uc.execute(session.cwd)
        if detailed:
            return CommandResult.ok([f.detail_line() for f in files])
        return CommandResult.ok([f.name for f in files])

    def _handle_cd(self, command: Command, session: Session) -> CommandResult:
        target = command.arg(0)
        if target is None:
            return CommandResult.user_error("No directory specified to change to.")
        resolved = path_resolver.resolve(session.cwd, target)
        if resolved is None:
            return CommandResult.user_error("Already at the filesystem root.")
        if not self._file_repository.is_dir(resolved):
            return CommandResult.user_error("The specified path is not a directory.")
        session.change_directory(resolved)
        return CommandResult.ok()

    def _handle_mkdir(self, command: Command, session: Session) -> CommandResult:
        name = command.arg(0)
        if name is None:
            return CommandResult.user_error("No name specified for the new directory.")
        self._make_directory_uc.execute(self._resolve(session, name))
        return CommandResult.ok()

    def _handle_rm(self, command: Command, session: Session) -> CommandResult:
        target = command.arg(0)
        if target is None:
            return CommandResult.user_error(
                "No file or directory specified for deletion."
            )
        path = self._resolve(session, target)
        if not self._file_repository.exists(path):
            return CommandResult.user_error(
                "The specified file or directory does not exist."
            )
        if _is_same_or_ancestor(path, session.cwd):
            return CommandResult.user_error(
                "Cannot delete the current directory or one of its parents."
            )
        self._delete_path_uc.execute(path)
        return CommandResult.ok()

    def _handle_mv(self, command: Command, session: Session) -> CommandResult:
        if len(command.args) < 2:
            return CommandResult.user_error("Source or destination path not specified.")
        source = self._resolve(session, command.args[0])
        destination = self._resolve(session, command.args[1])
        if not self._file_repository.exists(source):
            return CommandResult.user_error("The source path does not exist.")
        if _is_same_or_ancestor(source, session.cwd):
            return CommandResult.user_error(
                "Cannot move the current directory or one of its parents."
            )
        self._move_path_uc.execute(source, destination)
        return CommandResult.ok()

    def _handle_cp(self, command: Command, session: Session) -> CommandResult:
        if len(command.args) < 2:
            return CommandResult.user_error("Source or destination path not specified.")
        source = self._resolve(session, command.args[0])
        destination = self._resolve(session, command.args[1])
        if not self._file_repository.exists(source):
            return CommandResult.user_error("The source path does not exist.")
        if self._file_repository.is_dir(source):
            return CommandResult.user_error("Copying directories is not supported.")
        self._copy_file_uc.execute(source, destination)
        return CommandResult.ok()

    def _handle_finfo(self, command: Command, session: Session) -> CommandResult:
        target = command.arg(0)
        if target is None:
            return CommandResult.user_error("No file specified to get information about.")
        path = self._resolve(session, target)
        if not self._file_repository.exists(path):
            return CommandResult.user_error("The specified file does not exist.")
        return CommandResult.ok([self._file_info_uc.execute(path).detail_line()])

    def _handle_find(self, command: Command, session: Session) -> CommandResult:
        name = command.arg(0)
        if name is None:
            return CommandResult.user_error("No file name specified to search for.")
        return CommandResult.ok(self._search_files_uc.execute(session.cwd, name))

    def _handle_help(self, command: Command, session: Session) -> CommandResult:
        return CommandResult.ok(self.help_lines())

    def _handle_exit(self, command: Command, session: Session) -> CommandResult:
        return CommandResult.exit(EXIT_MESSAGE)
