"""
Port and types describing the shell's command vocabulary.
"""

from abc import ABC, abstractmethod
from typing import TypedDict

from fileshell.entities.command import Command, CommandResult
from fileshell.entities.session import Session


class CommandSpec(TypedDict):
    """Specification of one shell verb, as shown by 'help'."""

    name: str
    usage: str
    description: str


class CommandHandlerPort(ABC):
    """
    Port interface for executing shell commands.

    Exposes the available verbs and dispatches a parsed command to its handler.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get the list of supported verbs.

        Returns:
            List of command specifications, in help order
        """
        pass

    @abstractmethod
    def dispatch(self, command: Command, session: Session) -> CommandResult:
        """
        Execute a command against a session.

        Args:
            command: Tokenized command line
            session: Session whose current directory arguments resolve against

        Returns:
            The handler's result. Unknown verbs and missing arguments come back
            as user errors, filesystem failures as failures.
        """
        pass
