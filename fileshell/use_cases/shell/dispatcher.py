"""
Read-eval-print loop driving the shell command handlers.
"""

import logging
from typing import Callable, Optional

from fileshell.entities.command import Command, CommandResult
from fileshell.entities.session import Session
from fileshell.ports.shell.command_port import CommandHandlerPort
from fileshell.ui.console import ShellRenderer
from fileshell.use_cases.shell.command_handlers import EXIT_MESSAGE

LineReader = Callable[[str], str]


class Dispatcher:
    """
    Read one line at a time, run it to completion, print the outcome.

    Nothing a command does ends the loop except ``exit`` or end of input.
    """

    def __init__(
        self,
        handler: CommandHandlerPort,
        session: Session,
        renderer: ShellRenderer,
        reader: Optional[LineReader] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            handler: Command handler registry
            session: Session owning the current directory
            renderer: Output renderer
            reader: Callable taking a prompt and returning one input line.
                Defaults to reading through the renderer's console.
            logger: Logger instance to use for logging
        """
        self._handler = handler
        self._session = session
        self._renderer = renderer
        self._reader = reader or renderer.read_line
        self._logger = logger or logging.getLogger(__name__)

    @property
    def session(self) -> Session:
        return self._session

    def execute_line(self, line: str) -> Optional[CommandResult]:
        """
        Tokenize and run one line, then render its result.

        Args:
            line: Raw input line

        Returns:
            The command result, or None for a blank line
        """
        command = Command(line)
        if command.is_empty():
            return None
        try:
            result = self._handler.dispatch(command, self._session)
        except Exception as e:
            self._logger.exception(f"Unexpected error running '{command.verb}': {e}")
            result = CommandResult.failure(str(e) or e.__class__.__name__)
        self._renderer.render(result)
        return result

    def run(self) -> int:
        """
        Run the loop until 'exit' or end of input.

        Returns:
            Process exit code (always 0)
        """
        self._logger.info(f"Shell started in {self._session.cwd}")
        while True:
            try:
                line = self._reader(self._session.prompt())
            except EOFError:
                self._renderer.newline()
                self._renderer.render(CommandResult.exit(EXIT_MESSAGE))
                break
            except KeyboardInterrupt:
                self._renderer.interrupted()
                continue

            result = self.execute_line(line)
            if result is not None and result.is_exit:
                break
        self._logger.info("Shell stopped")
        return 0
