"""
Tests for the Dispatcher read-eval-print loop.
"""

import os
from unittest.mock import MagicMock

from fileshell.entities.command import CommandResult
from fileshell.entities.session import Session
from fileshell.ports.shell.command_port import CommandHandlerPort
from fileshell.ui.console import ShellRenderer
from fileshell.use_cases.shell.command_handlers import EXIT_MESSAGE, INVALID_COMMAND
from fileshell.use_cases.shell.dispatcher import Dispatcher


def scripted(lines):
    """Return a reader that replays lines, then signals end of input."""
    remaining = list(lines)
    prompts = []

    def reader(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        item = remaining.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    reader.prompts = prompts
    return reader


class TestDispatcher:
    """Test cases for the Dispatcher."""

    def test_execute_line_renders_output(self, dispatcher, output):
        dispatcher.execute_line("ls")

        assert output.getvalue().splitlines() == ["subdir", "test1.txt", "test2.py"]

    def test_blank_line_is_noop(self, dispatcher, output):
        assert dispatcher.execute_line("   ") is None
        assert output.getvalue() == ""

    def test_unknown_verb_prints_message(self, dispatcher, output, temp_directory):
        result = dispatcher.execute_line("foo")

        assert result.is_exit is False
        assert output.getvalue().strip() == INVALID_COMMAND
        assert dispatcher.session.cwd == temp_directory

    def test_failure_is_prefixed(self, dispatcher, output):
        dispatcher.execute_line("mkdir subdir")

        assert output.getvalue().startswith("Error: Already exists")

    def test_run_until_exit(self, dependency_container, console, output, temp_directory):
        reader = scripted(["cd subdir", "ls", "exit", "ls"])
        dispatcher = dependency_container.create_dispatcher(
            session=Session(temp_directory), console=console, reader=reader
        )

        assert dispatcher.run() == 0

        assert output.getvalue().splitlines() == ["nested", "test3.md", EXIT_MESSAGE]
        assert reader.prompts == [
            f"{temp_directory}> ",
            f"{os.path.join(temp_directory, 'subdir')}> ",
            f"{os.path.join(temp_directory, 'subdir')}> ",
        ]

    def test_run_stops_on_end_of_input(self, dependency_container, console, output, temp_directory):
        dispatcher = dependency_container.create_dispatcher(
            session=Session(temp_directory), console=console, reader=scripted([])
        )

        assert dispatcher.run() == 0
        assert output.getvalue().strip() == EXIT_MESSAGE

    def test_interrupt_reprompts(self, dependency_container, console, output, temp_directory):
        reader = scripted([KeyboardInterrupt(), "exit"])
        dispatcher = dependency_container.create_dispatcher(
            session=Session(temp_directory), console=console, reader=reader
        )

        dispatcher.run()

        assert output.getvalue().splitlines() == ["^C", EXIT_MESSAGE]
        assert len(reader.prompts) == 2

    def test_unexpected_error_does_not_stop_loop(self, console, output, mock_logger, temp_directory):
        handler = MagicMock(spec=CommandHandlerPort)
        handler.dispatch.side_effect = [RuntimeError("kaboom"), CommandResult.exit(EXIT_MESSAGE)]
        dispatcher = Dispatcher(
            handler,
            Session(temp_directory),
            ShellRenderer(console),
            reader=scripted(["ls", "exit"]),
            logger=mock_logger,
        )

        assert dispatcher.run() == 0

        assert output.getvalue().splitlines() == ["Error: kaboom", EXIT_MESSAGE]
        mock_logger.exception.assert_called_once()

    def test_names_with_markup_are_printed_literally(self, dispatcher, output, temp_directory):
        open(os.path.join(temp_directory, "[bold]x"), "w").close()

        dispatcher.execute_line("find [bold]x")

        assert output.getvalue().strip() == os.path.join(temp_directory, "[bold]x")
