"""
Console output for the shell, rendered with rich.
"""

from typing import IO, Optional

from rich.console import Console
from rich.text import Text

from fileshell.entities.command import CommandResult, ResultStatus


def create_console(pretty: bool = False, file: Optional[IO[str]] = None) -> Console:
    """Build a console; plain mode emits no ANSI codes at all."""
    return Console(
        file=file,
        soft_wrap=True,
        markup=False,
        emoji=False,
        highlight=False,
        color_system="auto" if pretty else None,
    )


class ShellRenderer:
    """Render command results and prompts on a rich Console."""

    ERROR_PREFIX = "Error: "

    def __init__(self, console: Console):
        self._console = console

    @property
    def console(self) -> Console:
        return self._console

    def read_line(self, prompt: str) -> str:
        # File names may contain brackets; never parse them as markup.
        return self._console.input(Text(prompt, style="bold cyan"))

    def render(self, result: CommandResult) -> None:
        for line in result.lines:
            self._console.print(Text(line))
        if not result.message:
            return
        if result.status is ResultStatus.FAILURE:
            self._console.print(Text(self.ERROR_PREFIX + result.message, style="bold red"))
        elif result.status is ResultStatus.USER_ERROR:
            self._console.print(Text(result.message, style="yellow"))
        else:
            self._console.print(Text(result.message))

    def interrupted(self) -> None:
        self._console.print(Text("^C"))

    def newline(self) -> None:
        self._console.print()
