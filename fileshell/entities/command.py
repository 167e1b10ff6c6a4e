from dataclasses import dataclass, field
from enum import Enum


class Command:
    """A tokenized command line: a case-insensitive verb plus positional arguments."""

    raw: str

    def __init__(self, raw: str):
        self.raw = raw.strip()
        tokens = self.raw.split()
        self.verb: str = tokens[0].lower() if tokens else ""
        self.args: list[str] = tokens[1:]

    def is_empty(self) -> bool:
        return not self.verb

    def arg(self, index: int) -> str | None:
        return self.args[index] if index < len(self.args) else None

    def __repr__(self) -> str:
        return f"Command(verb='{self.verb}', args={self.args!r})"


class ResultStatus(Enum):
    OK = "ok"
    USER_ERROR = "user_error"
    FAILURE = "failure"
    EXIT = "exit"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one handler invocation, inspected by the dispatcher."""

    status: ResultStatus = ResultStatus.OK
    lines: list[str] = field(default_factory=list)
    message: str | None = None

    @classmethod
    def ok(cls, lines: list[str] | None = None) -> "CommandResult":
        return cls(ResultStatus.OK, list(lines or []))

    @classmethod
    def user_error(cls, message: str) -> "CommandResult":
        return cls(ResultStatus.USER_ERROR, message=message)

    @classmethod
    def failure(cls, message: str) -> "CommandResult":
        return cls(ResultStatus.FAILURE, message=message)

    @classmethod
    def exit(cls, message: str) -> "CommandResult":
        return cls(ResultStatus.EXIT, message=message)

    @property
    def is_exit(self) -> bool:
        return self.status is ResultStatus.EXIT
