from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class CommandStatus:
    """The result of running a command."""

    rc: int  # return code; follows shell conventions where 0 is success
    message: str | None = None  # a message to display to the user
    stderr: str = ""  # captured standard error of the command


CommandState = Literal["pending", "succeeded", "failed"]

RunState = Literal["starting", "running", "draining", "done"]


@dataclass(frozen=True)
class Entry:
    """One command and what is currently known about it."""

    index: int
    command: str
    state: CommandState = "pending"
    status: CommandStatus | None = None

    @property
    def is_terminal(self) -> bool:
        return self.state != "pending"


class SamtidError(Exception):
    pass


class StatusTransitionError(SamtidError):
    """Raised when a command that has already finished is given a new status."""
