"""Result types, exceptions and exit codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "CommandResult",
    "DispatchError",
    "ExitCode",
    "InternalError",
    "Ok",
    "UserError",
]


class DispatchError(Exception):
    """Used for errors which already triggered logging."""


class ExitCode(IntEnum):
    """Exit codes for the command line tool."""

    SUCCESS = 0
    USAGE_ERROR = 1
    ENV_ERROR = 2
    COMMAND_ERROR = 4


@dataclass(frozen=True)
class Ok:
    """The command ran to completion."""

    message: str = ""


@dataclass(frozen=True)
class UserError:
    """The sender made a mistake; `message` is shown to them as-is."""

    message: str


@dataclass(frozen=True)
class InternalError:
    """The command failed for a reason the sender can't fix."""

    cause: BaseException | str

    def describe(self) -> str:
        """Return a one-line description of the cause."""
        if isinstance(self.cause, BaseException):
            return f"{type(self.cause).__name__}: {self.cause}"
        return self.cause


CommandResult = Ok | UserError | InternalError
