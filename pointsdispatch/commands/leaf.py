"""Leaf commands: the executable end points of a command tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..context import CommandContext
    from ..models import CommandResult
    from ..sender import Sender

__all__ = ["FunctionCommand", "LeafCommand", "NamedExecutor", "command", "filter_partial"]

ExecuteFunction = Callable[["CommandContext", "Sender", list[str]], "CommandResult | None"]
CompleteFunction = Callable[["CommandContext", "Sender", list[str]], list[str]]


@runtime_checkable
class NamedExecutor(Protocol):
    """Anything that can be listed in a command tree: leaves and dispatchers."""

    name: str

    def has_permission(self, sender: Sender) -> bool:
        """Return True if `sender` may use this executor."""


class LeafCommand(ABC):
    """Base class for commands.

    Subclasses implement `execute` and document their usage in the class
    docstring, starting with the arguments: "<player> [amount] Short text".
    Leave `permission` to None for commands anyone may use.
    """

    name: str = ""
    permission: str | None = None

    def __init__(self, name: str | None = None, permission: str | None = None) -> None:
        if name is not None:
            self.name = name
        if permission is not None:
            self.permission = permission

    def has_permission(self, sender: Sender) -> bool:
        return self.permission is None or sender.has_permission(self.permission)

    @abstractmethod
    def execute(self, context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:
        """Run the command with the arguments following its name."""

    def tab_complete(self, context: CommandContext, sender: Sender, args: list[str]) -> list[str]:  # noqa: ARG002
        """Return suggestions for the last of `args`."""
        return []

    @property
    def help_text(self) -> str | None:
        """The docstring of the concrete class (never an inherited one)."""
        return type(self).__dict__.get("__doc__")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class FunctionCommand(LeafCommand):
    """A leaf command wrapping plain functions."""

    def __init__(
        self,
        name: str,
        func: ExecuteFunction,
        permission: str | None = None,
        completer: CompleteFunction | None = None,
    ) -> None:
        super().__init__(name, permission)
        self.func = func
        self.completer = completer

    def execute(self, context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:
        return self.func(context, sender, args)

    def tab_complete(self, context: CommandContext, sender: Sender, args: list[str]) -> list[str]:
        if self.completer is None:
            return []
        return self.completer(context, sender, args)

    @property
    def help_text(self) -> str | None:
        return self.func.__doc__


def command(
    name: str | None = None,
    permission: str | None = None,
    completer: CompleteFunction | None = None,
) -> Callable[[ExecuteFunction], FunctionCommand]:
    """Decorator turning a function into a `FunctionCommand`.

    The command name defaults to the function name without a "cmd_" prefix.
    The function docstring is used for help, like a `LeafCommand` docstring.
    """

    def _decorator(func: ExecuteFunction) -> FunctionCommand:
        cmd_name = name or func.__name__.removeprefix("cmd_")
        return FunctionCommand(cmd_name, func, permission=permission, completer=completer)

    return _decorator


def filter_partial(token: str, candidates: Sequence[str]) -> list[str]:
    """Return the `candidates` starting with `token`, ignoring case."""
    prefix = token.lower()
    return [candidate for candidate in candidates if candidate.lower().startswith(prefix)]
