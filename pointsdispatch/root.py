"""Concrete dispatchers: the root of a command tree and generic groups."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .ansi import MessageStyles
from .commands.dispatcher import CommandDispatcher
from .help import get_listing

if TYPE_CHECKING:
    from .context import CommandContext
    from .sender import Sender

__all__ = ["CommandGroup", "RootDispatcher", "UnknownCommandFallback"]

UnknownCommandFallback = Callable[["CommandContext", "Sender", list[str]], bool]


class CommandGroup(CommandDispatcher):
    """A group of subcommands.

    Without arguments, lists the subcommands the sender may use.
    """

    def __init__(self, name: str, permission: str | None = None, description: str = "") -> None:
        super().__init__(name, permission)
        self.description = description

    @property
    def help_text(self) -> str | None:
        return self.description or super().help_text

    def on_no_args(self, context: CommandContext, sender: Sender) -> None:
        for line in get_listing(context.messenger, self, sender):
            context.messenger.send_raw(sender, line)

    def on_unknown_command(self, context: CommandContext, sender: Sender, args: list[str]) -> None:
        context.messenger.send_message(
            sender,
            "unknown-command",
            style=MessageStyles.ERROR,
            cmd=args[0],
            root=self.path[0],
        )


class RootDispatcher(CommandGroup):
    """The top of a command tree.

    Without arguments, runs the "help" command when one is registered.
    Unknown tokens are first offered to `fallback`, which returns True when it
    handled them (e.g. to read the token as a player name).
    """

    def __init__(self, name: str, fallback: UnknownCommandFallback | None = None, description: str = "") -> None:
        super().__init__(name, description=description)
        self.fallback = fallback

    def on_no_args(self, context: CommandContext, sender: Sender) -> None:
        help_command = self.registered_commands.get("help")
        if help_command is not None and help_command.has_permission(sender):
            self.run_leaf(context, sender, help_command, [])
            return
        super().on_no_args(context, sender)

    def on_unknown_command(self, context: CommandContext, sender: Sender, args: list[str]) -> None:
        if self.fallback is not None and self.fallback(context, sender, args):
            return
        super().on_unknown_command(context, sender, args)
