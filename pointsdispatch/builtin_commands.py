"""Commands registered on every root dispatcher."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .ansi import MessageStyles
from .commands.leaf import LeafCommand
from .constants import RELOAD_PERMISSION
from .help import get_command_help, get_listing
from .models import DispatchError, Ok
from .version import VERSION

if TYPE_CHECKING:
    from .commands.dispatcher import CommandDispatcher
    from .context import CommandContext
    from .models import CommandResult
    from .sender import Sender

__all__ = ["HelpCommand", "ReloadCommand", "VersionCommand", "register_builtin_commands"]


class HelpCommand(LeafCommand):
    """[command] Show the available commands or the details of one.

    Without argument, lists every command you may use.
    With a command path (e.g. "help admin reset"), shows its usage.
    """

    def __init__(self, root: CommandDispatcher) -> None:
        super().__init__("help")
        self.root = root

    def execute(self, context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:
        if args:
            lines = get_command_help(context.messenger, self.root, args, sender)
        else:
            lines = get_listing(context.messenger, self.root, sender)
        for line in lines:
            context.messenger.send_raw(sender, line)
        return None

    def tab_complete(self, context: CommandContext, sender: Sender, args: list[str]) -> list[str]:
        return self.root.complete(context, sender, args)


class VersionCommand(LeafCommand):
    """Show the version."""

    def __init__(self) -> None:
        super().__init__("version")

    def execute(self, context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:  # noqa: ARG002
        context.messenger.send_message(sender, "version", version=VERSION)
        return None


class ReloadCommand(LeafCommand):
    """Reload the configuration file.

    Extensions are loaded again and disabled commands are applied.
    """

    permission = RELOAD_PERMISSION

    def __init__(self, reload: Callable[[], None]) -> None:
        super().__init__("reload")
        self.reload = reload

    def execute(self, context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:  # noqa: ARG002
        try:
            self.reload()
        except DispatchError:
            context.messenger.send_message(sender, "reload-failed", style=MessageStyles.ERROR)
            return None
        return Ok(context.messenger.format("reload-success"))


def register_builtin_commands(root: CommandDispatcher, reload: Callable[[], None] | None = None) -> None:
    """Register help, version and, when `reload` is given, reload on `root`."""
    root.register_command("help", HelpCommand(root))
    root.register_command("version", VersionCommand())
    if reload is not None:
        root.register_command("reload", ReloadCommand(reload))
