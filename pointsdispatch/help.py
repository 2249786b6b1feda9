"""Help output built from a command tree."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .commands.discovery import describe
from .commands.dispatcher import CommandDispatcher

if TYPE_CHECKING:
    from .messages import Messenger
    from .sender import Sender

__all__ = ["get_command_help", "get_listing"]


def get_listing(messenger: Messenger, dispatcher: CommandDispatcher, sender: Sender) -> list[str]:
    """Get one line per executable of `dispatcher` the sender may use.

    Args:
        messenger: Used to render the header and the entries
        dispatcher: The dispatcher to list
        sender: Executables it can't use are left out
    """
    lines = [messenger.format("help-header")]
    base_path = dispatcher.path
    for executor in dispatcher.list_executables():
        if not executor.has_permission(sender):
            continue
        info = describe(executor, [*base_path, executor.name], sender)
        lines.append(messenger.format("help-entry", prefixed=False, usage=info.usage, description=info.short_description))
    return lines


def get_command_help(messenger: Messenger, root: CommandDispatcher, tokens: Sequence[str], sender: Sender) -> list[str]:
    """Get detailed help for the command at `tokens` below `root`.

    Dispatchers get a listing of their content, leaves their usage and
    full description. Nodes the sender can't reach are reported unknown.
    """
    node = root
    for depth, token in enumerate(tokens):
        found = node.find([token])
        if found is None or not found.has_permission(sender):
            return [messenger.format("help-unknown", cmd=" ".join(tokens))]
        if not isinstance(found, CommandDispatcher):
            if depth != len(tokens) - 1:
                return [messenger.format("help-unknown", cmd=" ".join(tokens))]
            info = describe(found, [*node.path, found.name], sender)
            lines = [info.usage, info.short_description]
            lines.extend(info.full_description.splitlines()[1:])
            return [line for line in lines if line.strip()]
        node = found
    return get_listing(messenger, node, sender)
