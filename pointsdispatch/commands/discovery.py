"""Extract help information from a command tree."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from .dispatcher import CommandDispatcher
from .leaf import NamedExecutor
from .models import CommandInfo
from .parsing import parse_docstring

if TYPE_CHECKING:
    from ..sender import Sender

__all__ = ["describe", "iter_commands"]


def describe(executor: NamedExecutor, path: list[str], sender: Sender | None = None) -> CommandInfo:
    """Build the `CommandInfo` of `executor`.

    Args:
        executor: A leaf command or a dispatcher
        path: Tokens leading to `executor`, its own name included
        sender: When set, children the sender can't use are left out
    """
    doc = getattr(executor, "help_text", None)
    args, short_desc, full_desc = parse_docstring(inspect.cleandoc(doc) if doc else None)
    info = CommandInfo(
        name=executor.name,
        path=list(path),
        args=args,
        short_description=short_desc,
        full_description=full_desc,
        is_group=isinstance(executor, CommandDispatcher),
    )
    if isinstance(executor, CommandDispatcher):
        for child in executor.list_executables():
            if sender is None or child.has_permission(sender):
                info.children.append(describe(child, [*path, child.name], sender))
    return info


def iter_commands(dispatcher: CommandDispatcher, sender: Sender | None = None, path: list[str] | None = None) -> list[CommandInfo]:
    """Return the leaf commands below `dispatcher`, depth first, sorted by name.

    Args:
        dispatcher: Where to start
        sender: When set, only what the sender may use is returned
        path: Tokens leading to `dispatcher` (defaults to its own path)
    """
    if path is None:
        path = dispatcher.path
    commands: list[CommandInfo] = []
    for executor in dispatcher.list_executables():
        if sender is not None and not executor.has_permission(sender):
            continue
        child_path = [*path, executor.name]
        if isinstance(executor, CommandDispatcher):
            commands.extend(iter_commands(executor, sender, child_path))
        else:
            commands.append(describe(executor, child_path, sender))
    return commands
