"""Nested command dispatching.

A `CommandDispatcher` owns leaf commands and child dispatchers keyed by
name. A command line is routed one token at a time: each level consumes the
first (lower-cased) token and hands the remaining arguments to the matching
child or leaf. Children win over leaves registered under the same name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..ansi import MessageStyles
from ..logging_setup import get_logger
from ..models import InternalError, Ok, UserError
from .leaf import LeafCommand, NamedExecutor, filter_partial

if TYPE_CHECKING:
    from ..context import CommandContext
    from ..models import CommandResult
    from ..sender import Sender

__all__ = ["CommandDispatcher", "shorten_args"]


def shorten_args(args: Sequence[str]) -> list[str]:
    """Return `args` without its first entry."""
    return list(args[1:])


class CommandDispatcher(ABC):
    """Abstract node of a command tree.

    Concrete dispatchers decide what happens when no argument is given
    (`on_no_args`) and when the first token matches nothing
    (`on_unknown_command`). A dispatcher is usable by everyone unless it
    declares a `permission` node.
    """

    permission: str | None = None

    def __init__(self, name: str, permission: str | None = None) -> None:
        self.name = name.lower()
        if permission is not None:
            self.permission = permission
        self.parent: CommandDispatcher | None = None
        self.registered_commands: dict[str, LeafCommand] = {}
        self.registered_handlers: dict[str, CommandDispatcher] = {}
        self.log = get_logger(f"dispatch.{self.name}")

    # Registration

    def register_command(self, name: str, leaf: LeafCommand) -> None:
        """Register `leaf` under `name`, replacing any previous command.

        Args:
            name: Token the command answers to (case-insensitive)
            leaf: The command
        """
        key = name.lower()
        if key in self.registered_commands:
            self.log.warning("Replacing existing command for: %s", key)
        if not leaf.name:
            leaf.name = key
        self.registered_commands[key] = leaf

    def unregister_command(self, name: str) -> None:
        """Stop handling the command `name`. Unknown names are ignored."""
        self.registered_commands.pop(name.lower(), None)

    def register_handler(self, handler: CommandDispatcher) -> None:
        """Register a child dispatcher under its own name.

        Raises:
            ValueError: `handler` already belongs to another dispatcher, or
                registering it would create a cycle
        """
        if handler is self or self.is_descendant_of(handler):
            msg = f"Registering {handler.name!r} under {self.name!r} would create a cycle"
            raise ValueError(msg)
        if handler.parent is not None and handler.parent is not self:
            msg = f"Handler {handler.name!r} is already registered under {handler.parent.name!r}"
            raise ValueError(msg)

        previous = self.registered_handlers.get(handler.name)
        if previous is not None:
            self.log.warning("Replacing existing handler for: %s", handler.name)
            previous.parent = None
        handler.parent = self
        self.registered_handlers[handler.name] = handler

    def unregister_handler(self, name: str) -> None:
        """Remove the child dispatcher `name`. Unknown names are ignored."""
        handler = self.registered_handlers.pop(name.lower(), None)
        if handler is not None:
            handler.parent = None

    def is_descendant_of(self, node: CommandDispatcher) -> bool:
        """Return True if `node` is an ancestor of this dispatcher."""
        current = self.parent
        while current is not None:
            if current is node:
                return True
            current = current.parent
        return False

    # Dispatching

    def dispatch(self, context: CommandContext, sender: Sender, args: Sequence[str]) -> None:
        """Route `args` to the matching child dispatcher or leaf command.

        Args:
            context: Shared services (messenger, logger...)
            sender: Who issued the command
            args: Arguments following this dispatcher's own name
        """
        if not args:
            self.on_no_args(context, sender)
            return

        token = args[0].lower()

        handler = self.registered_handlers.get(token)
        if handler is not None:
            if not handler.has_permission(sender):
                context.messenger.send_message(sender, "no-permission", style=MessageStyles.ERROR)
                return
            handler.dispatch(context, sender, shorten_args(args))
            return

        leaf = self.registered_commands.get(token)
        if leaf is None:
            self.on_unknown_command(context, sender, list(args))
            return

        if not leaf.has_permission(sender):
            context.messenger.send_message(sender, "no-permission", style=MessageStyles.ERROR)
            return

        self.run_leaf(context, sender, leaf, shorten_args(args))

    def run_leaf(self, context: CommandContext, sender: Sender, leaf: LeafCommand, args: list[str]) -> None:
        """Execute `leaf` and report its result to `sender`.

        Missing arguments (an `IndexError` raised by the leaf) end up as a
        generic error message. Other exceptions propagate.
        """
        context.log.debug("%s%s", leaf.name, tuple(args))
        try:
            result = leaf.execute(context, sender, args)
        except IndexError:
            self.log.debug("Malformed arguments for %s: %s", leaf.name, args, exc_info=True)
            context.messenger.send_message(sender, "command-error", style=MessageStyles.ERROR)
            return
        self.report_result(context, sender, leaf, result)

    def report_result(self, context: CommandContext, sender: Sender, leaf: LeafCommand, result: CommandResult | None) -> None:
        """Tell `sender` how the execution of `leaf` went."""
        if result is None:
            return
        if isinstance(result, Ok):
            if result.message:
                context.messenger.send_raw(sender, result.message, style=MessageStyles.SUCCESS)
        elif isinstance(result, UserError):
            context.messenger.send_raw(sender, result.message, style=MessageStyles.ERROR)
        elif isinstance(result, InternalError):
            if isinstance(result.cause, BaseException):
                self.log.error("%s failed: %s", leaf.name, result.describe(), exc_info=result.cause)
            else:
                self.log.error("%s failed: %s", leaf.name, result.describe())
            context.messenger.send_message(sender, "internal-error", style=MessageStyles.ERROR)
        else:
            self.log.warning("%s returned an unexpected value: %r", leaf.name, result)

    # Completion

    def complete(self, context: CommandContext, sender: Sender, args: Sequence[str]) -> list[str]:
        """Suggest completions for the last of `args`.

        Returns:
            The suggestions, empty when nothing matches or the sender lacks permission
        """
        if not args:
            return []

        token = args[0].lower()
        if len(args) == 1:
            names = [name for name, handler in self.registered_handlers.items() if handler.has_permission(sender)]
            names.extend(
                name for name, leaf in self.registered_commands.items() if name not in names and leaf.has_permission(sender)
            )
            return filter_partial(token, names)

        handler = self.registered_handlers.get(token)
        if handler is not None:
            if handler.has_permission(sender):
                return handler.complete(context, sender, shorten_args(args))
            return []

        leaf = self.registered_commands.get(token)
        if leaf is not None and leaf.has_permission(sender):
            return leaf.tab_complete(context, sender, shorten_args(args))

        return []

    # Introspection

    def list_executables(self) -> list[NamedExecutor]:
        """Return every child dispatcher and leaf command, sorted by name."""
        executors: list[NamedExecutor] = []
        executors.extend(self.registered_handlers.values())
        executors.extend(self.registered_commands.values())
        executors.sort(key=lambda executor: executor.name)
        return executors

    def find(self, path: Sequence[str]) -> NamedExecutor | None:
        """Resolve a sequence of tokens to a node, using the dispatch priority."""
        if not path:
            return self
        token = path[0].lower()
        handler = self.registered_handlers.get(token)
        if handler is not None:
            return handler.find(path[1:])
        if len(path) == 1:
            return self.registered_commands.get(token)
        return None

    @property
    def path(self) -> list[str]:
        """Names from the root down to this dispatcher."""
        names = [self.name]
        current = self.parent
        while current is not None:
            names.append(current.name)
            current = current.parent
        return names[::-1]

    def has_permission(self, sender: Sender) -> bool:
        return self.permission is None or sender.has_permission(self.permission)

    @property
    def help_text(self) -> str | None:
        """The docstring of the concrete class."""
        return type(self).__dict__.get("__doc__")

    @abstractmethod
    def on_no_args(self, context: CommandContext, sender: Sender) -> None:
        """Handle an invocation without any argument left."""

    @abstractmethod
    def on_unknown_command(self, context: CommandContext, sender: Sender, args: list[str]) -> None:
        """Handle a first token matching no child nor leaf.

        Args:
            context: Shared services
            sender: Who issued the command
            args: The full arguments, unknown token included
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
