"""pointsdispatch - nested command dispatching with permissions and tab completion.

Build a tree of `CommandDispatcher` nodes and `LeafCommand`s, then route
tokenized command lines through it with `dispatch` and `complete`.
`CommandApp` adds configuration, extensions and built-in commands on top.
"""

from .app import CommandApp
from .commands import CommandDispatcher, FunctionCommand, LeafCommand, NamedExecutor, command
from .context import CommandContext
from .messages import LocaleMessenger, Messenger
from .models import CommandResult, DispatchError, InternalError, Ok, UserError
from .root import CommandGroup, RootDispatcher
from .sender import ConsoleSender, Sender
from .version import VERSION

__all__ = [
    "VERSION",
    "CommandApp",
    "CommandContext",
    "CommandDispatcher",
    "CommandGroup",
    "CommandResult",
    "ConsoleSender",
    "DispatchError",
    "FunctionCommand",
    "InternalError",
    "LeafCommand",
    "LocaleMessenger",
    "Messenger",
    "NamedExecutor",
    "Ok",
    "RootDispatcher",
    "Sender",
    "UserError",
    "command",
]
