"""Command tree building blocks.

This package provides:
- dispatcher: CommandDispatcher, the nested routing node
- leaf: LeafCommand, FunctionCommand and the `command` decorator
- models: CommandArg, CommandInfo (help metadata)
- parsing: docstring and command line parsing
- discovery: help information extraction from a tree
"""

from .dispatcher import CommandDispatcher, shorten_args
from .leaf import FunctionCommand, LeafCommand, NamedExecutor, command, filter_partial

__all__ = [
    "CommandDispatcher",
    "FunctionCommand",
    "LeafCommand",
    "NamedExecutor",
    "command",
    "filter_partial",
    "shorten_args",
]
