"""Command senders: who issues a command and receives the replies."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Protocol, TextIO, runtime_checkable

__all__ = ["ConsoleSender", "Sender", "permission_matches"]


@runtime_checkable
class Sender(Protocol):
    """The actor issuing a command (a player, the console...)."""

    name: str

    def has_permission(self, node: str) -> bool:
        """Return True if the sender holds the permission `node`."""

    def send_message(self, text: str) -> None:
        """Deliver `text` to the sender."""


def permission_matches(granted: str, node: str) -> bool:
    """Check whether the `granted` permission covers `node`.

    "*" covers everything and "a.b.*" covers every node below "a.b".
    """
    granted = granted.lower()
    node = node.lower()
    if granted in ("*", node):
        return True
    if granted.endswith(".*"):
        return node.startswith(granted[:-1])
    return False


class ConsoleSender:
    """A sender writing to a text stream.

    `permissions=None` grants everything, like a server console.
    """

    def __init__(self, name: str = "console", permissions: Iterable[str] | None = None, stream: TextIO | None = None) -> None:
        self.name = name
        self.permissions = None if permissions is None else frozenset(permissions)
        self.stream = stream if stream is not None else sys.stdout

    def has_permission(self, node: str) -> bool:
        if self.permissions is None:
            return True
        return any(permission_matches(granted, node) for granted in self.permissions)

    def send_message(self, text: str) -> None:
        print(text, file=self.stream)

    def __repr__(self) -> str:
        return f"ConsoleSender({self.name!r})"
