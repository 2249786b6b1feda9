"""Data models describing commands for help output."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["CommandArg", "CommandInfo"]


@dataclass
class CommandArg:
    """An argument parsed from a command's docstring."""

    value: str  # e.g., "player" or "add|remove"
    required: bool  # True for <arg>, False for [arg]


@dataclass
class CommandInfo:
    """Help information about a leaf command or a command group."""

    name: str
    path: list[str]
    args: list[CommandArg]
    short_description: str
    full_description: str
    is_group: bool = False
    children: list[CommandInfo] = field(default_factory=list)

    @property
    def usage(self) -> str:
        """Return the usage line, e.g. "points give <player> <amount>"."""
        parts = list(self.path)
        if self.is_group and self.children:
            parts.append("<" + "|".join(child.name for child in self.children) + ">")
        for arg in self.args:
            parts.append(f"<{arg.value}>" if arg.required else f"[{arg.value}]")
        return " ".join(parts)
