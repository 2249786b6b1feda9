"""Sample extension: a tiny points economy.

Load it with:

    [pointsdispatch]
    extensions_paths = ["examples"]
    extensions = ["pointsdispatch_examples.economy"]

Balances live in memory (the "points" service); a real plugin would plug
its own storage there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pointsdispatch import CommandGroup, LeafCommand, Ok, UserError, command
from pointsdispatch.commands import filter_partial

if TYPE_CHECKING:
    from pointsdispatch import CommandApp, CommandContext, CommandResult, RootDispatcher, Sender

ADMIN_PERMISSION = "playerpoints.admin"


class Bank:
    """In-memory point balances, keyed by lower-cased player name."""

    def __init__(self) -> None:
        self.balances: dict[str, int] = {}

    def get(self, player: str) -> int:
        return self.balances.get(player.lower(), 0)

    def add(self, player: str, amount: int) -> int:
        key = player.lower()
        self.balances[key] = self.balances.get(key, 0) + amount
        return self.balances[key]

    def players(self) -> list[str]:
        return sorted(self.balances)


def _amount(value: str) -> int | None:
    try:
        amount = int(value)
    except ValueError:
        return None
    return amount if amount > 0 else None


def _complete_player(context: CommandContext, sender: Sender, args: list[str]) -> list[str]:  # noqa: ARG001
    if len(args) == 1:
        return filter_partial(args[0], context.service("points").players())
    return []


class GiveCommand(LeafCommand):
    """<player> <amount> Give points to a player."""

    permission = "playerpoints.give"

    def execute(self, context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:
        # args[1] raises IndexError when the amount is missing
        amount = _amount(args[1])
        if amount is None:
            return UserError(f"Invalid amount: {args[1]}")
        balance = context.service("points").add(args[0], amount)
        return Ok(f"{args[0]} now has {balance} points.")

    def tab_complete(self, context: CommandContext, sender: Sender, args: list[str]) -> list[str]:
        return _complete_player(context, sender, args)


class TakeCommand(LeafCommand):
    """<player> <amount> Take points from a player."""

    permission = "playerpoints.take"

    def execute(self, context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:
        amount = _amount(args[1])
        if amount is None:
            return UserError(f"Invalid amount: {args[1]}")
        bank = context.service("points")
        if bank.get(args[0]) < amount:
            return UserError(f"{args[0]} doesn't have enough points.")
        return Ok(f"{args[0]} now has {bank.add(args[0], -amount)} points.")

    def tab_complete(self, context: CommandContext, sender: Sender, args: list[str]) -> list[str]:
        return _complete_player(context, sender, args)


@command(completer=_complete_player)
def cmd_look(context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:
    """<player> Show the balance of a player."""
    return Ok(f"{args[0]} has {context.service('points').get(args[0])} points.")


@command()
def cmd_me(context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:  # noqa: ARG001
    """Show your balance."""
    return Ok(f"You have {context.service('points').get(sender.name)} points.")


@command("reset", permission=ADMIN_PERMISSION, completer=_complete_player)
def cmd_reset(context: CommandContext, sender: Sender, args: list[str]) -> CommandResult | None:
    """<player> Reset the balance of a player."""
    bank = context.service("points")
    bank.add(args[0], -bank.get(args[0]))
    return Ok(f"{args[0]}'s balance was reset.")


def _look_up_player(context: CommandContext, sender: Sender, args: list[str]) -> bool:
    """Read an unknown first token as a player name: "points steve"."""
    bank = context.service("points")
    if args[0].lower() not in bank.balances:
        return False
    context.messenger.send_raw(sender, f"{args[0]} has {bank.get(args[0])} points.")
    return True


def register(app: CommandApp, root: RootDispatcher) -> None:
    """Register the economy commands on `root`."""
    app.services.setdefault("points", Bank())

    root.register_command("give", GiveCommand())
    root.register_command("take", TakeCommand())
    root.register_command("look", cmd_look)
    root.register_command("me", cmd_me)

    admin = CommandGroup("admin", permission=ADMIN_PERMISSION, description="Administration commands.")
    admin.register_command("reset", cmd_reset)
    root.register_handler(admin)

    root.fallback = _look_up_player
