"""Tests for the help output, the concrete dispatchers and the built-in commands."""

from unittest.mock import Mock

import pytest

from pointsdispatch.builtin_commands import register_builtin_commands
from pointsdispatch.commands import command
from pointsdispatch.commands.discovery import describe, iter_commands
from pointsdispatch.help import get_command_help, get_listing
from pointsdispatch.models import DispatchError, Ok
from pointsdispatch.root import CommandGroup, RootDispatcher
from pointsdispatch.version import VERSION
from testtools import RecordingLeaf


class ResetCommand(RecordingLeaf):
    """<player> Reset the balance of a player.

    The player keeps their history.
    """


@pytest.fixture
def reload():
    return Mock()


@pytest.fixture
def root(reload):
    root = RootDispatcher("points")
    register_builtin_commands(root, reload=reload)
    root.register_command("give", RecordingLeaf(permission="playerpoints.give"))
    admin = CommandGroup("admin", permission="playerpoints.admin", description="Administration commands")
    admin.register_command("reset", ResetCommand())
    root.register_handler(admin)
    return root


def test_listing(root, real_context, sender):
    assert get_listing(real_context.messenger, root, sender) == [
        "[Points] Available commands:",
        "  points admin <reset> - Administration commands",
        "  points give <player> - A leaf recording its calls.",
        "  points help [command] - Show the available commands or the details of one.",
        "  points reload - Reload the configuration file.",
        "  points version - Show the version.",
    ]


def test_listing_hides_forbidden_commands(root, real_context, guest):
    assert get_listing(real_context.messenger, root, guest) == [
        "[Points] Available commands:",
        "  points help [command] - Show the available commands or the details of one.",
        "  points version - Show the version.",
    ]


class TestCommandHelp:
    def test_leaf(self, root, real_context, sender):
        assert get_command_help(real_context.messenger, root, ["admin", "reset"], sender) == [
            "points admin reset <player>",
            "Reset the balance of a player.",
            "The player keeps their history.",
        ]

    def test_group(self, root, real_context, sender):
        assert get_command_help(real_context.messenger, root, ["ADMIN"], sender) == [
            "[Points] Available commands:",
            "  points admin reset <player> - Reset the balance of a player.",
        ]

    def test_unknown(self, root, real_context, sender):
        messenger = real_context.messenger
        assert get_command_help(messenger, root, ["nope"], sender) == ["[Points] No help available for 'nope'."]
        assert get_command_help(messenger, root, ["give", "bob"], sender) == ["[Points] No help available for 'give bob'."]

    def test_forbidden_is_unknown(self, root, real_context, guest):
        assert get_command_help(real_context.messenger, root, ["admin", "reset"], guest) == [
            "[Points] No help available for 'admin reset'."
        ]


class TestRootDispatcher:
    def test_no_args_runs_help(self, root, real_context, sender):
        root.dispatch(real_context, sender, [])
        assert sender.messages == get_listing(real_context.messenger, root, sender)

    def test_no_args_without_help(self, real_context, sender):
        root = RootDispatcher("points")
        root.register_command("give", RecordingLeaf())
        root.dispatch(real_context, sender, [])
        assert sender.messages == [
            "[Points] Available commands:",
            "  points give <player> - A leaf recording its calls.",
        ]

    def test_unknown_command(self, root, real_context, sender):
        root.dispatch(real_context, sender, ["nope", "x"])
        assert sender.messages == ["[Points] Unknown command: nope. Use 'points help' for a list of commands."]

    def test_fallback_handles_unknown_tokens(self, root, real_context, sender):
        root.fallback = Mock(return_value=True)
        root.dispatch(real_context, sender, ["Bob"])
        root.fallback.assert_called_once_with(real_context, sender, ["Bob"])
        assert sender.messages == []

    def test_fallback_declines(self, root, real_context, sender):
        root.fallback = Mock(return_value=False)
        root.dispatch(real_context, sender, ["bob"])
        assert sender.messages == ["[Points] Unknown command: bob. Use 'points help' for a list of commands."]

    def test_fallback_not_used_for_known_commands(self, root, real_context, sender):
        root.fallback = Mock(return_value=True)
        root.dispatch(real_context, sender, ["version"])
        root.fallback.assert_not_called()


class TestCommandGroup:
    def test_no_args_lists_children(self, root, real_context, sender):
        root.dispatch(real_context, sender, ["admin"])
        assert sender.messages == [
            "[Points] Available commands:",
            "  points admin reset <player> - Reset the balance of a player.",
        ]

    def test_unknown_subcommand(self, root, real_context, sender):
        root.dispatch(real_context, sender, ["admin", "wipe"])
        assert sender.messages == ["[Points] Unknown command: wipe. Use 'points help' for a list of commands."]

    def test_default_help_text(self):
        assert CommandGroup("admin").help_text.startswith("A group of subcommands.")


class TestBuiltins:
    def test_help_command(self, root, real_context, sender):
        root.dispatch(real_context, sender, ["help", "give"])
        assert sender.messages == ["points give <player>", "A leaf recording its calls."]

    def test_help_completion(self, root, real_context, sender):
        assert root.complete(real_context, sender, ["help", "ad"]) == ["admin"]
        assert root.complete(real_context, sender, ["help", "admin", "r"]) == ["reset"]

    def test_version(self, root, real_context, sender):
        root.dispatch(real_context, sender, ["version"])
        assert sender.messages == [f"[Points] pointsdispatch version {VERSION}"]

    def test_reload(self, root, reload, real_context, sender):
        root.dispatch(real_context, sender, ["reload"])
        reload.assert_called_once_with()
        assert sender.messages == ["[Points] Configuration reloaded."]

    def test_reload_failure(self, root, reload, real_context, sender):
        reload.side_effect = DispatchError
        root.dispatch(real_context, sender, ["reload"])
        assert sender.messages == ["[Points] Configuration reload failed, check the logs."]

    def test_reload_needs_permission(self, root, reload, real_context, guest):
        root.dispatch(real_context, guest, ["reload"])
        reload.assert_not_called()
        assert guest.messages == ["[Points] You don't have permission for that!"]

    def test_no_reload_without_callback(self):
        root = RootDispatcher("points")
        register_builtin_commands(root)
        assert sorted(root.registered_commands) == ["help", "version"]


def test_function_command(real_context, sender):
    @command(permission="playerpoints.look")
    def cmd_look(context, sender, args):
        """<player> Show the balance of a player."""
        return Ok(f"{args[0]} has 10 points")

    assert cmd_look.name == "look"
    assert cmd_look.permission == "playerpoints.look"
    root = RootDispatcher("points")
    root.register_command(cmd_look.name, cmd_look)
    root.dispatch(real_context, sender, ["look", "bob"])
    assert sender.messages == ["bob has 10 points"]
    assert describe(cmd_look, ["points", "look"]).usage == "points look <player>"


def test_iter_commands(root, guest, sender):
    assert [info.usage for info in iter_commands(root, sender)] == [
        "points admin reset <player>",
        "points give <player>",
        "points help [command]",
        "points reload",
        "points version",
    ]
    assert [info.name for info in iter_commands(root, guest)] == ["help", "version"]
