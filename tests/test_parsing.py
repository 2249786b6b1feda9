"""Tests for docstring and command line parsing."""

from pointsdispatch.commands.models import CommandArg, CommandInfo
from pointsdispatch.commands.parsing import parse_docstring, split_command_line, split_for_completion


class TestParseDocstring:
    """Tests for parse_docstring function."""

    def test_required_args(self):
        args, short, full = parse_docstring("<player> <amount> Give points to a player.")
        assert args == [CommandArg("player", True), CommandArg("amount", True)]
        assert short == "Give points to a player."
        assert full == "<player> <amount> Give points to a player."

    def test_optional_arg(self):
        args, short, _ = parse_docstring("[page] Show the leaderboard")
        assert args == [CommandArg("page", False)]
        assert short == "Show the leaderboard"

    def test_no_args(self):
        args, short, full = parse_docstring("Show your balance.")
        assert args == []
        assert short == "Show your balance."
        assert full == "Show your balance."

    def test_brackets_after_text_are_not_args(self):
        args, short, _ = parse_docstring("Reset <all> balances")
        assert args == []
        assert short == "Reset <all> balances"

    def test_empty_docstring(self):
        args, short, full = parse_docstring("")
        assert args == []
        assert short == "No description available."
        assert full == ""
        assert parse_docstring(None)[1] == "No description available."

    def test_multiline_docstring(self):
        args, short, full = parse_docstring("<player> Look up a player.\n\nShows the balance.")
        assert [a.value for a in args] == ["player"]
        assert short == "Look up a player."
        assert "Shows the balance." in full

    def test_arg_only(self):
        args, short, _ = parse_docstring("<player>")
        assert len(args) == 1
        assert short == "<player>"


def test_usage():
    info = CommandInfo(
        name="give",
        path=["points", "give"],
        args=[CommandArg("player", True), CommandArg("amount", False)],
        short_description="",
        full_description="",
    )
    assert info.usage == "points give <player> [amount]"


def test_group_usage():
    child = CommandInfo("reset", ["points", "admin", "reset"], [], "", "")
    other = CommandInfo("set", ["points", "admin", "set"], [], "", "")
    group = CommandInfo("admin", ["points", "admin"], [], "", "", is_group=True, children=[child, other])
    assert group.usage == "points admin <reset|set>"


def test_split_command_line():
    assert split_command_line("give bob 10") == ["give", "bob", "10"]
    assert split_command_line('broadcast "hello world"') == ["broadcast", "hello world"]
    assert split_command_line("  ") == []


def test_split_unbalanced_quotes():
    assert split_command_line('say "oops') == ["say", '"oops']


def test_split_for_completion():
    assert split_for_completion("") == [""]
    assert split_for_completion("gi") == ["gi"]
    assert split_for_completion("give ") == ["give", ""]
    assert split_for_completion("give bo") == ["give", "bo"]
