"""Interactive console running command lines against a `CommandApp`."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import questionary
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from .constants import SHELL_EXIT_WORDS

if TYPE_CHECKING:
    from .app import CommandApp
    from .sender import Sender

__all__ = ["DispatcherCompleter", "run_shell"]


class DispatcherCompleter(Completer):
    """prompt_toolkit completer backed by the command tree."""

    def __init__(self, app: CommandApp, sender: Sender) -> None:
        self.app = app
        self.sender = sender

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:  # noqa: ARG002
        text = document.text_before_cursor
        word = document.get_word_before_cursor(WORD=True)
        for suggestion in self.app.complete_line(self.sender, text):
            yield Completion(suggestion, start_position=-len(word))


def run_shell(app: CommandApp, sender: Sender) -> None:
    """Prompt for command lines until "exit", "quit", EOF or Ctrl-C."""
    root = app.root.name
    questionary.print(f"{root} shell - 'help' lists the commands, 'exit' leaves.", style="bold fg:cyan")
    completer = DispatcherCompleter(app, sender)
    while True:
        line = questionary.text(f"{app.root.name}>", qmark="", completer=completer).ask()
        if line is None:
            break
        line = line.strip()
        if line.lower() in SHELL_EXIT_WORDS:
            break
        app.run_line(sender, line)
