"""Message delivery to senders.

The dispatcher never builds user-facing text itself: it asks a `Messenger`
to send a message identified by a key (e.g. "no-permission").
"""

from __future__ import annotations

import logging
import string
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from .ansi import colorize
from .constants import DEFAULT_MESSAGES
from .logging_setup import get_logger

if TYPE_CHECKING:
    from .sender import Sender

__all__ = ["LocaleMessenger", "Messenger"]


class Messenger(Protocol):
    """Sends keyed, templated messages to senders."""

    def format(self, key: str, prefixed: bool = True, **placeholders: Any) -> str:  # noqa: ANN401
        """Render the message `key` without sending it."""

    def send_message(self, sender: Sender, key: str, style: tuple[str, ...] | None = None, **placeholders: Any) -> None:  # noqa: ANN401
        """Send the message registered under `key` to `sender`."""

    def send_raw(self, sender: Sender, text: str, style: tuple[str, ...] | None = None) -> None:
        """Send an already formatted `text` to `sender`."""


class _KeepMissing(dict):
    """Format mapping leaving unknown placeholders untouched."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class LocaleMessenger:
    """Messenger backed by a key -> template table.

    Templates use `str.format` placeholders. The "prefix" entry is prepended
    to every keyed message.
    """

    def __init__(
        self,
        messages: Mapping[str, str] | None = None,
        colored: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.messages: dict[str, str] = dict(DEFAULT_MESSAGES)
        if messages:
            self.messages.update({str(k): str(v) for k, v in messages.items()})
        self.colored = colored
        self.log = logger or get_logger("messages")
        self._reported_missing: set[str] = set()
        self._reported_invalid: set[str] = set()

    def get_template(self, key: str) -> str:
        """Return the template for `key`, the key itself if unknown."""
        try:
            return self.messages[key]
        except KeyError:
            if key not in self._reported_missing:
                self._reported_missing.add(key)
                self.log.warning("Missing message for key %r", key)
            return key

    def format(self, key: str, prefixed: bool = True, **placeholders: Any) -> str:  # noqa: ANN401
        """Render the message `key` with its placeholders, prefixed unless `prefixed` is False."""
        template = self.get_template(key)
        try:
            body = string.Formatter().vformat(template, (), _KeepMissing(placeholders))
        except (AttributeError, IndexError, KeyError, ValueError) as e:
            if key not in self._reported_invalid:
                self._reported_invalid.add(key)
                self.log.warning("Invalid message template for key %r: %s", key, e)
            body = template
        if not prefixed:
            return body
        return self.messages.get("prefix", "") + body

    def send_message(self, sender: Sender, key: str, style: tuple[str, ...] | None = None, **placeholders: Any) -> None:  # noqa: ANN401
        self.send_raw(sender, self.format(key, **placeholders), style)

    def send_raw(self, sender: Sender, text: str, style: tuple[str, ...] | None = None) -> None:
        if self.colored and style:
            text = colorize(text, *style)
        sender.send_message(text)
