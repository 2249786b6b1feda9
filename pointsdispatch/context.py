"""Context handed to every dispatch, completion and execution call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import logging

    from .config import Configuration
    from .messages import Messenger

__all__ = ["CommandContext"]


@dataclass
class CommandContext:
    """Services shared by the nodes of a command tree.

    Attributes:
        messenger: Sends keyed messages to senders
        log: Logger for command execution
        config: The dispatcher configuration section
        root_command: Name the root command is invoked with
        services: Handles to external collaborators (storage, economy...) keyed by name
    """

    messenger: Messenger
    log: logging.Logger
    config: Configuration | None = None
    root_command: str = ""
    services: dict[str, Any] = field(default_factory=dict)

    def service(self, name: str) -> Any:  # noqa: ANN401
        """Return the service registered as `name`.

        Raises:
            KeyError: no such service
        """
        return self.services[name]
