"""Shared constants for pointsdispatch."""

import os
from pathlib import Path

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILE",
    "CONFIG_SECTION",
    "DEFAULT_MESSAGES",
    "DEFAULT_ROOT_COMMAND",
    "MESSAGES_SECTION",
    "RELOAD_PERMISSION",
    "SHELL_EXIT_WORDS",
    "STRICT_ERRORS_ENV_VAR",
]

_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "pointsdispatch" / "config.toml"

CONFIG_ENV_VAR = "POINTSDISPATCH_CONFIG"
STRICT_ERRORS_ENV_VAR = "POINTSDISPATCH_STRICT_ERRORS"

CONFIG_SECTION = "pointsdispatch"
MESSAGES_SECTION = "messages"

DEFAULT_ROOT_COMMAND = "points"

RELOAD_PERMISSION = "pointsdispatch.reload"

SHELL_EXIT_WORDS = frozenset({"exit", "quit"})

# Message keys used by the dispatcher core and the built-in commands.
# Every entry can be overridden from the [messages] configuration section.
DEFAULT_MESSAGES: dict[str, str] = {
    "prefix": "[Points] ",
    "no-permission": "You don't have permission for that!",
    "unknown-command": "Unknown command: {cmd}. Use '{root} help' for a list of commands.",
    "command-error": "An error occurred while executing that command. Did you enter an invalid parameter?",
    "internal-error": "An internal error occurred while executing that command.",
    "help-header": "Available commands:",
    "help-entry": "  {usage} - {description}",
    "help-unknown": "No help available for '{cmd}'.",
    "version": "pointsdispatch version {version}",
    "reload-success": "Configuration reloaded.",
    "reload-failed": "Configuration reload failed, check the logs.",
}
