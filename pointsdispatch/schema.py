"""Configuration schema for the [pointsdispatch] section."""

from .constants import DEFAULT_ROOT_COMMAND
from .validation import ConfigField, ConfigItems

__all__ = ["DISPATCHER_CONFIG_SCHEMA"]


def _validate_root_command(value: str) -> list[str]:
    if not value.strip():
        return ["must not be empty"]
    if any(char.isspace() for char in value):
        return ["must be a single word"]
    return []


DISPATCHER_CONFIG_SCHEMA = ConfigItems(
    ConfigField(
        "root_command",
        str,
        default=DEFAULT_ROOT_COMMAND,
        description="Name of the root command",
        validator=_validate_root_command,
    ),
    ConfigField("extensions", list, default=[], item_type=str, description="Extension modules to load"),
    ConfigField(
        "extensions_paths",
        list,
        default=[],
        item_type=str,
        description="Additional paths to search for extension modules",
    ),
    ConfigField(
        "disabled_commands",
        list,
        default=[],
        item_type=str,
        description="Commands to unregister, as space-separated paths (e.g. 'admin reset')",
    ),
    ConfigField("colored_messages", bool, description="Colorize messages sent to senders (auto-detected if unset)"),
    ConfigField("strict_errors", bool, default=False, description="Re-raise unexpected command errors"),
)
