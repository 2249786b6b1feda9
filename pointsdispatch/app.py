"""Command application: configuration, extensions and the host contract."""

from __future__ import annotations

import importlib
import os
import sys
import tomllib
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .ansi import MessageStyles, should_colorize
from .builtin_commands import register_builtin_commands
from .commands.dispatcher import CommandDispatcher
from .commands.parsing import split_command_line, split_for_completion
from .config import Configuration
from .constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILE,
    CONFIG_SECTION,
    DEFAULT_ROOT_COMMAND,
    MESSAGES_SECTION,
    STRICT_ERRORS_ENV_VAR,
)
from .context import CommandContext
from .logging_setup import get_logger
from .messages import LocaleMessenger
from .models import DispatchError
from .root import RootDispatcher
from .schema import DISPATCHER_CONFIG_SCHEMA
from .validation import ConfigValidator

if TYPE_CHECKING:
    from .sender import Sender

__all__ = ["CommandApp"]


class CommandApp:
    """Owns the root dispatcher and exposes it to the host runtime.

    The host calls `on_command` / `on_tab_complete` once per command line;
    everything else (configuration, extensions, built-in commands) is set up
    by `load_config`.
    """

    config: dict[str, Any]
    settings: Configuration
    root: RootDispatcher
    context: CommandContext

    def __init__(self, config_file: str | Path | None = None, services: dict[str, Any] | None = None) -> None:
        self.config_file = Path(os.path.expanduser(str(config_file or os.environ.get(CONFIG_ENV_VAR) or CONFIG_FILE)))
        self.log = get_logger()
        self.services: dict[str, Any] = dict(services or {})
        self.config = {}
        self.extensions: list[str] = []
        self._install({}, RootDispatcher(DEFAULT_ROOT_COMMAND))

    # Configuration

    def load_config(self) -> None:
        """(Re)load the configuration file and rebuild the command tree.

        On failure the current command tree is kept.

        Raises:
            DispatchError: the file is invalid or an extension failed to load
        """
        config = self._open_config()
        section = config.get(CONFIG_SECTION, {})
        if not isinstance(section, dict):
            self.log.critical("[%s] must be a section", CONFIG_SECTION)
            raise DispatchError
        settings = Configuration(section, logger=self.log, schema=DISPATCHER_CONFIG_SCHEMA)
        self._validate(section)

        root = RootDispatcher(settings.get_str("root_command").strip() or DEFAULT_ROOT_COMMAND)
        register_builtin_commands(root, reload=self.reload)
        self._add_extension_paths(settings.get_list("extensions_paths"))
        loaded = [name for name in settings.get_list("extensions") if self._load_extension(str(name), root)]
        self._apply_disabled_commands(root, settings.get_list("disabled_commands"))

        self.config = config
        self.extensions = loaded
        self._install(section, root)
        self.log.info("Command tree ready: %s", ", ".join(e.name for e in root.list_executables()))

    def reload(self) -> None:
        """Reload the configuration, keeping the current tree on failure."""
        self.log.info("Reloading %s", self.config_file)
        self.load_config()

    def _open_config(self) -> dict[str, Any]:
        """Read the TOML configuration file, an empty one if it doesn't exist."""
        if not self.config_file.exists():
            self.log.info("No configuration file at %s, using defaults", self.config_file)
            return {}
        self.log.info("Loading %s", self.config_file)
        with self.config_file.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                self.log.critical("Problem reading %s: %s", self.config_file, e)
                raise DispatchError from e

    def _validate(self, section: dict[str, Any]) -> list[str]:
        validator = ConfigValidator(section, CONFIG_SECTION, self.log)
        errors = validator.validate(DISPATCHER_CONFIG_SCHEMA)
        for error in errors:
            self.log.error(error)
        validator.warn_unknown_keys(DISPATCHER_CONFIG_SCHEMA)
        return errors

    def _install(self, section: dict[str, Any], root: RootDispatcher) -> None:
        """Make `root` and a context built from `section` the active ones."""
        self.settings = Configuration(section, logger=self.log, schema=DISPATCHER_CONFIG_SCHEMA)
        messages = self.config.get(MESSAGES_SECTION, {})
        if not isinstance(messages, dict):
            self.log.warning("[%s] must be a section, ignoring it", MESSAGES_SECTION)
            messages = {}
        messenger = LocaleMessenger(
            messages,
            colored=self.settings.get_bool("colored_messages", should_colorize(sys.stdout)),
            logger=get_logger("messages"),
        )
        self.root = root
        self.context = CommandContext(
            messenger=messenger,
            log=get_logger("commands"),
            config=self.settings,
            root_command=root.name,
            services=self.services,
        )

    # Extensions

    def _add_extension_paths(self, paths: Sequence[str]) -> None:
        for path in paths:
            full_path = os.path.expanduser(os.path.expandvars(str(path)))
            if full_path not in sys.path:
                sys.path.append(full_path)

    def _load_extension(self, name: str, root: RootDispatcher) -> bool:
        """Import the module `name` and let it register its commands on `root`.

        Returns:
            False if the module can't be found or doesn't look like an extension

        Raises:
            DispatchError: the extension failed while importing or registering
        """
        try:
            module = importlib.import_module(name)
            register = getattr(module, "register", None)
            if not callable(register):
                self.log.error("Extension %s has no register() function, skipping it", name)
                return False
            register(self, root)
        except ModuleNotFoundError:
            self.log.exception("Unable to locate extension called '%s'", name)
            return False
        except Exception as e:
            self.log.exception("Error loading extension %s:", name)
            raise DispatchError from e
        self.log.info("Extension %s loaded", name)
        return True

    def _apply_disabled_commands(self, root: RootDispatcher, disabled: Sequence[str]) -> None:
        """Unregister every command listed in `disabled` (space-separated paths)."""
        for entry in disabled:
            tokens = split_command_line(str(entry).lower())
            if not tokens:
                continue
            parent = root.find(tokens[:-1])
            name = tokens[-1]
            if isinstance(parent, CommandDispatcher) and name in parent.registered_handlers:
                parent.unregister_handler(name)
            elif isinstance(parent, CommandDispatcher) and name in parent.registered_commands:
                parent.unregister_command(name)
            else:
                self.log.warning("Cannot disable unknown command '%s'", entry)
                continue
            self.log.info("Command '%s' disabled", entry)

    # Host contract

    @property
    def strict_errors(self) -> bool:
        return self.settings.get_bool("strict_errors") or bool(os.environ.get(STRICT_ERRORS_ENV_VAR))

    def on_command(self, sender: Sender, command_name: str, label: str, args: Sequence[str]) -> bool:
        """Run a command line for `sender`.

        Args:
            sender: Who issued the command
            command_name: The registered command name
            label: The alias the command was invoked with
            args: Arguments following the label

        Returns:
            Always True: the command is considered handled
        """
        self.context.log.debug("%s: %s %s (%s)", sender.name, label, " ".join(args), command_name)
        try:
            self.root.dispatch(self.context, sender, list(args))
        except Exception:
            self.log.exception("%s %s failed:", label, " ".join(args))
            self.context.messenger.send_message(sender, "internal-error", style=MessageStyles.ERROR)
            if self.strict_errors:
                raise
        return True

    def on_tab_complete(self, sender: Sender, command_name: str, alias: str, args: Sequence[str]) -> list[str]:  # noqa: ARG002
        """Return completion suggestions for the last of `args`."""
        try:
            return self.root.complete(self.context, sender, list(args))
        except Exception:
            self.log.exception("Completion of %s %s failed:", alias, " ".join(args))
            if self.strict_errors:
                raise
            return []

    def run_line(self, sender: Sender, line: str) -> bool:
        """Run a raw command line, without the root command name."""
        return self.on_command(sender, self.root.name, self.root.name, split_command_line(line))

    def complete_line(self, sender: Sender, line: str) -> list[str]:
        """Complete a raw, partial command line, without the root command name."""
        return self.on_tab_complete(sender, self.root.name, self.root.name, split_for_completion(line))
