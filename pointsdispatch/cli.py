"""pointsdispatch command line tool."""

import os
import sys

from .app import CommandApp
from .logging_setup import get_logger, init_logger
from .models import DispatchError, ExitCode
from .sender import ConsoleSender

__all__ = ["main"]


def use_param(txt: str) -> str:
    """Check if parameter `txt` is in sys.argv.

    If found, removes it from sys.argv & returns the argument value.
    """
    if txt not in sys.argv:
        return ""
    i = sys.argv.index(txt)
    if i + 1 >= len(sys.argv):
        print(f"{txt} requires a value", file=sys.stderr)
        sys.exit(ExitCode.USAGE_ERROR)
    v = sys.argv[i + 1]
    del sys.argv[i : i + 2]
    return v


def use_flag(txt: str) -> bool:
    """Remove the flag `txt` from sys.argv, returning True if it was there."""
    if txt in sys.argv:
        sys.argv.remove(txt)
        return True
    return False


def main() -> None:
    """Run the command."""
    log_file = use_param("--log")
    init_logger(filename=log_file or None, force_debug=use_flag("--debug"))
    log = get_logger("startup")

    config_override = use_param("--config")
    restricted = "--permissions" in sys.argv
    permissions = use_param("--permissions")
    complete = use_flag("--complete")

    # an empty list grants nothing, no list at all grants everything
    sender = ConsoleSender(permissions=[p.strip() for p in permissions.split(",") if p.strip()] if restricted else None)
    app = CommandApp(config_file=config_override or None)
    args = sys.argv[1:]

    try:
        app.load_config()
        if complete:
            for suggestion in app.on_tab_complete(sender, app.root.name, app.root.name, args or [""]):
                print(suggestion)
        elif args:
            app.on_command(sender, app.root.name, app.root.name, args)
        else:
            from .shell import run_shell  # pylint: disable=import-outside-toplevel

            run_shell(app, sender)
    except KeyboardInterrupt:
        pass
    except DispatchError:
        log.critical("Command failed.")
        sys.exit(ExitCode.COMMAND_ERROR)
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        if os.environ.get("DEBUG"):
            raise
        sys.exit(ExitCode.COMMAND_ERROR)
    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
