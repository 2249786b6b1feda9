"""ANSI terminal color utilities.

Used by the log formatter and by the messenger when colored messages are
enabled. Honors the NO_COLOR / FORCE_COLOR environment variables and TTY
detection.
"""

import os
import re
import sys
from typing import TextIO

__all__ = [
    "BOLD",
    "DIM",
    "GREEN",
    "RED",
    "RESET",
    "YELLOW",
    "LogStyles",
    "MessageStyles",
    "colorize",
    "make_style",
    "should_colorize",
    "strip_ansi",
]

_ESC = "\x1b["

RESET = f"{_ESC}0m"

BOLD = "1"
DIM = "2"

RED = "31"
GREEN = "32"
YELLOW = "33"
CYAN = "36"

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def should_colorize(stream: TextIO | None = None) -> bool:
    """Determine if ANSI colors should be used for the given stream.

    Args:
        stream: The output stream to check. Defaults to sys.stderr.

    Returns:
        True if colors should be used, False otherwise.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, *codes: str) -> str:
    """Wrap text in ANSI color codes.

    Args:
        text: The text to colorize.
        *codes: ANSI codes to apply (e.g., RED, BOLD).
    """
    if not codes:
        return text
    return f"{_ESC}{';'.join(codes)}m{text}{RESET}"


def make_style(*codes: str) -> tuple[str, str]:
    """Create a style prefix and suffix pair for use in formatters."""
    if not codes:
        return ("", RESET)
    return (f"{_ESC}{';'.join(codes)}m", RESET)


def strip_ansi(text: str) -> str:
    """Remove every ANSI color sequence from `text`."""
    return _ANSI_PATTERN.sub("", text)


class LogStyles:
    """Pre-built styles for log levels."""

    WARNING = (YELLOW, DIM)
    ERROR = (RED, DIM)
    CRITICAL = (RED, BOLD)


class MessageStyles:
    """Pre-built styles for messages sent to command senders."""

    ERROR = (RED,)
    SUCCESS = (GREEN,)
    HEADER = (CYAN, BOLD)
    USAGE = (YELLOW,)
