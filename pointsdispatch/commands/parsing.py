"""Docstring and command line parsing utilities."""

from __future__ import annotations

import re
import shlex

from .models import CommandArg

__all__ = ["parse_docstring", "split_command_line", "split_for_completion"]

# Regex pattern to match args: <required> or [optional]
_ARG_PATTERN = re.compile(r"([<\[])([^>\]]+)([>\]])")


def parse_docstring(docstring: str | None) -> tuple[list[CommandArg], str, str]:
    """Parse a docstring to extract arguments and descriptions.

    The first line may start with arguments like:
    "<player> <amount> Give points" or "[page] List the top players"

    Args:
        docstring: The raw docstring to parse

    Returns:
        Tuple of (args, short_description, full_description)
    """
    if not docstring:
        return [], "No description available.", ""

    full_description = docstring.strip()
    first_line = full_description.split("\n")[0].strip()

    args: list[CommandArg] = []
    last_end = 0

    for match in _ARG_PATTERN.finditer(first_line):
        # Stop at the first bracket that isn't part of the leading argument list
        if match.start() != last_end and first_line[last_end : match.start()].strip():
            break

        args.append(CommandArg(value=match.group(2), required=match.group(1) == "<"))
        last_end = match.end()

        while last_end < len(first_line) and first_line[last_end] == " ":
            last_end += 1

    if args:
        short_description = first_line[last_end:].strip() or first_line
    else:
        short_description = first_line

    return args, short_description, full_description


def split_command_line(line: str) -> list[str]:
    """Split a raw command line into tokens, honoring quotes.

    Unbalanced quotes fall back to plain whitespace splitting.
    """
    try:
        return shlex.split(line)
    except ValueError:
        return line.split()


def split_for_completion(line: str) -> list[str]:
    """Split a partial command line for completion.

    A trailing space means the user started a new, still empty, token.
    """
    tokens = split_command_line(line)
    if not line or line[-1].isspace():
        tokens.append("")
    return tokens
