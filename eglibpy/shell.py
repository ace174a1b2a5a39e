"""Splitting, quoting and unquoting of shell-style command lines."""

from __future__ import annotations

import itertools
from typing import List, Optional

_SPACE = " \t\n\v\f\r"
_DQUOTE_ESCAPABLE = '$`"\\'


class ShellError(ValueError):
    """A command line or quoted string could not be parsed."""


def _is_space(char: str) -> bool:
    return char != "" and char in _SPACE


def parse_argv(command_line: str) -> List[str]:
    """Split ``command_line`` into arguments the way a POSIX shell would."""
    if not command_line:
        raise ShellError("Text was empty")

    args: List[str] = []
    current: List[str] = []
    escaped = False
    fresh = True
    quote_char = ""

    for char, following in itertools.zip_longest(
        command_line, command_line[1:], fillvalue=""
    ):
        if escaped:
            # Inside double quotes a backslash only escapes $ ` " and \.
            if quote_char == '"':
                if char not in _DQUOTE_ESCAPABLE:
                    current.append("\\")
                current.append(char)
            elif not _is_space(char):
                current.append(char)
            escaped = False
        elif quote_char:
            if char == quote_char:
                quote_char = ""
                if fresh and (_is_space(following) or following == ""):
                    args.append("".join(current))
                    current = []
            elif char == "\\":
                escaped = True
            else:
                current.append(char)
        elif _is_space(char):
            if current:
                args.append("".join(current))
                current = []
        elif char == "\\":
            escaped = True
        elif char in "'\"":
            fresh = not current
            quote_char = char
        else:
            current.append(char)

    if escaped:
        raise ShellError("Unfinished escape.")
    if quote_char:
        raise ShellError("Unfinished quote.")
    if current:
        args.append("".join(current))
    if not args:
        raise ShellError("Text was empty")
    return args


def quote(unquoted: str) -> str:
    """Wrap ``unquoted`` in single quotes so a shell reads it back literally."""
    return "'" + unquoted.replace("'", "'\\''") + "'"


def unquote(quoted: Optional[str]) -> Optional[str]:
    """Remove shell quoting from ``quoted``."""
    if quoted is None:
        return None
    if not any(char in "'\"\\" for char in quoted):
        return quoted

    out: List[str] = []
    chars = iter(quoted)
    for char in chars:
        if char == "'":
            # Nothing is special inside single quotes, not even a backslash.
            for char in chars:
                if char == "'":
                    break
                out.append(char)
            else:
                raise ShellError("Open quote")
        elif char == '"':
            for char in chars:
                if char == '"':
                    break
                if char == "\\":
                    char = next(chars, None)
                    if char is None:
                        raise ShellError("Open quote")
                    if char not in _DQUOTE_ESCAPABLE:
                        out.append("\\")
                out.append(char)
            else:
                raise ShellError("Open quote")
        elif char == "\\":
            escaped = next(chars, None)
            if escaped is None:
                break
            if escaped not in "$\"\\`'":
                out.append("\\")
            out.append(escaped)
        else:
            out.append(char)
    return "".join(out)