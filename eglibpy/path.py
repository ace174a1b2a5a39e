"""Building, splitting and searching file system paths."""

from __future__ import annotations

import os
from typing import Iterator, List, Optional

_WINDOWS_SUFFIXES = (".exe", ".cmd", ".bat", ".com")


class _ProgramName:
    """Holds the program name recorded by :func:`set_prgname`."""

    def __init__(self) -> None:
        self.value: Optional[str] = None


_program = _ProgramName()


def _strip_leading(text: str, separator: str) -> str:
    while text.startswith(separator):
        text = text[len(separator):]
    return text


def _next_element(remaining: Iterator[Optional[str]], separator: str) -> Optional[str]:
    """Return the next element with leading separators removed, skipping empty ones."""
    for candidate in remaining:
        if candidate is None:
            return None
        candidate = _strip_leading(candidate, separator)
        if candidate:
            return candidate
    return None


def build_path(separator: str, *args: Optional[str]) -> str:
    """Join ``args`` with ``separator``.

    Trailing separators of each element and leading separators of every
    element but the first are collapsed; empty elements are skipped. A
    trailing separator on the last element is kept. A ``None`` element ends
    the list.
    """
    if separator is None:
        raise TypeError("separator must be a string")
    if not separator:
        raise ValueError("separator must not be empty")

    parts: List[str] = []
    remaining = iter(args)
    elem = next(remaining, None)
    while elem is not None:
        stripped = elem
        trimmed = False
        while stripped.endswith(separator):
            stripped = stripped[: -len(separator)]
            trimmed = True
        parts.append(stripped)

        following = _next_element(remaining, separator)
        if following is not None or trimmed:
            parts.append(separator)
        elem = following
    return "".join(parts)


def _last_separator(filename: str) -> int:
    positions = [filename.rfind(os.sep)]
    if os.altsep:
        positions.append(filename.rfind(os.altsep))
    return max(positions)


def path_get_dirname(filename: str) -> str:
    """Return everything before the last directory separator."""
    if filename is None:
        raise TypeError("filename must be a string")
    position = _last_separator(filename)
    if position < 0:
        return "."
    if position == 0:
        return "/"
    return filename[:position]


def path_get_basename(filename: str) -> str:
    """Return the last component of ``filename``, ignoring one trailing separator."""
    if filename is None:
        raise TypeError("filename must be a string")
    if not filename:
        return "."
    position = _last_separator(filename)
    if position < 0:
        return filename
    if position == len(filename) - 1:
        head = filename[:position]
        inner = _last_separator(head)
        if inner < 0:
            return "/"
        return head[inner + 1:]
    return filename[position + 1:]


def _is_executable(path: str) -> bool:
    return os.access(path, os.X_OK)


def find_program_in_path(program: str) -> Optional[str]:
    """Return the first executable named ``program`` in the directories of PATH.

    When PATH is unset or empty, the current directory is searched instead.
    On Windows, names without a known executable suffix are also tried with
    each suffix appended.
    """
    if program is None:
        raise TypeError("program must be a string")

    search = os.environ.get("PATH") or os.getcwd()
    on_windows = os.name == "nt"
    has_suffix = any(program.endswith(suffix) for suffix in _WINDOWS_SUFFIXES)

    for directory in filter(None, search.split(os.pathsep)):
        probe = build_path(os.sep, directory, program)
        if _is_executable(probe):
            return probe
        if on_windows and not has_suffix:
            for suffix in _WINDOWS_SUFFIXES:
                probe = build_path(os.sep, directory, program + suffix)
                if _is_executable(probe):
                    return probe
    return None


def set_prgname(prgname: Optional[str]) -> None:
    """Record a copy of the program name; ``None`` clears it."""
    if prgname is not None and not isinstance(prgname, str):
        raise TypeError("prgname must be a string or None")
    _program.value = None if prgname is None else str(prgname)


def get_prgname() -> Optional[str]:
    """Return the recorded program name, or None if none was set."""
    return _program.value