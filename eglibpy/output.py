"""Printing and leveled logging routed through replaceable handlers."""

from __future__ import annotations

import enum
import sys
from typing import Any, Callable, Optional

PrintFunc = Callable[[str], Any]
LogFunc = Callable[[Optional[str], "LogLevel", str, Any], Any]


class LogLevel(enum.IntFlag):
    """Log levels and flags; ERROR is always fatal."""

    FLAG_RECURSION = 1 << 0
    FLAG_FATAL = 1 << 1
    ERROR = 1 << 2
    CRITICAL = 1 << 3
    WARNING = 1 << 4
    MESSAGE = 1 << 5
    INFO = 1 << 6
    DEBUG = 1 << 7
    LEVEL_MASK = ERROR | CRITICAL | WARNING | MESSAGE | INFO | DEBUG


class FatalLogError(RuntimeError):
    """A message was logged at a level that is marked fatal."""

    def __init__(self, message: str, log_domain: Optional[str] = None,
                 log_level: LogLevel = LogLevel.ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.log_domain = log_domain
        self.log_level = log_level


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


class MessageSink:
    """Holds the print handlers, the log handler and the fatal mask."""

    def __init__(self) -> None:
        self._fatal = LogLevel.ERROR
        self._log_func: Optional[LogFunc] = None
        self._log_user_data: Any = None
        self._stdout_handler: Optional[PrintFunc] = None
        self._stderr_handler: Optional[PrintFunc] = None

    @property
    def fatal_mask(self) -> LogLevel:
        """The levels that currently end in FatalLogError."""
        return self._fatal

    @staticmethod
    def _default_stdout(string: str) -> None:
        sys.stdout.write(string)

    @staticmethod
    def _default_stderr(string: str) -> None:
        sys.stderr.write(string)

    def print(self, fmt: str, *args: Any) -> None:
        """Format the message printf-style and pass it to the print handler."""
        message = _format(fmt, args)
        if self._stdout_handler is None:
            self._stdout_handler = self._default_stdout
        self._stdout_handler(message)

    def printerr(self, fmt: str, *args: Any) -> None:
        """Format the message printf-style and pass it to the error handler."""
        message = _format(fmt, args)
        if self._stderr_handler is None:
            self._stderr_handler = self._default_stderr
        self._stderr_handler(message)

    def set_always_fatal(self, fatal_mask: LogLevel) -> LogLevel:
        """Add ``fatal_mask`` to the fatal levels; return the previous mask."""
        old = self._fatal
        self._fatal = LogLevel(self._fatal | fatal_mask)
        return old

    def set_fatal_mask(self, log_domain: Optional[str], fatal_mask: LogLevel) -> LogLevel:
        """Per-domain masks are not kept; ``fatal_mask`` is returned unchanged."""
        return fatal_mask

    def log(self, log_domain: Optional[str], log_level: LogLevel, fmt: str, *args: Any) -> None:
        """Format the message and pass it to the log handler."""
        if self._log_func is None:
            self._log_func = self.default_handler
        self._log_func(log_domain, log_level, _format(fmt, args), self._log_user_data)

    def assertion_message(self, fmt: str, *args: Any) -> None:
        """Log the message as an error and stop with FatalLogError."""
        message = _format(fmt, args)
        self.log(None, LogLevel.ERROR, "%s", message)
        raise FatalLogError(message, None, LogLevel.ERROR)

    def default_handler(self, log_domain: Optional[str], log_level: LogLevel,
                        message: str, user_data: Any = None) -> None:
        """Write ``domain: message`` to stdout; raise if the level is fatal."""
        prefix = f"{log_domain}: " if log_domain is not None else ""
        sys.stdout.write(f"{prefix}{message}\n")
        if log_level & self._fatal:
            sys.stdout.flush()
            sys.stderr.flush()
            raise FatalLogError(message, log_domain, log_level)

    def set_default_handler(self, log_func: Optional[LogFunc], user_data: Any = None) -> Optional[LogFunc]:
        """Install ``log_func`` with its ``user_data``; return the previous handler."""
        old = self._log_func
        self._log_func = log_func
        self._log_user_data = user_data
        return old

    def set_print_handler(self, func: Optional[PrintFunc]) -> Optional[PrintFunc]:
        """Install the print handler; return the previous one."""
        old = self._stdout_handler
        self._stdout_handler = func
        return old

    def set_printerr_handler(self, func: Optional[PrintFunc]) -> Optional[PrintFunc]:
        """Install the error print handler; return the previous one."""
        old = self._stderr_handler
        self._stderr_handler = func
        return old