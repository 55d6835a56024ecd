"""Pluggable message logging with severity levels."""

import sys
from collections.abc import Callable
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a log message."""

    INFO = 0
    WARN = 1
    ERROR = 2


LogFunction = Callable[[LogLevel, str], None]


def log_level_to_string(level: int) -> str:
    """Upper-case name of ``level``, or ``UNKNOWN`` for an unrecognised value."""
    try:
        return {LogLevel.INFO: "INFO", LogLevel.WARN: "WARN", LogLevel.ERROR: "ERROR"}[LogLevel(level)]
    except ValueError:
        return "UNKNOWN"


def _print_message(level: LogLevel, message: str) -> None:
    print(f"[{log_level_to_string(level)}] {message}", file=sys.stdout)


_callback: LogFunction = _print_message


def set_log_callback(callback: LogFunction | None) -> None:
    """Route log messages to ``callback``; ``None`` restores printing to stdout."""
    global _callback
    _callback = callback if callback is not None else _print_message


def log_msg(level: LogLevel, fmt: str, *args: object) -> None:
    """Format ``fmt`` with ``args`` printf-style and pass it to the current callback."""
    message = fmt % args if args else fmt
    _callback(level, message)