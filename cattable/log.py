"""
Trace logging for hierarchical tables.

This module extends Python's standard logging with:
- A custom TRACE level below DEBUG for step-by-step lookup output
- A Logger that carries structured extra fields on each record
- A formatter that renders those fields after the message

Tables never require a logger. Any object with a ``trace(msg, extra=...)``
method can be injected through TableFactory; create_trace_logger() builds the
default one used when TableConfig.log is enabled.
"""

import logging
import sys
from typing import Any

from .constants import TableConstants

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVEL_NAMES: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

DEFAULT_FORMAT = "[%(asctime)s] [%(levelname).1s] %(message)s"

# Record attribute holding the structured fields passed through extra=
_EXTRA_ATTR = "__cattable__extra"


class InvalidLogLevelError(ValueError):
    """Raised when an invalid log level is specified."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid log level: {level}")


def resolve_level(level: str | int) -> int:
    """
    Resolve a level name or number to a numeric log level.

    Args:
        level: Level name (e.g. "trace", "debug"), numeric string, or int

    Returns:
        int: Numeric log level

    Raises:
        InvalidLogLevelError: If the level name is unknown
    """
    if isinstance(level, bool):
        raise InvalidLogLevelError(level)
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        if level.isnumeric():
            return int(level)
        if level.lower() in LEVEL_NAMES:
            return LEVEL_NAMES[level.lower()]
    raise InvalidLogLevelError(level)


class Logger(logging.Logger):
    """
    Logger with a trace() method and structured extra fields.

    Extra fields passed with ``extra={...}`` are kept together on the record
    so FieldFormatter can render them after the message.
    """

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log a TRACE level message.

        Args:
            msg: Log message
            *args: Message format arguments
            **kwargs: Additional keyword arguments including 'extra' for structured data
        """
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: str,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create log record and attach the extra fields as one mapping."""
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, extra, sinfo
        )
        # Use setattr to avoid Python name mangling with __ prefix
        setattr(record, _EXTRA_ATTR, dict(extra or {}))
        return record


class FieldFormatter(logging.Formatter):
    """
    Formatter that appends structured fields as ``key[value]`` pairs.

    Example output:
        [2026-10-17 12:00:00,000] [T] cache hit field[port] category[_net]
    """

    def __init__(self, fmt: str = DEFAULT_FORMAT) -> None:
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, then append its extra fields."""
        text = super().format(record)
        fields = getattr(record, _EXTRA_ATTR, None)
        if not fields:
            return text
        rendered = " ".join(f"{key}[{value}]" for key, value in fields.items())
        return f"{text} {rendered}"


def create_trace_logger(
    name: str = TableConstants.LOGGER_NAME,
    level: str | int = TRACE,
    stream: Any | None = None,
) -> Logger:
    """
    Create a standalone logger that writes trace output to a stream.

    The logger is not registered with the logging manager, so it never
    propagates to (or is affected by) the application's root logger.

    Args:
        name: Logger name
        level: Minimum level to emit (name or number)
        stream: Output stream (defaults to sys.stderr)

    Returns:
        Logger: Configured logger
    """
    resolved = resolve_level(level)
    lg = Logger(name, resolved)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(FieldFormatter())
    lg.addHandler(handler)
    lg.propagate = False
    return lg
