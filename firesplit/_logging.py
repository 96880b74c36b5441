"""
Structured logging (OpenTelemetry-compliant).

Records follow the OpenTelemetry Logging Data Model when written as JSON.

Usage::

    from ._logging import scoped_logger

    log = scoped_logger("protocol")
    log.debug("Growing destination buffer", extra={"capacity": 0, "required": 42})

Environment::

    FIRESPLIT_LOG_LEVEL=debug|info|warn|error|off (default: warn)
    FIRESPLIT_LOG_FORMAT=json|human (default: human if tty, json if piped)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Any

__all__ = ["logger", "setup_logging", "scoped_logger"]

_LEVEL_TO_SEVERITY = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}

_OFF = logging.CRITICAL + 10

_NAME_TO_LEVEL = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": _OFF,
}

# Attributes every LogRecord has; anything else came in through ``extra``.
_STANDARD_FIELDS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "scope", "taskName"}


def _infer_scope(logger_name: str) -> str:
    """Infer scope from logger name when not explicitly provided."""
    # Only the last component: every name starts with "firesplit".
    leaf = logger_name.rpartition(".")[2]
    if "bind" in leaf or "lib" in leaf:
        return "bindings"
    if "protocol" in leaf or "buffer" in leaf:
        return "protocol"
    if "split" in leaf and leaf != "firesplit":
        return "splitter"
    return leaf or "firesplit"


def _scope(record: logging.LogRecord) -> str:
    return getattr(record, "scope", None) or _infer_scope(record.name)


def _code_location(record: logging.LogRecord) -> tuple[str, int] | None:
    """File and line for DEBUG and ERROR-or-worse records, else None."""
    if record.levelno != logging.DEBUG and record.levelno < logging.ERROR:
        return None
    path = record.pathname
    if "firesplit/" in path:
        path = path[path.index("firesplit/") + len("firesplit/") :]
    return path, record.lineno


class JsonFormatter(logging.Formatter):
    """OpenTelemetry-compliant JSON formatter."""

    def __init__(self) -> None:
        super().__init__()
        try:
            self._version = get_version("firesplit")
        except PackageNotFoundError:
            self._version = "0.0.0"

    def format(self, record: logging.LogRecord) -> str:
        # RFC3339 timestamp, microseconds padded to nanoseconds
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        timestamp = dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{dt.microsecond * 1000:09d}Z"

        attributes: dict[str, Any] = {"scope": _scope(record)}
        attributes.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_FIELDS and not key.startswith("_")
        )
        location = _code_location(record)
        if location:
            attributes["code.filepath"], attributes["code.lineno"] = location

        return json.dumps(
            {
                "timestamp": timestamp,
                "severityText": _LEVEL_TO_SEVERITY.get(record.levelno, "INFO"),
                "body": record.getMessage(),
                "attributes": attributes,
                "resource": {"service.name": "firesplit", "service.version": self._version},
            },
            separators=(",", ":"),
            default=str,
        )


class HumanFormatter(logging.Formatter):
    """Human-readable formatter for terminal output."""

    _RESET = "\x1b[0m"
    _DIM = "\x1b[2m"
    _RED = "\x1b[31m"
    _YELLOW = "\x1b[33m"
    _CYAN = "\x1b[36m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self._use_colors = use_colors

    def _paint(self, text: str, color: str) -> str:
        if not self._use_colors or not color:
            return text
        return f"{color}{text}{self._RESET}"

    def _level_color(self, levelno: int) -> str:
        if levelno <= logging.DEBUG:
            return self._DIM
        if levelno >= logging.ERROR:
            return self._RED
        if levelno >= logging.WARNING:
            return self._YELLOW
        return ""

    def format(self, record: logging.LogRecord) -> str:
        time_str = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%H:%M:%S")
        severity = _LEVEL_TO_SEVERITY.get(record.levelno, "INFO")

        line = (
            f"{time_str} "
            + self._paint(f"{severity:<5} ", self._level_color(record.levelno))
            + self._paint(f"[{_scope(record)}] ", self._CYAN)
            + record.getMessage()
        )

        library = getattr(record, "library", None)
        if library:
            line += f" ({library})"

        location = _code_location(record)
        if location:
            line += self._paint(" [{}:{}]".format(*location), self._DIM)
        return line


def _get_log_level() -> int:
    """Get log level from environment."""
    level_name = os.environ.get("FIRESPLIT_LOG_LEVEL", "warn")
    return _NAME_TO_LEVEL.get(level_name.lower(), logging.WARNING)


def _get_log_format() -> str:
    """Get log format from environment or auto-detect."""
    fmt = os.environ.get("FIRESPLIT_LOG_FORMAT")
    if fmt:
        return fmt.lower()
    return "human" if sys.stderr.isatty() else "json"


def _create_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if _get_log_format() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(HumanFormatter(use_colors=sys.stderr.isatty()))
    return handler


# Single logger for all of firesplit
logger = logging.getLogger("firesplit")


def setup_logging(
    level: str | int | None = None,
    format: str | None = None,
) -> None:
    """
    Configure firesplit logging.

    Parameters
    ----------
    level : str or int, optional
        Log level: "DEBUG", "INFO", "WARN", "ERROR", "OFF", or a logging
        constant like ``logging.DEBUG``. If not specified, uses
        FIRESPLIT_LOG_LEVEL (default: warn).

    format : str, optional
        Log format. Either "json" or "human". If not specified,
        uses FIRESPLIT_LOG_FORMAT env var or auto-detects based on TTY.

    Examples
    --------
    Watch buffer negotiation as JSON::

        >>> import firesplit
        >>> firesplit.setup_logging("DEBUG", format="json")
    """
    if level is None:
        level = _get_log_level()
    elif isinstance(level, str):
        level = _NAME_TO_LEVEL.get(level.lower(), logging.WARNING)

    # Set format in environment for child processes
    if format:
        os.environ["FIRESPLIT_LOG_FORMAT"] = format

    logger.handlers[:] = [_create_handler()]
    logger.setLevel(level)


class _ScopedLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges call-site extra attributes with the scope."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


def scoped_logger(scope: str) -> logging.LoggerAdapter:
    """Return a logger adapter that tags every record with ``scope``."""
    return _ScopedLoggerAdapter(logger, {"scope": scope})


# Don't add a handler if the application already configured one
if not logger.handlers:
    logger.addHandler(_create_handler())
    logger.setLevel(_get_log_level())
