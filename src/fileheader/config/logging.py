# topmark:header:start
#
#   project      : FileHeader
#   file         : logging.py
#   file_relpath : src/fileheader/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom FileHeader logging with TRACE logging.

This module extends the standard logging module with a TRACE level below DEBUG,
a logger class exposing ``trace()``, and colored output formatting. The check
stages log their decisions at TRACE so a full offset-by-offset account of a run
is available without cluttering DEBUG output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from fileheader.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import TextIO

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class FileheaderLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(FileheaderLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

# Checked top-down; the first threshold at or below the record level wins
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``FILEHEADER_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names (``TRACE``, ``debug``, ...) and numeric levels (``"10"``).
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None, stream: TextIO | None = None) -> None:
    """Configure the root logger with a colored handler.

    Args:
        level (int | None): Log level; if None, `resolve_env_log_level` is
            consulted, defaulting to CRITICAL.
        stream (TextIO | None): Destination stream; defaults to ``sys.stderr`` so
            that program output on stdout stays parseable.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> FileheaderLogger:
    """Return the `FileheaderLogger` named ``name``.

    Args:
        name (str): Logger name, normally ``__name__``.

    Returns:
        FileheaderLogger: The logger.
    """
    return cast("FileheaderLogger", logging.getLogger(name))
