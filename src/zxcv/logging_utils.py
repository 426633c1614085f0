"""Logging setup for the ``zxcv`` command.

Diagnostics are written to stderr as ``zxcv: message`` lines, with the level
spelled out for warnings and errors, because stdout may carry rendered text.
Only the ``zxcv`` logger hierarchy is configured, so libraries stay quiet
unless ``--trace`` is given, which also shows the HTTP client's request log
in a timestamped format.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "zxcv"

# Loggers of the HTTP stack that --trace attaches to as well
HTTP_LOGGERS = ("httpx", "httpcore")

TRACE_FORMAT = "%(relativeCreated)9.1fms %(levelname)-7s %(name)s: %(message)s"

_HANDLER_NAME = "zxcv-cli"


class CommandFormatter(logging.Formatter):
    """Format records the way command line tools report problems.

    Examples
    --------
        >>> record = logging.makeLogRecord({"msg": "no title", "levelno": logging.WARNING, "levelname": "WARNING"})
        >>> CommandFormatter().format(record)
        'zxcv: warning: no title'

    """

    def __init__(self) -> None:
        """Initialize the formatter with the bare message format."""
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        """Prefix the formatted message with the program name and, from WARNING up, the level."""
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            return f"{PACKAGE_LOGGER}: {record.levelname.lower()}: {message}"
        return f"{PACKAGE_LOGGER}: {message}"


def resolve_level(level: int | str) -> int:
    """Return the numeric level for a level name, WARNING for unknown names."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def _detach(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace: bool = False,
) -> logging.Logger:
    """Send the log records of zxcv to stderr and optionally to a file.

    Calling it again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name; ignored in trace mode, which
        always logs at DEBUG
    log_file : str, optional
        File to append log records to as well
    trace : bool, default False
        Use the timestamped trace format and include the HTTP client's logs

    Returns
    -------
    logging.Logger
        The ``zxcv`` package logger

    """
    level = logging.DEBUG if trace else resolve_level(log_level)
    formatter = logging.Formatter(TRACE_FORMAT) if trace else CommandFormatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            file_error = e

    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for name in (PACKAGE_LOGGER, *HTTP_LOGGERS):
        logger = logging.getLogger(name)
        _detach(logger)
        if logger is package_logger or trace:
            logger.setLevel(level)
            for handler in handlers:
                logger.addHandler(handler)
        else:
            logger.setLevel(logging.NOTSET)

    if file_error is not None:
        package_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        package_logger.debug("Logging to file: %s", log_file)

    return package_logger
