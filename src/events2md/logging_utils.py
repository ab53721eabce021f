#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/logging_utils.py
"""Logging setup for the events2md command line.

Library modules only create module loggers (``logging.getLogger(__name__)``),
which all live under the ``events2md`` namespace. The CLI attaches handlers to
that namespace logger rather than to the root logger, so embedding
applications keep control of their own logging configuration.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "events2md"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_FORMAT = "events2md: %(levelname)s: %(message)s"
# --trace adds timestamps and the emitting module and line
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so reconfiguring replaces them
_HANDLER_MARKER = "_events2md_handler"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    name = str(log_level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, name)


def _remove_installed_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()


def _install(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    setattr(handler, _HANDLER_MARKER, True)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str = "WARNING",
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure the ``events2md`` logger for a command-line run.

    Calling this again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int or str, default "WARNING"
        Numeric level or one of ``LOG_LEVELS`` (case-insensitive)
    log_file : str, optional
        Also append log records to this file. A file that cannot be opened is
        reported as a warning and skipped.
    trace_mode : bool, default False
        Log at DEBUG level (or lower, if requested) using ``TRACE_FORMAT``

    Returns
    -------
    logging.Logger
        The configured ``events2md`` logger

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    level = _resolve_level(log_level)
    if trace_mode:
        level = min(level, logging.DEBUG)
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_installed_handlers(logger)
    logger.setLevel(level)
    logger.propagate = False

    _install(logger, logging.StreamHandler(sys.stderr), formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not open log file {log_file}: {e}")
        else:
            _install(logger, file_handler, formatter)
            logger.debug(f"Logging to file: {log_file}")

    return logger
