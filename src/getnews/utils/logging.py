"""Logging configuration built on loguru.

The package disables its own loguru namespace on import so embedding
applications stay quiet.  Command-line entry points call
:func:`setup_logging` to route ``getnews`` records to stderr.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

DEFAULT_LOG_LEVEL: str = "INFO"

LOG_FORMAT: str = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
)


def setup_logging(
    log_level: str | None = None,
    *,
    sink: TextIO | None = None,
    log_format: str | None = None,
) -> int:
    """Replace loguru's default handler with a single stderr sink.

    Args:
        log_level: Minimum level (defaults to ``DEFAULT_LOG_LEVEL``).
        sink: Stream to write to (defaults to ``sys.stderr``).
        log_format: loguru format string (defaults to ``LOG_FORMAT``).

    Returns:
        The loguru handler id, usable with ``logger.remove``.
    """
    log_level = log_level or DEFAULT_LOG_LEVEL
    sink = sink or sys.stderr
    log_format = log_format or LOG_FORMAT

    logger.remove()
    handler_id = logger.add(
        sink,
        level=log_level,
        format=log_format,
        colorize=sink.isatty(),
        backtrace=False,
        diagnose=False,
    )
    logger.enable("getnews")
    logger.debug("Logging initialized - Level: {}", log_level)
    return handler_id
