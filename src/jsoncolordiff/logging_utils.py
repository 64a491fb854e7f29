#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the jsoncolordiff command.

The diff itself is written to stdout, so log records always go to a separate
stream (stderr by default) and optionally to a log file. ``--trace`` switches
to a timestamped format that names the emitting module, which is how the
classification and context-line debug messages of :mod:`jsoncolordiff.diff`
are meant to be read.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from jsoncolordiff.constants import LOG_FORMAT, LOG_LEVELS, TRACE_DATE_FORMAT, TRACE_LOG_FORMAT


def resolve_log_level(log_level: int | str, trace_mode: bool = False) -> int:
    """Turn a level name or number into a numeric logging level.

    Trace mode always resolves to ``DEBUG``. Unknown names fall back to
    ``INFO``.
    """
    if trace_mode:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    name = str(log_level).upper()
    if name not in LOG_LEVELS:
        return logging.INFO
    return logging.getLevelName(name)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Route log records away from the diff output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or one of ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Log everything at ``DEBUG`` with timestamps and module names
    stream : TextIO, optional
        Console stream for log records; ``sys.stderr`` when omitted

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    resolved_level = resolve_log_level(log_level, trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_LOG_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.debug("Appending log records to %s", log_file)

    if trace_mode:
        root_logger.debug("Trace logging enabled")

    return root_logger
