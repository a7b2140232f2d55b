# === FILE: awareness_scout/logger.py ===
"""Logging for AwarenessScout.

Everything logs under the ``AwarenessScout`` logger. Components take a child
via :func:`get_logger` (``AwarenessScout.fetcher``, ``AwarenessScout.parser``)
and inherit its handlers. Records go to stderr, since stdout carries the JSON
bundle or the digest; the CLI may add a rotating log file.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "AwarenessScout"

LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def _formatted(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Set level and handlers of the ``AwarenessScout`` logger.

    *log_file*, when given, gets a :class:`RotatingFileHandler` next to the
    stderr handler. With ``replace_handlers=False`` existing handlers stay.
    """
    project = logging.getLogger(LOGGER_NAME)
    project.setLevel(level)

    if replace_handlers:
        project.handlers.clear()

    project.addHandler(_formatted(logging.StreamHandler(sys.stderr), log_format))

    if log_file is not None:
        rotating = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        project.addHandler(_formatted(rotating, log_format))

    project.propagate = False
    return project


def init_logging(
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Called once per CLI run with the ``--log-*`` options."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


def get_logger(part: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{part}")


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "get_logger", "DEFAULT_FORMAT", "LOGGER_NAME"]
