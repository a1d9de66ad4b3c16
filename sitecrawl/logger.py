# === FILE: sitecrawl/logger.py ===
"""Project logger for SiteCrawl.

Everything logs through the ``SiteCrawl`` logger. Nothing is printed until the
CLI calls :func:`init_logging`, which attaches a stdout handler and, when a
log file is given, a rotating file handler.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteCrawl"

_LevelT = Union[int, str]


def _stdout_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _drop_handlers(target: logging.Logger) -> None:
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """
    Set the level of the ``SiteCrawl`` logger and attach its handlers.

    Output always goes to stdout; *log_file* adds a rotating file (5 MB, three
    backups). With *replace_handlers* the previous handlers are closed first,
    so calling this twice does not duplicate lines.
    """
    project_logger = logging.getLogger(LOGGER_NAME)
    project_logger.setLevel(level)
    if replace_handlers:
        _drop_handlers(project_logger)

    handlers = [_stdout_handler(log_format)]
    if log_file is not None:
        handlers.append(_file_handler(log_file, log_format))
    for handler in handlers:
        project_logger.addHandler(handler)

    # records stop here; the root logger stays untouched
    project_logger.propagate = False
    return project_logger


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Shortcut used by the CLI: replace all handlers and configure."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


logger: logging.Logger = logging.getLogger(LOGGER_NAME)

__all__ = ["logger", "configure", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
