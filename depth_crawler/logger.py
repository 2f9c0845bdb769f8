# === FILE: depth_crawler/logger.py ===
"""Logging setup for **DepthCrawler**.

All modules log through one named logger::

    from depth_crawler.logger import logger
    logger.info("Crawl started")

Console output goes to stdout; a rotating log file is added when the CLI
gets ``--log-file``. Calling :func:`init_logging` again swaps the handlers.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "DepthCrawler"
LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3


def _handlers(log_file: str | Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    return handlers


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Drop the current handlers of the project logger and install fresh ones.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Optional path of a rotating log file; stdout is always used.
    log_format
        Format string for :class:`logging.Formatter`.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()

    formatter = logging.Formatter(log_format)
    for handler in _handlers(log_file):
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    # the CLI owns the output; keep records out of the root logger
    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
