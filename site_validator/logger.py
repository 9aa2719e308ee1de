# === FILE: site_validator/logger.py ===
"""Project logger for SiteValidator.

Diagnostics (skipped links, run summary, debug traces of the checker) go to
the ``SiteValidator`` logger. Its console handler writes to stderr, so stdout
carries nothing but the ``[OK]`` lines; ``--log-file`` adds a rotating file.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteValidator"

_MAX_LOG_BYTES = 5 * 1024 * 1024


def _with_format(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: int | str = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Set level and handlers of the ``SiteValidator`` logger and return it.

    With *replace_handlers* the old handlers are closed first; otherwise the
    new ones are appended.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    lg.addHandler(_with_format(logging.StreamHandler(sys.stderr), log_format))
    if log_file is not None:
        rotating = RotatingFileHandler(
            str(log_file), maxBytes=_MAX_LOG_BYTES, backupCount=3, encoding="utf-8"
        )
        lg.addHandler(_with_format(rotating, log_format))

    # the root logger may print to stdout
    lg.propagate = False
    return lg


def init_logging(
    level: int | str = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
