# directions/infra/logging.py
# -*- coding: utf-8 -*-

"""
Logging setup for entry points, plus the logger accessor used everywhere.

Library modules only do `_log = get_logger(__name__)`; the CLI (or a host
application) calls `init_logging()` once.

Environment
-----------
- DIRECTIONS_LOG_LEVEL, if set, wins over the `level` argument.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

# [YYYY-MM-DD HH:MM:SS][LEVEL][logger.name] message
_FORMAT = "[{asctime}][{levelname}][{name}] {message}"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def init_logging(
      level: str = "INFO"
    , *
    , force: bool = True
    , log_file: Optional[Union[str, Path]] = None
) -> None:
    """
    Configure the root logger with a stdout handler.

    Parameters
    ----------
    level : str
        "DEBUG", "INFO", "WARNING", "ERROR"; unknown names fall back to INFO.
    force : bool
        Drop handlers already installed on the root logger first.
    log_file : str | Path | None
        Also append to this file (parent directories are created).
    """
    level = os.getenv("DIRECTIONS_LOG_LEVEL") or level

    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT, style="{")
    handlers: list[logging.Handler] = [logging.StreamHandler(stream=sys.stdout)]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    get_logger(__name__).info("Logging configured%s", f" (file: {log_file})" if log_file else "")


def log_banner(log: logging.Logger, msg: str, *, char: str = "=", width: int = 60) -> None:
    """Log `msg` between two bars of `char`."""
    bar = char * width
    log.info(bar)
    log.info(msg)
    log.info(bar)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """logging.getLogger wrapper; keeps the backend swappable in one place."""
    return logging.getLogger(name if name is not None else __name__)
