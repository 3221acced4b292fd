"""Logging setup for the npuzzle package.

Library modules only create loggers; handlers are installed by ``setup_logging``
(called from the CLI), so embedding hosts keep control of their own output.
"""
from __future__ import annotations
import logging
import sys
from typing import Optional

ROOT_NAME = "npuzzle"
FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = ROOT_NAME) -> logging.Logger:
    """Return a logger inside the ``npuzzle`` hierarchy."""
    if name != ROOT_NAME and not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Attach a console handler (and optionally a file handler) to the package logger."""
    logger = logging.getLogger(ROOT_NAME)
    logger.setLevel(level)
    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)

    # avoid duplicate handlers when called twice
    if not any(getattr(h, "_npuzzle_console", False) for h in logger.handlers):
        console = logging.StreamHandler(sys.stderr)
        console._npuzzle_console = True  # type: ignore[attr-defined]
        console.setFormatter(formatter)
        logger.addHandler(console)
    for h in logger.handlers:
        h.setLevel(level)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
    return logger
