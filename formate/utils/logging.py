from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "formate"


def setup_logger(level: str = "WARNING") -> logging.Logger:
    """Route the package logger to stderr through rich.

    Safe to call more than once: later calls only change the level. stdout is
    left alone because it carries the reformatted text.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        console = Console(stderr=True, highlight=False)
        handler = RichHandler(console=console, show_time=False, show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or LOGGER_NAME)
