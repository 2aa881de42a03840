"""Logging utilities for wpfind.

Stdlib logging routed through ``rich``, with every traversal message stamped
with the time elapsed since the search started.
"""

from __future__ import annotations

import logging
import time
from typing import Any, MutableMapping, Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "wpfind"

__all__ = [
    "ElapsedLogger",
    "configure_logging",
    "format_elapsed",
    "get_logger",
]


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def format_elapsed(seconds: float) -> str:
    """Format a duration as ``H:MM:SS``."""
    total = int(max(0.0, seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


class ElapsedLogger(logging.LoggerAdapter):
    """Prefix messages with ``[H:MM:SS]`` measured from ``start``."""

    def __init__(self, logger: logging.Logger, start: Optional[float] = None) -> None:
        super().__init__(logger, {})
        self.start = time.monotonic() if start is None else start

    def elapsed(self) -> float:
        return time.monotonic() - self.start

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        return f"[{format_elapsed(self.elapsed())}] {msg}", kwargs


def configure_logging(
    console: Console, *, verbose: bool = False, debug: bool = False
) -> logging.Logger:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = get_logger()
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = RichHandler(console=console, show_time=False, show_level=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
