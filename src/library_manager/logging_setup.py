"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_LOG_LEVEL


def parse_level(value: Union[str, int, None]) -> int:
    """Map a level name ('debug', 'INFO', ...) or number to a logging level."""
    if isinstance(value, int):
        return value
    level = getattr(logging, (value or DEFAULT_LOG_LEVEL).strip().upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value}")
    return level


def configure_logging(level: Union[str, int, None] = DEFAULT_LOG_LEVEL) -> None:
    """Send log records to stderr through rich.

    Logs go to stderr so they never interleave with the menus on stdout.
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=parse_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
