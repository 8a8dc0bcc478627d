"""Centralised logging configuration for datez.

Logs go to stderr through a Rich handler; stdout is reserved for the
converted times.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from core.config import VALID_LOG_LEVELS

LOG_FORMAT = "[%(name)s] %(message)s"

_stderr_handler: RichHandler | None = None
_configured = False


def configure_logging(console_level: str | None = None) -> None:
    """Attach a stderr `RichHandler` to the root logger.

    The ``LOG_LEVEL`` environment variable takes precedence over
    *console_level*; ``"WARNING"`` is used when neither is valid.

    Safe to call more than once (duplicate handlers are skipped).
    """
    global _stderr_handler, _configured  # noqa: PLW0603

    if _configured:
        set_stderr_level(console_level or "WARNING")
        return

    env_level = os.environ.get("LOG_LEVEL", "").upper()
    if env_level in VALID_LOG_LEVELS:
        effective_level = env_level
    elif console_level and console_level.upper() in VALID_LOG_LEVELS:
        effective_level = console_level.upper()
    else:
        effective_level = "WARNING"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    _stderr_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    _stderr_handler.setLevel(getattr(logging, effective_level))
    _stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_stderr_handler)

    _configured = True


def set_stderr_level(level_name: str) -> None:
    """Change the stderr handler log level at runtime."""
    if _stderr_handler is None:
        return
    upper = level_name.upper()
    if os.environ.get("LOG_LEVEL", "").upper() in VALID_LOG_LEVELS:
        return
    if upper in VALID_LOG_LEVELS:
        _stderr_handler.setLevel(getattr(logging, upper))
