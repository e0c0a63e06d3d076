"""Logging helpers for selrange."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["setup_logging", "get_logger"]

_CONFIGURED = False


def setup_logging(
    level: int = logging.WARNING,
    *,
    console: Console | None = None,
    force: bool = False,
) -> None:
    """Configure root logging with a rich console handler on stderr."""

    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))

    logging.basicConfig(level=level, handlers=[handler], force=True)
    logging.captureWarnings(True)
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)
