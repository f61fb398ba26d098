"""Logging configuration.

Log records go to stderr through a rich handler so they never mix with
results written to stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str | int = logging.WARNING, force: bool = False) -> None:
    """Configure the package logger once (unless force=True)."""
    if getattr(setup_logging, "_configured", False) and not force:
        return

    logger = logging.getLogger("numeric_adder")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    setup_logging._configured = True  # type: ignore[attr-defined]
