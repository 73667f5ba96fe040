"""Logging configuration for oas_proptypes.

Modules obtain their logger through :func:`get_logger`; the CLI calls
:func:`configure_logging` once to attach a handler to the package logger.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER_NAME = "oas_proptypes"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Standard library logger. Nothing is emitted until a handler is
        configured, since the package logger only carries a NullHandler.
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.WARNING,
    rich_output: bool = True,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a single handler to the package logger.

    Args:
        level: Logging level (name or number).
        rich_output: Use a ``RichHandler`` instead of a plain stream handler.
        console: Console for the rich handler (defaults to stderr).

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    # Replace whatever a previous call installed
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())
