"""Logging configuration for git-track-time.

Log records go to stderr through rich so that stdout stays reserved for the
report itself (and, in JSON mode, for nothing but the JSON document).
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "git_track_time"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger with a rich handler on stderr.

    Args:
        debug: Enable DEBUG level logging instead of WARNING

    Returns:
        The configured ``git_track_time`` logger
    """
    level = logging.DEBUG if debug else logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_time=debug,
        show_path=debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``git_track_time`` namespace."""
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
