"""Logging configuration for editor-autosave."""

import sys
from typing import TextIO

from loguru import logger


def configure_logging(*, verbose: bool = False, sink: TextIO | None = None) -> None:
    """Send loguru output to sink (stderr by default).

    Debug output carries timestamps, since auto-saves happen on a timer.
    """
    logger.remove()
    if verbose:
        logger.add(sink or sys.stderr, level="DEBUG", format="{time:HH:mm:ss} {level.icon} {message}")
    else:
        logger.add(sink or sys.stderr, level="INFO", format="{level.icon} {message}")
