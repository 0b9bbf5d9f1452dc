"""Tests for logging configuration."""

import io

from loguru import logger

from editor_autosave.logging_config import configure_logging


def test_verbose_controls_debug_output() -> None:
    quiet, loud = io.StringIO(), io.StringIO()

    configure_logging(sink=quiet)
    logger.debug("hidden")
    logger.info("shown")
    configure_logging(verbose=True, sink=loud)
    logger.debug("now visible")
    logger.remove()

    assert "hidden" not in quiet.getvalue()
    assert "shown" in quiet.getvalue()
    assert "now visible" in loud.getvalue()
