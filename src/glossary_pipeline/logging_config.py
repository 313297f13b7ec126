"""Logging configuration for the command-line workflows."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "glossary_pipeline"
LEVEL_TAGS = {logging.WARNING: "WARN"}


class LevelTagFormatter(logging.Formatter):
    """Format records as ``[LEVEL] message`` with ``WARNING`` shortened to ``WARN``."""

    def format(self, record: logging.LogRecord) -> str:
        tag = LEVEL_TAGS.get(record.levelno, record.levelname)
        return f"[{tag}] {record.getMessage()}"


def setup_logging() -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Returns:
        The configured ``glossary_pipeline`` logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(LevelTagFormatter())
    logger.addHandler(console_handler)
    return logger
