"""Logging setup for the command line tool."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> None:
    """Configure the 'svglayout' logger.

    Records go to stderr so an SVG document written to stdout stays clean.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write the log to
    """
    logger = logging.getLogger("svglayout")
    logger.setLevel(level)

    # Avoid duplicate records when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
