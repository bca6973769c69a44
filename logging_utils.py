"""Logging setup shared by the console and HTTP entry points."""

import logging

from config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start."""
    level = (level or config.logging.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=config.logging.format,
        datefmt=config.logging.datefmt,
    )

