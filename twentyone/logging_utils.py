"""Logging setup shared by the engine and the console entry point."""

import logging

from config import LoggingConfig


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (console_ui/main.py)."""
    level = (level or LoggingConfig().level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
