"""Logging setup for the BeerStock application."""

import logging

from beerstock.config import settings


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure the root logger from settings.

    A console handler is attached only when the root logger has none, so
    running under uvicorn or pytest keeps their handlers. The level is
    always applied.

    Args:
        level: Log level name. Defaults to the configured level.
        fmt: Log record format. Defaults to the configured format.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or settings.log_level).upper(), logging.INFO))

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or settings.log_format))
    root.addHandler(handler)
