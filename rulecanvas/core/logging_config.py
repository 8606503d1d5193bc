"""Logging setup for the application entry points."""

import logging

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from settings (or an explicit level)."""
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    if settings.debug:
        level_name = "DEBUG"

    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
