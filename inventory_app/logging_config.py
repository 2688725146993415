"""Logging configuration."""

from __future__ import annotations

import logging
from flask import Flask

# Driver heartbeats and server selection are noise at INFO.
_QUIET_LOGGERS = ("pymongo",)


def configure_logging(app: Flask) -> None:
    """Single-line stdlib logging at LOG_LEVEL for the app and its services."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    app.logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
