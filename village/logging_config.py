"""Logging setup for the game server."""

from __future__ import annotations

import logging
import os

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None, include_uvicorn: bool = True) -> logging.Logger:
    """Configure root logging once and align the ``village`` and uvicorn loggers.

    The level falls back to the ``LOG_LEVEL`` env var, then INFO.
    """
    resolved = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=resolved, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT)

    app_logger = logging.getLogger("village")
    app_logger.setLevel(resolved)
    if include_uvicorn:
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            logging.getLogger(name).setLevel(resolved)

    app_logger.debug("logging configured level=%s", resolved)
    return app_logger
