"""Logging configuration for the API server and scripts."""
from __future__ import annotations

import logging
import logging.config
from typing import Optional

from config import settings

_LOGGING_CONFIGURED = False


def _resolve_level(value: Optional[str], default: str) -> str:
    value = (value or "").strip().upper()
    if value and isinstance(getattr(logging, value, None), int):
        return value
    return default


def setup_logging(level: Optional[str] = None, force: bool = False) -> None:
    """Configure the root logger with a console handler. Repeated calls are no-ops unless ``force``."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    default_level = "DEBUG" if settings.debug else "INFO"
    log_level = _resolve_level(level or settings.log_level, default_level)

    config: dict[str, object] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["console"],
        },
        "loggers": {
            "uvicorn.access": {"level": "WARNING"},
        },
    }
    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    _LOGGING_CONFIGURED = True


__all__ = ["setup_logging"]
