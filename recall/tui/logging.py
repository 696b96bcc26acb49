"""Structured TUI event logging.

The terminal belongs to the UI while a session runs, so events go to a
rotating JSON-lines file instead of stderr.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

import structlog

from ..config.settings import settings
from .constants import LOG_PATH

MAX_LOG_BYTES = 5 * 1024 * 1024
BACKUP_LOG_FILES = 5
_LOGGER_NAME = "recall.tui.events"


def _resolve_log_path(file_path: Optional[str] = None) -> Path:
    configured_path = file_path or settings.logging.file_path
    if configured_path:
        return Path(configured_path).expanduser()
    return Path(LOG_PATH).expanduser()


def configure_logging(
    level: Optional[str] = None, file_path: Optional[str] = None
) -> logging.Logger:
    """Attach the rotating file handler once; later calls only adjust the level."""
    logger = logging.getLogger(_LOGGER_NAME)
    level_name = (level or settings.logging.level).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    if any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers):
        return logger

    log_path = _resolve_log_path(file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_LOG_FILES,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
_logger = structlog.get_logger(_LOGGER_NAME)


def log_tui_event(event: str, **payload: Any) -> None:
    """Emit a structured TUI event."""
    _logger.info(event, **payload)
