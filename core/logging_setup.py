"""Application-wide logging configuration."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from core.settings import LOGGING

ROOT_LOGGER = "taskpad"


def setup_logging(path: Optional[Path] = None, *, level: Optional[int] = None) -> logging.Logger:
    """Attach a rotating file handler to the ``taskpad`` logger once."""

    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        target = Path(path or LOGGING.path)
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            target,
            maxBytes=LOGGING.max_bytes,
            backupCount=LOGGING.backup_count,
            encoding="utf-8",
        )
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else LOGGING.level)
    return logger


__all__ = ["ROOT_LOGGER", "setup_logging"]
