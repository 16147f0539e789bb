"""Utilities shared by pdfeditx modules."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def configure_logging(level: str | int) -> None:
    """Attach a console handler to the ``pdfeditx`` logger at *level*."""

    logger = get_logger("pdfeditx")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)


def resolve_path(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Path must not be None")
    return Path(path).expanduser().resolve()


def generate_id() -> str:
    """Return a random identifier for annotations and merge sources."""

    return uuid.uuid4().hex


def round_half_up(value: float) -> int:
    """Round *value* to the nearest integer, halves away from zero."""

    if value < 0:
        return -round_half_up(-value)
    return int(value + 0.5)
