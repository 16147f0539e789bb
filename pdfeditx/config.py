"""Runtime configuration read from ``PDFEDITX_*`` environment variables."""

from __future__ import annotations

import dataclasses
import functools
import logging
import os

LOGGER = logging.getLogger("pdfeditx.config")

DEFAULT_GHOSTSCRIPT_TIMEOUT = 300.0
DEFAULT_PROBE_TIMEOUT = 10.0


@dataclasses.dataclass(frozen=True, slots=True)
class Settings:
    ghostscript_path: str | None = None
    # ``None`` waits for Ghostscript indefinitely.
    ghostscript_timeout: float | None = DEFAULT_GHOSTSCRIPT_TIMEOUT
    probe_timeout: float | None = DEFAULT_PROBE_TIMEOUT
    compatibility_level: str = "1.4"
    log_level: str = "WARNING"


def _read_timeout(env_name: str, default: float) -> float | None:
    value = os.getenv(env_name)
    if value is None:
        return default
    value = value.strip()
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        LOGGER.warning("Ignoring invalid %s=%r; using %s", env_name, value, default)
        return default
    return seconds if seconds > 0 else None


@functools.lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the process-wide :class:`Settings` built from the environment."""

    return Settings(
        ghostscript_path=os.getenv("PDFEDITX_GHOSTSCRIPT") or None,
        ghostscript_timeout=_read_timeout("PDFEDITX_GHOSTSCRIPT_TIMEOUT", DEFAULT_GHOSTSCRIPT_TIMEOUT),
        probe_timeout=_read_timeout("PDFEDITX_PROBE_TIMEOUT", DEFAULT_PROBE_TIMEOUT),
        compatibility_level=os.getenv("PDFEDITX_COMPATIBILITY_LEVEL", "1.4").strip() or "1.4",
        log_level=os.getenv("PDFEDITX_LOG_LEVEL", "WARNING").strip() or "WARNING",
    )


__all__ = ["Settings", "get_settings"]
