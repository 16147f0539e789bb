"""Ghostscript integration for :mod:`pdfeditx.compress`."""

from __future__ import annotations

import functools
import logging
import subprocess
from enum import Enum
from pathlib import Path

from ..config import get_settings
from ..core.model import CompressionLevel
from .exceptions import BackendError
from .utils import run_subprocess

_LOGGER = logging.getLogger("pdfeditx.compress")


class BackendType(str, Enum):
    """Enumeration of the available optimization strategies."""

    GHOSTSCRIPT = "ghostscript"
    PYPDF = "pypdf"


# /printer ~300 dpi, /ebook ~150 dpi, /screen ~72 dpi
PDF_SETTINGS: dict[CompressionLevel, str] = {
    CompressionLevel.LIGHT: "/printer",
    CompressionLevel.MEDIUM: "/ebook",
    CompressionLevel.HEAVY: "/screen",
}

GHOSTSCRIPT_CANDIDATES: tuple[str, ...] = (
    "/opt/homebrew/bin/gs",
    "/usr/local/bin/gs",
    "/usr/bin/gs",
    "gs",
    "gswin64c",
    "gswin32c",
)
FALLBACK_EXECUTABLE = "gs"


def coerce_level(level: int) -> CompressionLevel:
    """Return *level* as a :class:`CompressionLevel` or raise ``ValueError``."""

    if isinstance(level, bool):
        raise ValueError(f"Unknown compression level: {level!r}")
    try:
        return CompressionLevel(level)
    except ValueError as exc:
        raise ValueError(f"Unknown compression level: {level!r}") from exc


def candidate_executables(override: str | None = None) -> tuple[str, ...]:
    """Return the Ghostscript locations to probe, in order."""

    if override:
        return (override, *[candidate for candidate in GHOSTSCRIPT_CANDIDATES if candidate != override])
    return GHOSTSCRIPT_CANDIDATES


def probe_executable(executable: str, *, timeout: float | None = None) -> bool:
    """Return ``True`` when ``executable --version`` runs successfully."""

    try:
        run_subprocess([executable, "--version"], check=True, timeout=timeout)
    except (OSError, subprocess.SubprocessError) as exc:
        _LOGGER.debug("Ghostscript candidate %s unusable: %s", executable, exc)
        return False
    return True


@functools.lru_cache(maxsize=None)
def _discover(candidates: tuple[str, ...], timeout: float | None) -> str:
    for candidate in candidates:
        if probe_executable(candidate, timeout=timeout):
            _LOGGER.info("Using Ghostscript at %s", candidate)
            return candidate
    _LOGGER.warning(
        "No Ghostscript candidate answered a version check; falling back to '%s'", FALLBACK_EXECUTABLE
    )
    return FALLBACK_EXECUTABLE


def find_ghostscript() -> str:
    """Return the Ghostscript executable to use.

    Candidates are probed once per process; the outcome is cached until
    :func:`reset_ghostscript_cache` is called.
    """

    settings = get_settings()
    return _discover(candidate_executables(settings.ghostscript_path), settings.probe_timeout)


def reset_ghostscript_cache() -> None:
    _discover.cache_clear()


def build_ghostscript_command(
    executable: str,
    source: Path,
    output: Path,
    level: int,
    *,
    compatibility_level: str = "1.4",
) -> list[str]:
    """Construct the Ghostscript command according to *level*."""

    pdf_settings = PDF_SETTINGS[coerce_level(level)]
    return [
        executable,
        "-sDEVICE=pdfwrite",
        f"-dCompatibilityLevel={compatibility_level}",
        f"-dPDFSETTINGS={pdf_settings}",
        "-dNOPAUSE",
        "-dQUIET",
        "-dBATCH",
        f"-sOutputFile={output}",
        str(source),
    ]


def run_ghostscript(
    executable: str,
    source: Path,
    output: Path,
    level: int,
    *,
    timeout: float | None = None,
    compatibility_level: str = "1.4",
) -> None:
    """Optimise *source* into *output*.

    Raises:
        BackendError: If Ghostscript cannot be started, exits non-zero,
            times out or leaves no output file behind.
    """

    command = build_ghostscript_command(
        executable, source, output, level, compatibility_level=compatibility_level
    )
    _LOGGER.info("Running ghostscript backend for compression")
    try:
        run_subprocess(command, timeout=timeout)
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or exc.stdout or "").strip()
        message = f"Ghostscript exited with code {exc.returncode}"
        raise BackendError(f"{message}: {detail}" if detail else message) from exc
    except subprocess.TimeoutExpired as exc:
        raise BackendError(f"Ghostscript did not finish within {timeout} seconds") from exc
    except OSError as exc:
        raise BackendError(f"Unable to run Ghostscript '{executable}': {exc}") from exc

    if not output.is_file() or output.stat().st_size == 0:
        raise BackendError("Ghostscript finished without producing an output file")


__all__ = [
    "BackendType",
    "FALLBACK_EXECUTABLE",
    "GHOSTSCRIPT_CANDIDATES",
    "PDF_SETTINGS",
    "build_ghostscript_command",
    "candidate_executables",
    "coerce_level",
    "find_ghostscript",
    "probe_executable",
    "reset_ghostscript_cache",
    "run_ghostscript",
]
