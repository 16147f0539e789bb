"""Utility helpers for :mod:`pdfeditx.compress`."""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

_LOGGER = logging.getLogger("pdfeditx.compress")


def run_subprocess(
    command: Sequence[str],
    *,
    check: bool = True,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run *command* capturing output.

    Parameters
    ----------
    command:
        Command and arguments to execute.
    check:
        Whether to raise :class:`subprocess.CalledProcessError` on non-zero exit.
    timeout:
        Seconds to wait before the child is killed and
        :class:`subprocess.TimeoutExpired` is raised; ``None`` waits forever.
    """

    _LOGGER.debug("Executing command: %s", " ".join(command))
    completed = subprocess.run(
        list(command),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=check,
        text=True,
        timeout=timeout,
    )
    _LOGGER.debug(
        "Command finished with exit code %s\nstdout: %s\nstderr: %s",
        completed.returncode,
        completed.stdout,
        completed.stderr,
    )
    return completed


def sizeof_fmt(num_bytes: float) -> str:
    """Format *num_bytes* into a human-friendly string."""

    step_unit = 1024.0
    for unit in ("bytes", "KiB", "MiB", "GiB"):
        if abs(num_bytes) < step_unit:
            return f"{num_bytes:3.1f} {unit}"
        num_bytes /= step_unit
    return f"{num_bytes:.1f} TiB"


__all__ = ["run_subprocess", "sizeof_fmt"]
