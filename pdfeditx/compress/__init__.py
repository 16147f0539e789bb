"""Compression utilities exposed by :mod:`pdfeditx`."""

from __future__ import annotations

from ..core.model import CompressionLevel, CompressionResult
from .compressor import compress_pdf, compute_reduction_percent, optimize_pdf
from .exceptions import BackendError, CompressionError
from .optimizers import BackendType, find_ghostscript, reset_ghostscript_cache

__all__ = [
    "BackendError",
    "BackendType",
    "CompressionError",
    "CompressionLevel",
    "CompressionResult",
    "compress_pdf",
    "compute_reduction_percent",
    "find_ghostscript",
    "optimize_pdf",
    "reset_ghostscript_cache",
]
