"""Custom exception types for the :mod:`pdfeditx.compress` package."""

from __future__ import annotations

from ..core.exceptions import PdfEditXError


class CompressionError(PdfEditXError):
    """Raised when a compression run does not produce a document."""


class BackendError(CompressionError):
    """Raised when the external optimizer fails or produces no output."""


__all__ = ["BackendError", "CompressionError"]
