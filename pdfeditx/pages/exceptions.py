"""Custom exceptions for the :mod:`pdfeditx.pages` package."""

from __future__ import annotations

from ..core.exceptions import PageIndexError, PdfEditXError


class PdfMergeError(PdfEditXError):
    """Raised when a merge cannot produce a document."""


__all__ = ["PageIndexError", "PdfMergeError"]
