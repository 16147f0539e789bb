"""Exception hierarchy shared by every :mod:`pdfeditx` package."""

from __future__ import annotations

from typing import Iterable


class PdfEditXError(Exception):
    """Base exception for all errors raised by :mod:`pdfeditx`."""


class DocumentLoadError(PdfEditXError):
    """Raised when PDF bytes cannot be parsed into a document."""


class PageIndexError(PdfEditXError, IndexError):
    """Raised when a page selection refers to pages the document lacks."""

    def __init__(self, indices: Iterable[object], page_count: int) -> None:
        self.indices = list(indices)
        self.page_count = page_count
        message = (
            f"Page indices {self.indices!r} are out of range for a document "
            f"with {page_count} page(s)"
        )
        super().__init__(message)
