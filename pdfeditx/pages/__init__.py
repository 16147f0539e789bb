"""Page set operations for :mod:`pdfeditx`."""

from __future__ import annotations

from .exceptions import PageIndexError, PdfMergeError
from .operations import (
    create_empty_pdf,
    delete_pages,
    extract_pages,
    merge_pdfs,
    reorder_pages,
    rotate_page,
)

__all__ = [
    "PageIndexError",
    "PdfMergeError",
    "create_empty_pdf",
    "delete_pages",
    "extract_pages",
    "merge_pdfs",
    "reorder_pages",
    "rotate_page",
]
