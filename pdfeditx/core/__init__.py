"""Shared building blocks: document adapter, domain models and errors."""

from __future__ import annotations

from .document import (
    DocumentInfo,
    PageInfo,
    create_document,
    get_document_info,
    load_document,
    load_info,
    open_reader,
    save_document,
)
from .exceptions import DocumentLoadError, PageIndexError, PdfEditXError
from .model import (
    Annotation,
    AnnotationType,
    CompressionLevel,
    CompressionResult,
    InvalidAnnotationError,
    MergeResult,
    MergeSource,
    Point,
    Rect,
)

__all__ = [
    "Annotation",
    "AnnotationType",
    "CompressionLevel",
    "CompressionResult",
    "DocumentInfo",
    "DocumentLoadError",
    "InvalidAnnotationError",
    "MergeResult",
    "MergeSource",
    "PageIndexError",
    "PageInfo",
    "PdfEditXError",
    "Point",
    "Rect",
    "create_document",
    "get_document_info",
    "load_document",
    "load_info",
    "open_reader",
    "save_document",
]
