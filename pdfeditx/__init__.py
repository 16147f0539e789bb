"""PDF editing pipeline: page set operations, annotation baking and compression."""

from __future__ import annotations

from . import annotate, compress, pages
from .annotate import apply_annotations
from .compress import (
    BackendError,
    CompressionError,
    compress_pdf,
    optimize_pdf,
)
from .config import Settings, get_settings
from .core import (
    Annotation,
    AnnotationType,
    CompressionLevel,
    CompressionResult,
    DocumentInfo,
    DocumentLoadError,
    InvalidAnnotationError,
    MergeResult,
    MergeSource,
    PageIndexError,
    PageInfo,
    PdfEditXError,
    Point,
    Rect,
    load_info,
)
from .pages import (
    PdfMergeError,
    create_empty_pdf,
    delete_pages,
    extract_pages,
    merge_pdfs,
    reorder_pages,
    rotate_page,
)

__version__ = "0.1.0"

__all__ = [
    "annotate",
    "compress",
    "pages",
    "load_info",
    "merge_pdfs",
    "apply_annotations",
    "reorder_pages",
    "extract_pages",
    "delete_pages",
    "rotate_page",
    "create_empty_pdf",
    "compress_pdf",
    "optimize_pdf",
    "Annotation",
    "AnnotationType",
    "BackendError",
    "CompressionError",
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
    "PdfMergeError",
    "Point",
    "Rect",
    "Settings",
    "get_settings",
]
