"""Page set operations: merge, reorder, extract, delete and rotate.

All of them build a brand-new document by copying selected pages, in the
requested order, out of one or more source documents. Sources are parsed
from bytes on every call and are never modified.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Sequence

from pypdf import PdfReader, PdfWriter
from pypdf.generic import NameObject, NumberObject

from ..core.document import create_document, load_document, open_reader, save_document
from ..core.exceptions import PageIndexError
from ..core.model import MergeResult, MergeSource

LOGGER = logging.getLogger("pdfeditx.pages")

LETTER_WIDTH = 612.0
LETTER_HEIGHT = 792.0
VALID_ROTATIONS = (0, 90, 180, 270)

_METADATA_KEY_MAP = {
    "title": "/Title",
    "author": "/Author",
    "subject": "/Subject",
    "keywords": "/Keywords",
    "creator": "/Creator",
    "producer": "/Producer",
}


def check_indices(indices: Iterable[int], page_count: int) -> list[int]:
    """Return *indices* as a list, raising if any of them names no page."""

    indices = list(indices)
    invalid = [
        index
        for index in indices
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < page_count
    ]
    if invalid:
        raise PageIndexError(invalid, page_count)
    return indices


def resolve_selection(selection: Sequence[int] | None, page_count: int) -> list[int]:
    """Return the pages to copy, validating every index against *page_count*.

    An empty or missing selection means every page in ascending order.
    Duplicates and arbitrary ordering are kept as given.
    """

    if not selection:
        return list(range(page_count))
    return check_indices(selection, page_count)


def copy_pages(sources: Iterable[tuple[PdfReader, Sequence[int]]]) -> PdfWriter:
    """Copy ``(reader, indices)`` pairs, in order, into a new document."""

    destination = create_document()
    for reader, indices in sources:
        for index in indices:
            LOGGER.debug("Copying page %s", index)
            destination.add_page(reader.pages[index])
    return destination


def _document_metadata(document_info: Mapping[str, object]) -> dict[str, str]:
    metadata: dict[str, str] = {}
    for key, value in document_info.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ", ".join(str(item) for item in value)
        string_value = str(value).strip()
        if not string_value:
            continue
        pdf_key = _METADATA_KEY_MAP.get(key.lower())
        if pdf_key is None:
            pdf_key = key if key.startswith("/") else f"/{key}"
        metadata[pdf_key] = string_value
    return metadata


def merge_pdfs(
    sources: Sequence[MergeSource],
    *,
    document_info: Mapping[str, object] | None = None,
) -> MergeResult:
    """Merge *sources* into a single document.

    Sources are processed strictly in list order; within a source the
    pages follow ``selected_pages`` verbatim, so a page may be repeated or
    left out. Failures never raise: they are reported through
    :class:`MergeResult`.
    """

    if not sources:
        return MergeResult(success=False, error="No merge sources provided")

    try:
        plan: list[tuple[PdfReader, list[int]]] = []
        for source in sources:
            LOGGER.debug("Processing merge source %s (%s)", source.id, source.file_name or "<bytes>")
            reader = open_reader(source.data)
            plan.append((reader, resolve_selection(source.selected_pages, len(reader.pages))))

        merged = copy_pages(plan)
        if document_info:
            metadata = _document_metadata(document_info)
            if metadata:
                LOGGER.debug("Setting metadata on merged PDF: %s", metadata)
                merged.add_metadata(metadata)
        data = save_document(merged)
    except Exception as exc:
        LOGGER.error("Merge failed: %s", exc)
        return MergeResult(success=False, error=str(exc) or "Unknown error during merge")

    LOGGER.info("Merged %d source(s) into %d page(s)", len(sources), sum(len(indices) for _, indices in plan))
    return MergeResult(success=True, data=data)


def _copy_from_single(data: bytes, indices: Sequence[int]) -> bytes:
    reader = open_reader(data)
    selection = check_indices(indices, len(reader.pages))
    return save_document(copy_pages([(reader, selection)]))


def reorder_pages(data: bytes, order: Sequence[int]) -> bytes:
    """Return a document whose pages follow *order*.

    *order* is expected to be a permutation of the page indices but this is
    not enforced: repeated indices duplicate pages, missing ones drop them.
    """

    LOGGER.debug("Reordering pages to %s", list(order))
    return _copy_from_single(data, order)


def extract_pages(data: bytes, indices: Sequence[int]) -> bytes:
    """Return a document made of the pages at *indices*, in that order."""

    LOGGER.debug("Extracting pages %s", list(indices))
    return _copy_from_single(data, indices)


def delete_pages(data: bytes, indices: Iterable[int]) -> bytes:
    """Return a document without the pages at *indices*.

    Remaining pages keep their original ascending order. Indices that do
    not name a page have nothing to delete and are ignored.
    """

    page_count = len(open_reader(data).pages)
    doomed = set(indices)
    keep = [index for index in range(page_count) if index not in doomed]
    LOGGER.debug("Deleting pages %s, keeping %s", sorted(doomed), keep)
    return extract_pages(data, keep)


def rotate_page(data: bytes, page_index: int, degrees: int) -> bytes:
    """Set the absolute rotation of the page at *page_index*."""

    if degrees not in VALID_ROTATIONS:
        raise ValueError(f"Rotation must be one of {VALID_ROTATIONS}, got {degrees!r}")

    document = load_document(data)
    page_count = len(document.pages)
    if isinstance(page_index, bool) or not 0 <= page_index < page_count:
        raise PageIndexError([page_index], page_count)

    document.pages[page_index][NameObject("/Rotate")] = NumberObject(degrees)
    LOGGER.debug("Rotated page %s to %s degrees", page_index, degrees)
    return save_document(document)


def create_empty_pdf(width: float = LETTER_WIDTH, height: float = LETTER_HEIGHT) -> bytes:
    """Return a single blank page document, US Letter by default."""

    if width <= 0 or height <= 0:
        raise ValueError(f"Page size must be positive, got {width}x{height}")
    document = create_document()
    document.add_blank_page(width=width, height=height)
    return save_document(document)


__all__ = [
    "check_indices",
    "copy_pages",
    "create_empty_pdf",
    "delete_pages",
    "extract_pages",
    "merge_pdfs",
    "reorder_pages",
    "resolve_selection",
    "rotate_page",
]
