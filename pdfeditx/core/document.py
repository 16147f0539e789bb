"""Document model adapter: bytes in, editable :mod:`pypdf` documents out.

Every pipeline operation goes through these helpers so that loading,
encryption tolerance, metadata extraction and serialization behave the same
way everywhere. Documents returned here are owned by the caller and are
never cached or shared between calls.
"""

from __future__ import annotations

import dataclasses
import io
import logging
from datetime import datetime

from pypdf import PageObject, PasswordType, PdfReader, PdfWriter

from .exceptions import DocumentLoadError

LOGGER = logging.getLogger("pdfeditx.core")


@dataclasses.dataclass(frozen=True, slots=True)
class PageInfo:
    """Geometry of a single page, in PDF points."""

    page_index: int
    width: float
    height: float
    rotation: int


@dataclasses.dataclass(frozen=True, slots=True)
class DocumentInfo:
    """Summary information describing a PDF document."""

    page_count: int
    pages: tuple[PageInfo, ...]
    title: str | None = None
    author: str | None = None
    subject: str | None = None
    keywords: tuple[str, ...] | None = None
    creator: str | None = None
    producer: str | None = None
    creation_date: datetime | None = None
    modification_date: datetime | None = None


def open_reader(data: bytes) -> PdfReader:
    """Parse *data* into a read-only document.

    Encrypted documents are opened anyway: an empty user password is tried
    and a failure to decrypt is only logged. Documents protected by a real,
    non-empty user password cannot have their page tree read and are
    rejected with :class:`DocumentLoadError`.

    Raises:
        DocumentLoadError: If *data* is not a readable PDF.
    """

    if not data:
        raise DocumentLoadError("Cannot load an empty buffer as a PDF document")

    try:
        reader = PdfReader(io.BytesIO(data))
    except Exception as exc:  # pypdf exceptions vary
        raise DocumentLoadError(f"Failed to parse PDF: {exc}") from exc

    if reader.is_encrypted:
        LOGGER.debug("Document is encrypted; attempting empty-password decryption")
        try:
            status = reader.decrypt("")
        except Exception as exc:  # decrypt errors vary with the crypt filter
            LOGGER.warning("Ignoring encryption, decryption failed: %s", exc)
        else:
            if status == PasswordType.NOT_DECRYPTED:
                LOGGER.warning("Ignoring encryption, empty password was rejected")

    try:
        page_count = len(reader.pages)
    except Exception as exc:
        raise DocumentLoadError(f"Failed to read page tree: {exc}") from exc

    LOGGER.debug("Loaded document with %d page(s)", page_count)
    return reader


def load_document(data: bytes) -> PdfWriter:
    """Return an editable copy of the document encoded in *data*."""

    reader = open_reader(data)
    try:
        return PdfWriter(clone_from=reader)
    except Exception as exc:
        raise DocumentLoadError(f"Failed to copy document structure: {exc}") from exc


def create_document() -> PdfWriter:
    """Return a new, empty document."""

    return PdfWriter()


def save_document(document: PdfWriter, *, compact: bool = False) -> bytes:
    """Serialize *document* to bytes.

    With ``compact`` set, page content streams are Flate-compressed and
    duplicate or unreferenced objects are dropped before writing.
    """

    if compact:
        for page in document.pages:
            page.compress_content_streams()
        document.compress_identical_objects()

    buffer = io.BytesIO()
    document.write(buffer)
    return buffer.getvalue()


def page_info(page: PageObject, index: int) -> PageInfo:
    return PageInfo(
        page_index=index,
        width=float(page.mediabox.width),
        height=float(page.mediabox.height),
        rotation=int(page.rotation) % 360,
    )


def _metadata_date(metadata, attribute: str) -> datetime | None:
    try:
        return getattr(metadata, attribute)
    except Exception as exc:  # malformed date strings are common
        LOGGER.warning("Ignoring unparseable %s: %s", attribute, exc)
        return None


def _split_keywords(raw: object) -> tuple[str, ...] | None:
    if raw is None:
        return None
    return tuple(keyword.strip() for keyword in str(raw).split(",") if keyword.strip())


def get_document_info(reader: PdfReader) -> DocumentInfo:
    """Collect metadata and per-page geometry from *reader*."""

    pages = tuple(page_info(page, index) for index, page in enumerate(reader.pages))
    metadata = reader.metadata
    if metadata is None:
        return DocumentInfo(page_count=len(pages), pages=pages)

    return DocumentInfo(
        page_count=len(pages),
        pages=pages,
        title=metadata.title,
        author=metadata.author,
        subject=metadata.subject,
        keywords=_split_keywords(metadata.get("/Keywords")),
        creator=metadata.creator,
        producer=metadata.producer,
        creation_date=_metadata_date(metadata, "creation_date"),
        modification_date=_metadata_date(metadata, "modification_date"),
    )


def load_info(data: bytes) -> DocumentInfo:
    """Return :class:`DocumentInfo` for the PDF encoded in *data*."""

    info = get_document_info(open_reader(data))
    LOGGER.info("Document info: pages=%s, title=%r", info.page_count, info.title)
    return info


__all__ = [
    "DocumentInfo",
    "PageInfo",
    "create_document",
    "get_document_info",
    "load_document",
    "load_info",
    "open_reader",
    "page_info",
    "save_document",
]
