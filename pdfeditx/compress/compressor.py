"""Compression engine for :mod:`pdfeditx`.

Two strategies are offered. :func:`compress_pdf` hands the document to
Ghostscript inside a private scratch directory and is the primary path.
:func:`optimize_pdf` stays in process and only rewrites the document with
:mod:`pypdf`. Neither raises: every outcome is a :class:`CompressionResult`.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from pypdf import PdfWriter
from pypdf.generic import NameObject

from ..config import get_settings
from ..core.document import load_document, save_document
from ..core.model import CompressionLevel, CompressionResult
from ..core.utils import round_half_up
from .optimizers import BackendType, coerce_level, find_ghostscript, run_ghostscript
from .utils import sizeof_fmt

_LOGGER = logging.getLogger("pdfeditx.compress")

SCRATCH_PREFIX = "pdfeditx-compress-"
GHOSTSCRIPT_HINT = "Failed to compress PDF. Make sure Ghostscript is installed."

_STRIPPED_METADATA = ("/Title", "/Author", "/Subject", "/Keywords", "/Producer", "/Creator")


def compute_reduction_percent(original_size: int, compressed_size: int) -> int:
    """Return the size reduction as a whole percentage, never below zero."""

    if original_size <= 0:
        return 0
    return max(0, round_half_up((1 - compressed_size / original_size) * 100))


def _success(original: bytes, compressed: bytes, level: CompressionLevel, backend: BackendType) -> CompressionResult:
    result = CompressionResult(
        success=True,
        data=compressed,
        original_size=len(original),
        compressed_size=len(compressed),
        reduction_percent=compute_reduction_percent(len(original), len(compressed)),
        level=int(level),
        backend=backend.value,
    )
    _LOGGER.info(
        "Compressed %s -> %s (%d%% smaller) using %s",
        sizeof_fmt(result.original_size),
        sizeof_fmt(result.compressed_size),
        result.reduction_percent,
        backend.value,
    )
    return result


def _strip_metadata(document: PdfWriter) -> None:
    metadata = document.metadata
    if metadata is None:
        return
    remaining = {key: value for key, value in metadata.items() if key not in _STRIPPED_METADATA}
    document.metadata = remaining or None


def _flatten_form(document: PdfWriter) -> None:
    if "/AcroForm" not in document.root_object:
        return
    try:
        fields = document.get_fields() or {}
        values = {name: field["/V"] for name, field in fields.items() if field.get("/V") is not None}
        for page in document.pages:
            if "/Annots" in page:
                document.update_page_form_field_values(page, values, auto_regenerate=False, flatten=True)
        document.remove_annotations(subtypes="/Widget")
        del document.root_object[NameObject("/AcroForm")]
    except Exception as exc:  # forms vary too much to guarantee flattening
        _LOGGER.warning("Leaving form fields interactive, flattening failed: %s", exc)


def optimize_pdf(data: bytes, level: int) -> CompressionResult:
    """Rewrite *data* in process with a compact object layout.

    From :attr:`CompressionLevel.MEDIUM` the descriptive metadata is
    removed; at :attr:`CompressionLevel.HEAVY` interactive form fields are
    flattened as well, when the document has any.
    """

    original_size = len(data)
    try:
        compression_level = coerce_level(level)
        document = load_document(data)
        if compression_level >= CompressionLevel.MEDIUM:
            _strip_metadata(document)
        if compression_level >= CompressionLevel.HEAVY:
            _flatten_form(document)
        compressed = save_document(document, compact=True)
    except Exception as exc:
        _LOGGER.error("In-process optimization failed: %s", exc)
        return CompressionResult.failure(
            original_size,
            str(exc) or "Unknown error during compression",
            level=level,
            backend=BackendType.PYPDF.value,
        )
    return _success(data, compressed, compression_level, BackendType.PYPDF)


def compress_pdf(data: bytes, level: int, *, fallback: bool = False) -> CompressionResult:
    """Compress *data* with Ghostscript at the given *level* (25, 50 or 75).

    The input is written to a freshly created scratch directory that is
    removed again on every exit path. When ``fallback`` is set a failed
    Ghostscript run is retried with :func:`optimize_pdf`.
    """

    original_size = len(data)
    try:
        compression_level = coerce_level(level)
    except ValueError as exc:
        return CompressionResult.failure(original_size, str(exc), level=level)

    settings = get_settings()
    temp_dir: Path | None = None
    try:
        temp_dir = Path(tempfile.mkdtemp(prefix=SCRATCH_PREFIX))
        source = temp_dir / "input.pdf"
        intermediate = temp_dir / "output.pdf"
        source.write_bytes(data)

        run_ghostscript(
            find_ghostscript(),
            source,
            intermediate,
            compression_level,
            timeout=settings.ghostscript_timeout,
            compatibility_level=settings.compatibility_level,
        )
        compressed = intermediate.read_bytes()
    except Exception as exc:
        if fallback:
            _LOGGER.warning("Backend ghostscript failed (%s); falling back to pypdf", exc)
            return optimize_pdf(data, compression_level)
        _LOGGER.error("Compression failed: %s", exc)
        return CompressionResult.failure(
            original_size,
            str(exc) or GHOSTSCRIPT_HINT,
            level=int(compression_level),
            backend=BackendType.GHOSTSCRIPT.value,
        )
    finally:
        if temp_dir is not None:
            shutil.rmtree(temp_dir, ignore_errors=True)

    return _success(data, compressed, compression_level, BackendType.GHOSTSCRIPT)


__all__ = ["compress_pdf", "compute_reduction_percent", "optimize_pdf"]
