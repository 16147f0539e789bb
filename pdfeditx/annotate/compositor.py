"""Bake annotation records permanently into page content.

Annotations arrive in screen space (top-left origin, y grows downwards) and
are converted into PDF user space (bottom-left origin, y grows upwards)
using the height of the page they target::

    document_y = page_height - rect.y - rect.height

Every annotation for a page is drawn, in list order, onto one
:mod:`reportlab` overlay that is merged onto the page with
:meth:`pypdf.PageObject.merge_page`. Annotations aimed at pages the
document does not have are skipped without error.
"""

from __future__ import annotations

import io
import logging
from collections import defaultdict
from typing import Callable, Iterable, Sequence

from pypdf import PageObject, PdfReader
from reportlab.pdfgen.canvas import Canvas

from ..core.document import load_document, save_document
from ..core.model import Annotation, AnnotationType
from .colors import hex_to_rgb

LOGGER = logging.getLogger("pdfeditx.annotate")

LINE_THICKNESS = 2
BORDER_WIDTH = 2
TEXT_FONT = "Helvetica"
TEXT_SIZE = 12

Color = tuple[float, float, float]


def to_document_y(annotation: Annotation, page_height: float) -> float:
    """Return the y coordinate of the annotation's bottom edge in PDF space."""

    return page_height - annotation.rect.y - annotation.rect.height


def _opacity(annotation: Annotation) -> float:
    return min(max(annotation.opacity, 0.0), 1.0)


def _draw_highlight(canvas: Canvas, annotation: Annotation, page_height: float, color: Color) -> None:
    rect = annotation.rect
    canvas.setFillColorRGB(*color)
    canvas.setFillAlpha(_opacity(annotation))
    canvas.rect(rect.x, to_document_y(annotation, page_height), rect.width, rect.height, stroke=0, fill=1)


def _draw_horizontal_line(canvas: Canvas, annotation: Annotation, y: float, color: Color) -> None:
    rect = annotation.rect
    canvas.setStrokeColorRGB(*color)
    canvas.setStrokeAlpha(_opacity(annotation))
    canvas.setLineWidth(LINE_THICKNESS)
    canvas.line(rect.x, y, rect.x + rect.width, y)


def _draw_underline(canvas: Canvas, annotation: Annotation, page_height: float, color: Color) -> None:
    _draw_horizontal_line(canvas, annotation, to_document_y(annotation, page_height), color)


def _draw_strikeout(canvas: Canvas, annotation: Annotation, page_height: float, color: Color) -> None:
    y = page_height - annotation.rect.y - annotation.rect.height / 2
    _draw_horizontal_line(canvas, annotation, y, color)


def _draw_rectangle(canvas: Canvas, annotation: Annotation, page_height: float, color: Color) -> None:
    # The outline is stroked at full strength; opacity only governs fills.
    rect = annotation.rect
    canvas.setStrokeColorRGB(*color)
    canvas.setLineWidth(BORDER_WIDTH)
    canvas.rect(rect.x, to_document_y(annotation, page_height), rect.width, rect.height, stroke=1, fill=0)


def _draw_text(canvas: Canvas, annotation: Annotation, page_height: float, color: Color) -> None:
    if not annotation.content:
        return
    text = canvas.beginText(annotation.rect.x, to_document_y(annotation, page_height))
    text.setFont(TEXT_FONT, TEXT_SIZE, leading=TEXT_SIZE * 1.2)
    text.setFillColorRGB(*color)
    text.textLines(annotation.content)
    canvas.setFillAlpha(_opacity(annotation))
    canvas.drawText(text)


Drawer = Callable[[Canvas, Annotation, float, Color], None]

DRAWERS: dict[AnnotationType, Drawer] = {
    AnnotationType.HIGHLIGHT: _draw_highlight,
    AnnotationType.UNDERLINE: _draw_underline,
    AnnotationType.STRIKEOUT: _draw_strikeout,
    AnnotationType.RECTANGLE: _draw_rectangle,
    AnnotationType.TEXT: _draw_text,
}


def build_overlay(width: float, height: float, annotations: Iterable[Annotation]) -> PageObject:
    """Render *annotations* onto a transparent page of the given size."""

    buffer = io.BytesIO()
    canvas = Canvas(buffer, pagesize=(width, height))
    for annotation in annotations:
        canvas.saveState()
        DRAWERS[AnnotationType(annotation.type)](canvas, annotation, height, hex_to_rgb(annotation.color))
        canvas.restoreState()
    canvas.showPage()
    canvas.save()
    return PdfReader(io.BytesIO(buffer.getvalue())).pages[0]


def _is_bakeable(annotation: Annotation) -> bool:
    try:
        annotation_type = AnnotationType(annotation.type)
    except ValueError:
        LOGGER.warning("Skipping annotation %s of unknown type %r", annotation.id, annotation.type)
        return False
    if annotation_type not in DRAWERS:
        LOGGER.debug("Annotation %s of type %s is not baked", annotation.id, annotation_type.value)
        return False
    return True


def group_by_page(annotations: Iterable[Annotation], page_count: int) -> dict[int, list[Annotation]]:
    """Bucket bakeable annotations by target page.

    Annotations aimed at a page the document does not have are dropped, as
    are types that have no page rendering (freeform, arrow).
    """

    grouped: dict[int, list[Annotation]] = defaultdict(list)
    for annotation in annotations:
        page_index = annotation.page_index
        if isinstance(page_index, bool) or not isinstance(page_index, int):
            LOGGER.warning(
                "Skipping annotation %s with non-integer page index %r", annotation.id, page_index
            )
            continue
        if not 0 <= page_index < page_count:
            LOGGER.debug(
                "Skipping annotation %s for missing page %s", annotation.id, page_index
            )
            continue
        if _is_bakeable(annotation):
            grouped[page_index].append(annotation)
    return grouped


def apply_annotations(data: bytes, annotations: Sequence[Annotation]) -> bytes:
    """Draw *annotations* permanently into the document encoded in *data*.

    Baking is additive: applying the same list twice draws everything twice.

    Raises:
        DocumentLoadError: If *data* is not a readable PDF.
    """

    document = load_document(data)
    grouped = group_by_page(annotations, len(document.pages))

    for page_index in sorted(grouped):
        page = document.pages[page_index]
        width = float(page.mediabox.width)
        height = float(page.mediabox.height)
        LOGGER.debug("Baking %d annotation(s) into page %s", len(grouped[page_index]), page_index)
        page.merge_page(build_overlay(width, height, grouped[page_index]))

    LOGGER.info("Applied %d annotation(s) to %d page(s)", sum(map(len, grouped.values())), len(grouped))
    return save_document(document)


__all__ = ["DRAWERS", "apply_annotations", "build_overlay", "group_by_page", "to_document_y"]
