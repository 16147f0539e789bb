"""Annotation baking for :mod:`pdfeditx`."""

from __future__ import annotations

from ..core.model import Annotation, AnnotationType, InvalidAnnotationError, Point, Rect
from .colors import hex_to_rgb, parse_hex_color
from .compositor import apply_annotations, build_overlay, to_document_y

__all__ = [
    "Annotation",
    "AnnotationType",
    "InvalidAnnotationError",
    "Point",
    "Rect",
    "apply_annotations",
    "build_overlay",
    "hex_to_rgb",
    "parse_hex_color",
    "to_document_y",
]
