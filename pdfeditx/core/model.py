"""Domain models passed between callers and the pdfeditx pipeline."""

from __future__ import annotations

import dataclasses
from enum import Enum, IntEnum
from typing import Any, Mapping, Sequence

from .exceptions import PdfEditXError
from .utils import generate_id


class InvalidAnnotationError(PdfEditXError, ValueError):
    """Raised when an annotation payload cannot be interpreted."""


class AnnotationType(str, Enum):
    """Kinds of annotation a caller can place on a page."""

    HIGHLIGHT = "highlight"
    UNDERLINE = "underline"
    STRIKEOUT = "strikeout"
    RECTANGLE = "rectangle"
    TEXT = "text"
    FREEFORM = "freeform"
    ARROW = "arrow"


class CompressionLevel(IntEnum):
    """Supported compression strengths, expressed as a percentage."""

    LIGHT = 25
    MEDIUM = 50
    HEAVY = 75


@dataclasses.dataclass(frozen=True, slots=True)
class Rect:
    """Rectangle in screen space: top-left origin, y grows downwards."""

    x: float
    y: float
    width: float
    height: float


@dataclasses.dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


def _lookup(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in payload:
            return payload[key]
    return default


def _as_float(value: Any, field: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidAnnotationError(f"Annotation field '{field}' must be numeric, got {value!r}") from exc


@dataclasses.dataclass(slots=True)
class Annotation:
    """A vector annotation to be baked into a page."""

    type: AnnotationType
    page_index: int
    rect: Rect
    color: str = "#000000"
    opacity: float = 1.0
    content: str | None = None
    points: tuple[Point, ...] = ()
    id: str = dataclasses.field(default_factory=generate_id)
    created_at: int | None = None
    updated_at: int | None = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Annotation":
        """Build an annotation from a JSON-style mapping.

        Both the camelCase keys emitted by the editor front end
        (``pageIndex``, ``createdAt``) and snake_case keys are accepted.
        """

        if not isinstance(payload, Mapping):
            raise InvalidAnnotationError(f"Annotation must be a mapping, got {type(payload).__name__}")

        raw_type = payload.get("type")
        try:
            annotation_type = AnnotationType(raw_type)
        except ValueError as exc:
            raise InvalidAnnotationError(f"Unknown annotation type: {raw_type!r}") from exc

        page_index = _lookup(payload, "pageIndex", "page_index")
        if isinstance(page_index, bool) or not isinstance(page_index, int):
            raise InvalidAnnotationError(f"Annotation 'pageIndex' must be an integer, got {page_index!r}")

        raw_rect = payload.get("rect")
        if not isinstance(raw_rect, Mapping):
            raise InvalidAnnotationError("Annotation 'rect' must be an object with x, y, width and height")
        rect = Rect(
            x=_as_float(raw_rect.get("x"), "rect.x"),
            y=_as_float(raw_rect.get("y"), "rect.y"),
            width=_as_float(raw_rect.get("width"), "rect.width"),
            height=_as_float(raw_rect.get("height"), "rect.height"),
        )

        points = tuple(
            Point(_as_float(point.get("x"), "points.x"), _as_float(point.get("y"), "points.y"))
            for point in payload.get("points") or ()
        )

        fields: dict[str, Any] = {
            "type": annotation_type,
            "page_index": page_index,
            "rect": rect,
            "color": str(payload.get("color", "#000000")),
            "opacity": _as_float(payload.get("opacity", 1.0), "opacity"),
            "content": payload.get("content"),
            "points": points,
            "created_at": _lookup(payload, "createdAt", "created_at"),
            "updated_at": _lookup(payload, "updatedAt", "updated_at"),
        }
        if payload.get("id"):
            fields["id"] = str(payload["id"])
        return cls(**fields)


@dataclasses.dataclass(slots=True)
class MergeSource:
    """One input of a merge: raw bytes plus the pages to take from it."""

    data: bytes
    selected_pages: Sequence[int] = ()
    file_name: str = ""
    page_count: int = 0
    id: str = dataclasses.field(default_factory=generate_id)


@dataclasses.dataclass(slots=True)
class MergeResult:
    success: bool
    data: bytes | None = None
    error: str | None = None


@dataclasses.dataclass(slots=True)
class CompressionResult:
    """Represents the outcome of a compression run."""

    success: bool
    original_size: int
    compressed_size: int
    reduction_percent: int
    data: bytes | None = None
    error: str | None = None
    level: int | None = None
    backend: str | None = None

    @property
    def bytes_saved(self) -> int:
        return max(self.original_size - self.compressed_size, 0)

    @classmethod
    def failure(
        cls,
        original_size: int,
        error: str,
        *,
        level: int | None = None,
        backend: str | None = None,
    ) -> "CompressionResult":
        return cls(
            success=False,
            original_size=original_size,
            compressed_size=original_size,
            reduction_percent=0,
            error=error,
            level=level,
            backend=backend,
        )


__all__ = [
    "Annotation",
    "AnnotationType",
    "CompressionLevel",
    "CompressionResult",
    "InvalidAnnotationError",
    "MergeResult",
    "MergeSource",
    "Point",
    "Rect",
]
