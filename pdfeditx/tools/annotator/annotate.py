"""Plugin exposing annotation baking through the registry."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from ...annotate.compositor import apply_annotations
from ...core.model import Annotation, InvalidAnnotationError
from ...core.utils import get_logger, resolve_path
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfeditx.tools.annotate")


def load_annotation_file(path: str | Path) -> list[Annotation]:
    """Read a JSON array of annotation objects from *path*."""

    source = resolve_path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidAnnotationError(f"{source} is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise InvalidAnnotationError(f"{source} must contain a JSON array of annotations")
    return [Annotation.from_mapping(item) for item in payload]


def _coerce(items: Iterable[Annotation | Mapping[str, Any]]) -> list[Annotation]:
    return [item if isinstance(item, Annotation) else Annotation.from_mapping(item) for item in items]


@register_tool("annotate")
class AnnotateTool(BaseTool):
    name = "annotate"

    def run(self) -> Path:
        context = self.context
        if context.input_path is None or context.output_path is None:
            raise ValueError("Annotation requires input and output paths")

        config = context.config
        if config.get("annotations") is not None:
            annotations = _coerce(config["annotations"])
        elif config.get("annotations_file") is not None:
            annotations = load_annotation_file(config["annotations_file"])
        else:
            raise ValueError("'annotations' or 'annotations_file' configuration is required")

        LOGGER.debug("Baking %d annotation(s) into %s", len(annotations), context.input_path)
        output = context.write_output(apply_annotations(context.read_input(), annotations))
        context.resources["result"] = output
        return output
