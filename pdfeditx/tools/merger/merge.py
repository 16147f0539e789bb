"""Plugin exposing PDF merge capabilities through the registry."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Sequence

from ...core.model import MergeSource
from ...core.utils import get_logger, resolve_path
from ...pages.exceptions import PdfMergeError
from ...pages.operations import merge_pdfs
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfeditx.tools.merge")

MergeInput = str | Path | tuple[str | Path, Sequence[int]]


def _build_source(entry: MergeInput) -> MergeSource:
    if isinstance(entry, tuple):
        path, selected = entry
    else:
        path, selected = entry, ()
    source_path = resolve_path(path)
    try:
        data = source_path.read_bytes()
    except OSError as exc:
        raise PdfMergeError(f"Unable to read {source_path}: {exc}") from exc
    return MergeSource(data=data, selected_pages=list(selected), file_name=source_path.name)


@register_tool("merge")
class MergeTool(BaseTool):
    name = "merge"

    def run(self) -> Path:
        context = self.context
        inputs: Iterable[MergeInput] | None = context.config.get("inputs")
        if inputs is None:
            if context.input_path is None:
                raise PdfMergeError("No input PDFs provided")
            inputs = [context.input_path]
        if context.output_path is None:
            raise PdfMergeError("Merge tool requires an output path")

        sources = [_build_source(entry) for entry in inputs]
        document_info: Mapping[str, object] | None = context.config.get("document_info")
        LOGGER.debug("Merging %d input(s) into %s", len(sources), context.output_path)

        result = merge_pdfs(sources, document_info=document_info)
        context.resources["result"] = result
        if not result.success or result.data is None:
            raise PdfMergeError(result.error or "Merge failed")
        return context.write_output(result.data)
