from __future__ import annotations

import io
from pathlib import Path

import pytest
from pypdf import PdfReader

from pdfeditx.pages import PdfMergeError
from pdfeditx.tools import load_builtin_plugins
from pdfeditx.tools.common.interfaces import ToolContext
from pdfeditx.tools.common.pipeline import registry


def setup_module(module):
    load_builtin_plugins()


def test_merge_tool(pdf_factory, page_widths, tmp_path: Path) -> None:
    first = pdf_factory("one.pdf", widths=(100, 200))
    second = pdf_factory("two.pdf", widths=(300,))
    output = tmp_path / "merged.pdf"
    context = ToolContext(output_path=output, config={"inputs": [first, second]})

    result = registry.create("merge", context).run()

    assert result == output
    assert page_widths(output) == [100, 200, 300]
    assert context.resources["result"].success


def test_merge_tool_with_page_selection_and_info(pdf_factory, page_widths, tmp_path: Path) -> None:
    first = pdf_factory("one.pdf", widths=(100, 200, 300))
    output = tmp_path / "nested" / "merged.pdf"
    context = ToolContext(
        output_path=output,
        config={"inputs": [(first, [2, 0]), first], "document_info": {"title": "Bundle"}},
    )

    registry.create("merge", context).run()

    assert page_widths(output) == [300, 100, 100, 200, 300]
    assert PdfReader(io.BytesIO(output.read_bytes())).metadata.title == "Bundle"


def test_merge_tool_raises_on_failed_merge(pdf_factory, tmp_path: Path) -> None:
    source = pdf_factory("one.pdf", widths=(100,))
    output = tmp_path / "merged.pdf"
    context = ToolContext(output_path=output, config={"inputs": [(source, [4])]})

    with pytest.raises(PdfMergeError):
        registry.create("merge", context).run()
    assert not output.exists()


def test_merge_tool_reports_missing_file(tmp_path: Path) -> None:
    context = ToolContext(output_path=tmp_path / "out.pdf", config={"inputs": [tmp_path / "missing.pdf"]})

    with pytest.raises(PdfMergeError, match="Unable to read"):
        registry.create("merge", context).run()
