from __future__ import annotations

from pathlib import Path

import pytest

from pdfeditx.compress import CompressionError, compressor
from pdfeditx.tools import load_builtin_plugins
from pdfeditx.tools.common.interfaces import ToolContext
from pdfeditx.tools.common.pipeline import registry
from pdfeditx.tools.compressor.compress import parse_level


def setup_module(module):
    load_builtin_plugins()


def test_compress_tool_in_process(sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "compressed.pdf"
    context = ToolContext(
        input_path=sample_pdf,
        output_path=output,
        config={"level": "heavy", "strategy": "pypdf"},
    )

    result = registry.create("compress", context).run()

    assert output.exists()
    assert result.backend == "pypdf"
    assert result.level == 75
    assert result.compressed_size == output.stat().st_size
    assert context.resources["result"] is result


def test_compress_tool_with_ghostscript(sample_pdf: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _run(executable, source, output, level, **kwargs):
        Path(output).write_bytes(b"%PDF-1.4 tiny")

    monkeypatch.setattr(compressor, "find_ghostscript", lambda: "gs")
    monkeypatch.setattr(compressor, "run_ghostscript", _run)
    output = tmp_path / "compressed.pdf"
    context = ToolContext(input_path=sample_pdf, output_path=output, config={"level": "25"})

    result = registry.create("compress", context).run()

    assert output.read_bytes() == b"%PDF-1.4 tiny"
    assert result.backend == "ghostscript"
    assert result.level == 25


def test_compress_tool_raises_on_failure(sample_pdf: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(compressor, "find_ghostscript", lambda: "/nonexistent/bin/gs")
    output = tmp_path / "compressed.pdf"
    context = ToolContext(input_path=sample_pdf, output_path=output, config={"level": 50})

    with pytest.raises(CompressionError):
        registry.create("compress", context).run()
    assert not output.exists()
    assert not context.resources["result"].success


@pytest.mark.parametrize(("value", "expected"), [("light", 25), ("MEDIUM", 50), ("75", 75), (50, 50)])
def test_parse_level(value, expected) -> None:
    assert parse_level(value) == expected


def test_parse_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        parse_level("extreme")
