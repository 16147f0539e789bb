"""CLI helpers for inspecting a PDF."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...core.document import DocumentInfo
from ...tools.common.interfaces import ToolContext


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("info", help="Show metadata and page sizes of a PDF")
    parser.add_argument("input", help="Input PDF file")
    parser.set_defaults(tool_name="info", build_context=_build_context, report=report)


def _build_context(args) -> ToolContext:
    return ToolContext(input_path=args.input)


def report(info: DocumentInfo) -> str:
    lines = [f"Pages: {info.page_count}"]
    for label, value in (
        ("Title", info.title),
        ("Author", info.author),
        ("Subject", info.subject),
        ("Keywords", ", ".join(info.keywords) if info.keywords else None),
        ("Creator", info.creator),
        ("Producer", info.producer),
        ("Created", info.creation_date.isoformat() if info.creation_date else None),
        ("Modified", info.modification_date.isoformat() if info.modification_date else None),
    ):
        if value:
            lines.append(f"{label}: {value}")
    for page in info.pages:
        lines.append(
            f"  page {page.page_index + 1}: {page.width:g} x {page.height:g} pt, rotated {page.rotation}"
        )
    return "\n".join(lines)
