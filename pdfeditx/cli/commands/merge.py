"""CLI helpers for merging PDFs."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ToolContext
from ._parsing import merge_input


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("merge", help="Merge multiple PDFs into one")
    parser.add_argument(
        "inputs",
        nargs="+",
        type=merge_input,
        help="Input PDF files, optionally as path:pages (e.g. a.pdf:1,3-4)",
    )
    parser.add_argument("output", help="Output PDF path")
    parser.add_argument("--title", help="Title of the merged document")
    parser.add_argument("--author", help="Author of the merged document")
    parser.set_defaults(tool_name="merge", build_context=_build_context)


def _build_context(args) -> ToolContext:
    document_info = {"title": args.title, "author": args.author}
    return ToolContext(
        output_path=args.output,
        config={
            "inputs": args.inputs,
            "document_info": {key: value for key, value in document_info.items() if value},
        },
    )
