"""CLI helpers for baking annotations into a PDF."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import ToolContext


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("annotate", help="Draw annotations permanently onto pages")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("annotations", help="JSON file holding an array of annotation objects")
    parser.add_argument("output", help="Output PDF path")
    parser.set_defaults(tool_name="annotate", build_context=_build_context)


def _build_context(args) -> ToolContext:
    return ToolContext(
        input_path=args.input,
        output_path=args.output,
        config={"annotations_file": args.annotations},
    )
