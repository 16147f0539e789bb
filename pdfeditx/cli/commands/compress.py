"""CLI helpers for compressing PDF files."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...compress.optimizers import BackendType
from ...tools.common.interfaces import ToolContext

LEVEL_CHOICES = ["light", "medium", "heavy", "25", "50", "75"]


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("compress", help="Compress a PDF file with Ghostscript")
    _add_common(parser)
    parser.add_argument(
        "--fallback",
        action="store_true",
        help="Use the in-process optimizer when Ghostscript fails",
    )
    parser.set_defaults(tool_name="compress", build_context=_build_context, strategy=BackendType.GHOSTSCRIPT)

    optimize = subparsers.add_parser("optimize", help="Rewrite a PDF compactly without Ghostscript")
    _add_common(optimize)
    optimize.set_defaults(
        tool_name="compress", build_context=_build_context, strategy=BackendType.PYPDF, fallback=False
    )


def _add_common(parser: ArgumentParser) -> None:
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("output", help="Destination for compressed PDF")
    parser.add_argument("--level", choices=LEVEL_CHOICES, default="medium", help="Compression level")


def _build_context(args) -> ToolContext:
    return ToolContext(
        input_path=args.input,
        output_path=args.output,
        config={"level": args.level, "strategy": args.strategy, "fallback": args.fallback},
    )
