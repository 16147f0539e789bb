"""CLI helpers for reordering, extracting, deleting and rotating pages."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...pages.operations import VALID_ROTATIONS
from ...tools.common.interfaces import ToolContext
from ._parsing import page_list, page_number


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    reorder = subparsers.add_parser("reorder", help="Write the pages of a PDF in a new order")
    _add_paths(reorder)
    reorder.add_argument("order", type=page_list, help="New page order, e.g. 3,1,2")
    reorder.set_defaults(tool_name="reorder", build_context=_build_reorder_context)

    extract = subparsers.add_parser("extract", help="Copy selected pages into a new PDF")
    _add_paths(extract)
    extract.add_argument("pages", type=page_list, help="Pages to keep, e.g. 1,3-5")
    extract.set_defaults(tool_name="extract", build_context=_build_pages_context)

    delete = subparsers.add_parser("delete", help="Remove pages from a PDF")
    _add_paths(delete)
    delete.add_argument("pages", type=page_list, help="Pages to remove, e.g. 2,4")
    delete.set_defaults(tool_name="delete", build_context=_build_pages_context)

    rotate = subparsers.add_parser("rotate", help="Set the rotation of one page")
    _add_paths(rotate)
    rotate.add_argument("page", type=page_number, help="Page number to rotate")
    rotate.add_argument("degrees", type=int, choices=VALID_ROTATIONS, help="Absolute rotation")
    rotate.set_defaults(tool_name="rotate", build_context=_build_rotate_context)


def _add_paths(parser: ArgumentParser) -> None:
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("output", help="Output PDF path")


def _build_reorder_context(args) -> ToolContext:
    return ToolContext(input_path=args.input, output_path=args.output, config={"order": args.order})


def _build_pages_context(args) -> ToolContext:
    return ToolContext(input_path=args.input, output_path=args.output, config={"pages": args.pages})


def _build_rotate_context(args) -> ToolContext:
    return ToolContext(
        input_path=args.input,
        output_path=args.output,
        config={"page": args.page, "degrees": args.degrees},
    )
