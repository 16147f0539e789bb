"""Command line interface for the pdfeditx toolkit."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from ..compress.utils import sizeof_fmt
from ..config import get_settings
from ..core.exceptions import PdfEditXError
from ..core.model import CompressionResult
from ..core.utils import configure_logging, get_logger
from ..tools import load_builtin_plugins
from ..tools.common.interfaces import ToolContext
from ..tools.common.pipeline import registry
from .commands import annotate, compress, info, merge, pages

COMMAND_MODULES = [info, merge, pages, annotate, compress]

LOGGER = get_logger("pdfeditx.cli")


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdfeditx", description="pdfeditx CLI")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR); defaults to PDFEDITX_LOG_LEVEL",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def _describe(args, result: object) -> str | None:
    report = getattr(args, "report", None)
    if report is not None:
        return report(result)
    if isinstance(result, CompressionResult):
        return (
            f"{sizeof_fmt(result.original_size)} -> {sizeof_fmt(result.compressed_size)} "
            f"({result.reduction_percent}% smaller, {result.backend})"
        )
    return None


def main(argv: Sequence[str] | None = None) -> int:
    load_builtin_plugins()
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level or get_settings().log_level)
    except ValueError as exc:
        parser.error(str(exc))

    context: ToolContext = args.build_context(args)
    try:
        result = registry.run(args.tool_name, context)
    except (PdfEditXError, OSError, ValueError) as exc:
        LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"pdfeditx {args.command}: {exc}", file=sys.stderr)
        return 1

    message = _describe(args, result)
    if message:
        print(message)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
