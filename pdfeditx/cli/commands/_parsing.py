"""Argument parsers shared by the subcommands."""

from __future__ import annotations

import argparse
import re

_PAGE_SPEC = re.compile(r"^[\d,\s-]+$")


def page_number(value: str) -> int:
    """Convert a 1-based page number from the command line to an index."""

    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid page number: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"page numbers start at 1, got {number}")
    return number - 1


def page_list(value: str) -> list[int]:
    """Parse ``"1,3,5-7"`` into zero-based indices, keeping order and repeats."""

    indices: list[int] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            start, _, end = part.partition("-")
            first, last = page_number(start), page_number(end)
            step = 1 if last >= first else -1
            indices.extend(range(first, last + step, step))
        else:
            indices.append(page_number(part))
    if not indices:
        raise argparse.ArgumentTypeError(f"no pages given in {value!r}")
    return indices


def merge_input(value: str) -> str | tuple[str, list[int]]:
    """Parse ``path`` or ``path:pages`` as used by the merge command."""

    path, separator, pages = value.rpartition(":")
    if not separator or not path or not _PAGE_SPEC.match(pages):
        return value
    return path, page_list(pages)
