"""Colour parsing for annotation records."""

from __future__ import annotations

import logging
import re

LOGGER = logging.getLogger("pdfeditx.annotate")

_HEX_PATTERN = re.compile(r"^#?(?P<digits>[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

BLACK = (0.0, 0.0, 0.0)


def parse_hex_color(value: str) -> tuple[float, float, float]:
    """Convert ``#RRGGBB`` or ``#RGB`` into normalized ``(r, g, b)`` channels.

    Raises:
        ValueError: If *value* is not a hex colour.
    """

    match = _HEX_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid hex colour: {value!r}")

    digits = match.group("digits")
    if len(digits) == 3:
        digits = "".join(channel * 2 for channel in digits)
    return tuple(int(digits[offset : offset + 2], 16) / 255 for offset in (0, 2, 4))  # type: ignore[return-value]


def hex_to_rgb(value: str) -> tuple[float, float, float]:
    """Lenient variant of :func:`parse_hex_color` falling back to black."""

    try:
        return parse_hex_color(value)
    except ValueError:
        LOGGER.warning("Invalid annotation colour %r; drawing in black", value)
        return BLACK


__all__ = ["BLACK", "hex_to_rgb", "parse_hex_color"]
