"""Plugin exposing compression helpers through the registry."""

from __future__ import annotations

from ...compress import BackendType, CompressionError, compress_pdf, optimize_pdf
from ...core.model import CompressionLevel, CompressionResult
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfeditx.tools.compress")

_LEVEL_NAMES = {level.name.lower(): level for level in CompressionLevel}


def parse_level(value: object) -> int:
    """Accept a level as ``25``/``"50"`` or by name (``"heavy"``)."""

    if isinstance(value, str):
        name = value.strip().lower()
        if name in _LEVEL_NAMES:
            return int(_LEVEL_NAMES[name])
        try:
            return int(name)
        except ValueError as exc:
            raise ValueError(f"Unknown compression level: {value!r}") from exc
    return value  # type: ignore[return-value]


@register_tool("compress")
class CompressTool(BaseTool):
    name = "compress"

    def run(self) -> CompressionResult:
        context = self.context
        if context.input_path is None or context.output_path is None:
            raise ValueError("Compression requires input and output paths")

        level = parse_level(context.config.get("level", CompressionLevel.MEDIUM))
        strategy = BackendType(context.config.get("strategy", BackendType.GHOSTSCRIPT))
        LOGGER.debug(
            "Compressing %s to %s with level %s using %s",
            context.input_path,
            context.output_path,
            level,
            strategy.value,
        )

        data = context.read_input()
        if strategy is BackendType.PYPDF:
            result = optimize_pdf(data, level)
        else:
            result = compress_pdf(data, level, fallback=bool(context.config.get("fallback", False)))
        context.resources["result"] = result

        if not result.success or result.data is None:
            raise CompressionError(result.error or "Compression failed")
        context.write_output(result.data)
        return result
