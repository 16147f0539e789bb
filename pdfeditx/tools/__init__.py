"""Namespace for pluggable pdfeditx tools working on files."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .pages import pages  # noqa: F401  # register info, reorder, extract, delete and rotate
    from .merger import merge  # noqa: F401
    from .annotator import annotate  # noqa: F401
    from .compressor import compress  # noqa: F401


__all__ = ["registry", "load_builtin_plugins"]
