from __future__ import annotations

import io
from pathlib import Path
from typing import Callable
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfeditx.compress.optimizers import reset_ghostscript_cache  # noqa: E402
from pdfeditx.config import get_settings  # noqa: E402

# Page widths double as page identities in ordering assertions.
SAMPLE_WIDTHS = (100, 200, 300)


def _to_bytes(writer: PdfWriter) -> bytes:
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "PDFEDITX_GHOSTSCRIPT",
        "PDFEDITX_GHOSTSCRIPT_TIMEOUT",
        "PDFEDITX_PROBE_TIMEOUT",
        "PDFEDITX_COMPATIBILITY_LEVEL",
        "PDFEDITX_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_ghostscript_cache()
    yield
    get_settings.cache_clear()
    reset_ghostscript_cache()


@pytest.fixture()
def pdf_bytes_factory() -> Callable[..., bytes]:
    def _create(widths=SAMPLE_WIDTHS, height: float = 400, metadata: dict | None = None) -> bytes:
        writer = PdfWriter()
        for width in widths:
            writer.add_blank_page(width=width, height=height)
        if metadata:
            writer.add_metadata(metadata)
        return _to_bytes(writer)

    return _create


@pytest.fixture()
def sample_pdf_bytes(pdf_bytes_factory: Callable[..., bytes]) -> bytes:
    return pdf_bytes_factory(
        metadata={
            "/Title": "Sample",
            "/Author": "pdfeditx-tests",
            "/Subject": "Fixtures",
            "/Keywords": "alpha, beta ,, gamma",
            "/Producer": "pdfeditx-tests",
            "/CreationDate": "D:20240102030405Z",
        }
    )


@pytest.fixture()
def letter_pdf_bytes(pdf_bytes_factory: Callable[..., bytes]) -> bytes:
    return pdf_bytes_factory(widths=(612,), height=792)


@pytest.fixture()
def sample_pdf(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    pdf_path = tmp_path / "sample.pdf"
    pdf_path.write_bytes(sample_pdf_bytes)
    return pdf_path


@pytest.fixture()
def pdf_factory(tmp_path: Path, pdf_bytes_factory: Callable[..., bytes]) -> Callable[..., Path]:
    def _create(filename: str, widths=SAMPLE_WIDTHS, title: str | None = None) -> Path:
        path = tmp_path / filename
        path.write_bytes(pdf_bytes_factory(widths=widths, metadata={"/Title": title} if title else None))
        return path

    return _create


@pytest.fixture()
def page_widths() -> Callable[[bytes | Path], list[int]]:
    def _widths(source: bytes | Path) -> list[int]:
        data = source.read_bytes() if isinstance(source, Path) else source
        reader = PdfReader(io.BytesIO(data))
        return [int(float(page.mediabox.width)) for page in reader.pages]

    return _widths
