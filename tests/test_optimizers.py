from __future__ import annotations

import subprocess
from pathlib import Path
from types import SimpleNamespace

import pytest

from pdfeditx.compress import BackendError
from pdfeditx.compress import optimizers
from pdfeditx.compress.optimizers import (
    FALLBACK_EXECUTABLE,
    GHOSTSCRIPT_CANDIDATES,
    build_ghostscript_command,
    candidate_executables,
    coerce_level,
    find_ghostscript,
    probe_executable,
    run_ghostscript,
)
from pdfeditx.core.model import CompressionLevel


@pytest.mark.parametrize(
    ("level", "preset"),
    [(25, "/printer"), (50, "/ebook"), (75, "/screen")],
)
def test_build_ghostscript_command(level: int, preset: str, tmp_path: Path) -> None:
    source = tmp_path / "input.pdf"
    output = tmp_path / "output.pdf"

    command = build_ghostscript_command("gs", source, output, level)

    assert command == [
        "gs",
        "-sDEVICE=pdfwrite",
        "-dCompatibilityLevel=1.4",
        f"-dPDFSETTINGS={preset}",
        "-dNOPAUSE",
        "-dQUIET",
        "-dBATCH",
        f"-sOutputFile={output}",
        str(source),
    ]


def test_coerce_level() -> None:
    assert coerce_level(75) is CompressionLevel.HEAVY
    with pytest.raises(ValueError):
        coerce_level(10)


def test_candidate_executables_puts_override_first() -> None:
    candidates = candidate_executables("/custom/gs")

    assert candidates[0] == "/custom/gs"
    assert candidates[1:] == GHOSTSCRIPT_CANDIDATES
    assert candidate_executables(None) == GHOSTSCRIPT_CANDIDATES


def test_probe_executable_handles_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    def _missing(command, **kwargs):
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(optimizers, "run_subprocess", _missing)

    assert probe_executable("/nowhere/gs") is False


def test_probe_executable_accepts_version_output(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        optimizers, "run_subprocess", lambda command, **kwargs: SimpleNamespace(returncode=0, stdout="10.02.1")
    )
    assert probe_executable("gs") is True


def test_find_ghostscript_probes_in_order_and_caches(monkeypatch: pytest.MonkeyPatch) -> None:
    probed: list[str] = []

    def _probe(executable: str, *, timeout=None) -> bool:
        probed.append(executable)
        return executable == "/usr/bin/gs"

    monkeypatch.setattr(optimizers, "probe_executable", _probe)

    assert find_ghostscript() == "/usr/bin/gs"
    assert find_ghostscript() == "/usr/bin/gs"
    assert probed == ["/opt/homebrew/bin/gs", "/usr/local/bin/gs", "/usr/bin/gs"]


def test_find_ghostscript_prefers_configured_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PDFEDITX_GHOSTSCRIPT", "/custom/gs")
    monkeypatch.setattr(optimizers, "probe_executable", lambda executable, *, timeout=None: True)

    assert find_ghostscript() == "/custom/gs"


def test_find_ghostscript_falls_back_to_bare_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(optimizers, "probe_executable", lambda executable, *, timeout=None: False)

    assert find_ghostscript() == FALLBACK_EXECUTABLE


def test_run_ghostscript_reports_exit_code_and_stderr(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def _fail(command, **kwargs):
        raise subprocess.CalledProcessError(1, command, output="", stderr="Unrecoverable error\n")

    monkeypatch.setattr(optimizers, "run_subprocess", _fail)

    with pytest.raises(BackendError, match="exited with code 1: Unrecoverable error"):
        run_ghostscript("gs", tmp_path / "in.pdf", tmp_path / "out.pdf", 50)


def test_run_ghostscript_reports_timeout(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def _hang(command, **kwargs):
        raise subprocess.TimeoutExpired(command, kwargs["timeout"])

    monkeypatch.setattr(optimizers, "run_subprocess", _hang)

    with pytest.raises(BackendError, match="within 5 seconds"):
        run_ghostscript("gs", tmp_path / "in.pdf", tmp_path / "out.pdf", 50, timeout=5)


def test_run_ghostscript_requires_output(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(optimizers, "run_subprocess", lambda command, **kwargs: None)

    with pytest.raises(BackendError, match="without producing an output file"):
        run_ghostscript("gs", tmp_path / "in.pdf", tmp_path / "out.pdf", 25)


def test_run_ghostscript_passes_command_and_timeout(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured = {}
    output = tmp_path / "out.pdf"

    def _run(command, **kwargs):
        captured["command"] = command
        captured["timeout"] = kwargs.get("timeout")
        output.write_bytes(b"%PDF-1.4")

    monkeypatch.setattr(optimizers, "run_subprocess", _run)

    run_ghostscript("/usr/bin/gs", tmp_path / "in.pdf", output, 75, timeout=30, compatibility_level="1.5")

    assert captured["command"][0] == "/usr/bin/gs"
    assert "-dPDFSETTINGS=/screen" in captured["command"]
    assert "-dCompatibilityLevel=1.5" in captured["command"]
    assert captured["timeout"] == 30
