"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from build_notes_site import main, parse_args


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_parse_args_defaults() -> None:
    args = parse_args([])

    assert args.input == Path(".")
    assert args.output == Path("./dist")
    assert args.workers == 1
    assert args.recursive_notes is False
    assert args.no_convert_docs is False
    assert args.clean is False


@pytest.mark.usefixtures("reset_logger")
def test_main_reports_summary(content_root: Path, output_root: Path, capsys) -> None:
    _write(content_root / "MATH_algebra.md", "# Algebra\n")
    (content_root / "BAD_note.md").write_bytes(b"\xff\xfe")

    code = main(["--input", str(content_root), "--output", str(output_root), "--title", "Physics Club"])

    assert code == 0
    out = capsys.readouterr().out
    assert "✅ Generated 1 note page(s)" in out
    assert f"📦 Output: {output_root.resolve()}" in out
    assert "⚠️ Skipped files:" in out
    assert " - BAD_note.md: " in out
    index = (output_root / "index.html").read_text(encoding="utf-8")
    assert "<title>Physics Club</title>" in index


@pytest.mark.usefixtures("reset_logger")
def test_main_without_failures_has_no_skipped_section(content_root: Path, output_root: Path, capsys) -> None:
    _write(content_root / "notes.md", "hello\n")

    code = main(["--input", str(content_root), "--output", str(output_root), "--no-convert-docs"])

    assert code == 0
    out = capsys.readouterr().out
    assert "Skipped files" not in out


@pytest.mark.usefixtures("reset_logger")
def test_main_unwritable_log_file_exits_non_zero(content_root: Path, output_root: Path, tmp_path: Path, capsys) -> None:
    log_file = tmp_path / "no-such-dir" / "build.log"

    code = main(["--input", str(content_root), "--output", str(output_root), "--log-file", str(log_file)])

    assert code == 1
    captured = capsys.readouterr()
    assert "Build failed: cannot open log file" in captured.err
    assert "Generated" not in captured.out
    assert not output_root.exists()


@pytest.mark.usefixtures("reset_logger")
def test_main_missing_input_exits_non_zero(tmp_path: Path, output_root: Path, capsys) -> None:
    code = main(["--input", str(tmp_path / "missing"), "--output", str(output_root)])

    assert code == 1
    captured = capsys.readouterr()
    assert "Build failed: Input directory not found" in captured.err
    assert "Generated" not in captured.out
