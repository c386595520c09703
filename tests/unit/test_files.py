"""Unit tests for Sorbet file helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from sorbet.diagnostics import DiagnosticCollector
from sorbet.errors import CommandError
from sorbet.io.files import dump_file, load_file
from sorbet.parser import parse


def test_load_file_parses_sample(sample_path: Path, collector: DiagnosticCollector) -> None:
    entries = load_file(sample_path, sink=collector)

    assert entries == {
        "name": "sorbet",
        "description": "A minimal format\nwith continuation lines\nfor long values",
        "owner": "ops-team",
    }
    assert not collector.has_errors


def test_dump_file_then_load_file_round_trips(
    tmp_path: Path, collector: DiagnosticCollector
) -> None:
    mapping = {"title": "Release notes", "body": "line one\nline two"}

    written = dump_file(tmp_path / "nested" / "notes.sorbet", mapping)

    assert written.read_text(encoding="utf-8") == (
        "title => Release notes\nbody => line one\n> line two\n"
    )
    assert load_file(written, sink=collector) == mapping


def test_dump_file_honors_sort_keys_and_trailing_newline(tmp_path: Path) -> None:
    written = dump_file(
        tmp_path / "out.sorbet",
        {"b": "2", "a": "1"},
        sort_keys=True,
        trailing_newline=False,
    )

    assert written.read_text(encoding="utf-8") == "a => 1\nb => 2"


def test_dump_file_writes_empty_mapping_as_empty_file(tmp_path: Path) -> None:
    written = dump_file(tmp_path / "empty.sorbet", {})

    assert written.read_text(encoding="utf-8") == ""


def test_load_file_uses_requested_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.sorbet"
    path.write_bytes("city => Zürich".encode("latin-1"))

    assert load_file(path, encoding="latin-1") == {"city": "Zürich"}


def test_load_file_missing_path_raises_read_stage_error(tmp_path: Path) -> None:
    with pytest.raises(CommandError) as exc_info:
        load_file(tmp_path / "missing.sorbet")

    assert exc_info.value.stage == "read"
    assert "File not found" in exc_info.value.detail


def test_load_file_undecodable_bytes_raise_read_stage_error(tmp_path: Path) -> None:
    path = tmp_path / "binary.sorbet"
    path.write_bytes(b"key => \xff\xfe")

    with pytest.raises(CommandError, match="Could not decode") as exc_info:
        load_file(path)

    assert exc_info.value.hint is not None


def test_load_file_keeps_carriage_returns_like_parse(
    tmp_path: Path, collector: DiagnosticCollector
) -> None:
    """A lone carriage return inside a line is not treated as a line break."""

    text = "key => a\rb\nnext => c"
    path = tmp_path / "cr.sorbet"
    path.write_bytes(text.encode("utf-8"))

    assert load_file(path, sink=collector) == parse(text, sink=collector)
    assert load_file(path, sink=collector) == {"key": "a\rb", "next": "c"}


def test_dump_file_writes_lf_line_endings(tmp_path: Path) -> None:
    written = dump_file(tmp_path / "lf.sorbet", {"a": "1", "b": "x\ny"})

    assert written.read_bytes() == b"a => 1\nb => x\n> y\n"
