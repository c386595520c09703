"""File helpers for reading and writing Sorbet documents.

Responsibilities:
- Load a Sorbet file into a mapping through the best-effort parser.
- Write a mapping as Sorbet text, creating parent directories as needed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from ..diagnostics import DiagnosticSink
from ..errors import CommandError
from ..formatter import format_mapping
from ..parser import parse


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file, mapping filesystem and decoding failures to `CommandError`.

    Line endings are returned untranslated so that file input and in-memory
    text split into the same lines.
    """

    try:
        with path.open(encoding=encoding, newline="") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise CommandError(
            stage="read",
            detail=f"File not found: `{path}`.",
            hint="Pass an existing file path.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise CommandError(
            stage="read",
            detail=f"Could not decode `{path}` as {encoding}: {exc.reason}.",
            hint="Set `encoding` via `--config` or `SORBET_ENCODING`.",
        ) from exc
    except OSError as exc:
        raise CommandError(stage="read", detail=f"Failed to read `{path}`: {exc}") from exc


def load_file(
    path: Path,
    sink: DiagnosticSink | None = None,
    encoding: str = "utf-8",
) -> dict[str, str]:
    """Read and parse a Sorbet file."""

    return parse(read_text(path, encoding=encoding), sink=sink)


def dump_file(
    path: Path,
    mapping: Mapping[str, str],
    encoding: str = "utf-8",
    sort_keys: bool = False,
    trailing_newline: bool = True,
) -> Path:
    """Format `mapping` and write it to `path` with LF line endings, returning the path."""

    content = format_mapping(mapping, sort_keys=sort_keys)
    if trailing_newline and content:
        content += "\n"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise CommandError(stage="write", detail=f"Failed to write `{path}`: {exc}") from exc
    return path
