"""Sorbet text parser.

Responsibilities:
- Fold input lines into an ordered key/value mapping.
- Join continuation lines (`> text`) onto the most recent key's value.
- Report malformed lines to a diagnostic sink and keep going.

Key public functions:
- `parse`: best-effort parse that never raises.
- `parse_strict`: parse that raises `SorbetSyntaxError` on any diagnostic.
"""

from __future__ import annotations

from loguru import logger

from .diagnostics import (
    ConsoleDiagnosticSink,
    DiagnosticCollector,
    DiagnosticSink,
    deliver,
)
from .errors import SorbetSyntaxError
from .models.datatypes import Diagnostic, DiagnosticKind, ParseState

SEPARATOR = "=>"
CONTINUATION_MARKER = ">"


def parse(text: str, sink: DiagnosticSink | None = None) -> dict[str, str]:
    """Parse Sorbet text into a key/value mapping.

    Args:
        text: Raw input, split into lines on `\\n`.
        sink: Receives one `Diagnostic` per malformed line. Defaults to a
            `ConsoleDiagnosticSink` writing to stderr.

    Returns:
        Mapping of keys to trimmed values; later duplicates overwrite earlier ones.
    """

    report = sink if sink is not None else ConsoleDiagnosticSink()
    state = ParseState()
    reported = 0

    for line in text.split("\n"):
        if SEPARATOR in line:
            state.commit()
            parts = line.split(SEPARATOR)
            if len(parts) == 2:
                key, value = parts
                state.begin(key.strip(), value.strip())
            else:
                reported += 1
                _emit(
                    report,
                    DiagnosticKind.SYNTAX,
                    f"Syntax error! Expected [key] => [value] at: {line}",
                )
                state.reset()
            continue

        stripped = line.strip()
        if not stripped.startswith(CONTINUATION_MARKER):
            continue
        if state.current_key is None:
            reported += 1
            _emit(
                report,
                DiagnosticKind.SYNTAX_EXCEPTION,
                f"Continuation line without a key at: {line}",
            )
            continue
        state.append(stripped[len(CONTINUATION_MARKER):].strip())

    state.commit()
    logger.debug("parsed entries={} diagnostics={}", len(state.entries), reported)
    return state.entries


def parse_strict(text: str) -> dict[str, str]:
    """Parse Sorbet text and fail if any line was malformed.

    Raises:
        SorbetSyntaxError: If at least one diagnostic was reported.
    """

    collector = DiagnosticCollector()
    entries = parse(text, sink=collector)
    if collector.has_errors:
        raise SorbetSyntaxError(tuple(collector.diagnostics))
    return entries


def _emit(sink: DiagnosticSink, kind: DiagnosticKind, message: str) -> None:
    """Log and report one diagnostic."""

    logger.debug("diagnostic kind={} message={!r}", kind.value, message)
    deliver(sink, Diagnostic(kind=kind, message=message))
