"""Unit tests for diagnostic records and sinks."""

from __future__ import annotations

import io

from loguru import logger

from sorbet.diagnostics import (
    ConsoleDiagnosticSink,
    DiagnosticCollector,
    LoggingDiagnosticSink,
    deliver,
    fan_out,
)
from sorbet.models.datatypes import Diagnostic, DiagnosticKind

_SYNTAX = Diagnostic(kind=DiagnosticKind.SYNTAX, message="bad pair")
_ORPHAN = Diagnostic(kind=DiagnosticKind.SYNTAX_EXCEPTION, message="orphan line")


def test_diagnostic_render_uses_kind_specific_prefix() -> None:
    assert _SYNTAX.render() == "Syntax Error: bad pair"
    assert _ORPHAN.render() == "Syntax Exception: orphan line"


def test_console_sink_writes_one_line_per_diagnostic() -> None:
    stream = io.StringIO()
    sink = ConsoleDiagnosticSink(stream)

    sink(_SYNTAX)
    sink(_ORPHAN)

    assert stream.getvalue() == "Syntax Error: bad pair\nSyntax Exception: orphan line\n"


def test_collector_records_counts_and_clears() -> None:
    collector = DiagnosticCollector()
    assert not collector.has_errors

    collector(_SYNTAX)
    collector(_ORPHAN)
    collector(_ORPHAN)

    assert collector.has_errors
    assert collector.count(DiagnosticKind.SYNTAX) == 1
    assert collector.count(DiagnosticKind.SYNTAX_EXCEPTION) == 2

    collector.clear()
    assert collector.diagnostics == []


def test_logging_sink_forwards_to_loguru_warning() -> None:
    stream = io.StringIO()
    logger.remove()
    logger.add(stream, format="{level}|{extra[kind]}|{message}", colorize=False)
    logger.enable("sorbet")

    LoggingDiagnosticSink()(_ORPHAN)

    assert stream.getvalue() == "WARNING|SyntaxException|Syntax Exception: orphan line\n"


def test_fan_out_reports_to_every_sink_in_order() -> None:
    first = DiagnosticCollector()
    second = DiagnosticCollector()

    fan_out(first, second)(_SYNTAX)

    assert first.diagnostics == [_SYNTAX]
    assert second.diagnostics == [_SYNTAX]


def _failing_sink(diagnostic: Diagnostic) -> None:
    raise RuntimeError(f"sink offline for {diagnostic.kind.value}")


def test_fan_out_continues_after_a_failing_sink() -> None:
    collector = DiagnosticCollector()

    fan_out(_failing_sink, collector)(_SYNTAX)

    assert collector.diagnostics == [_SYNTAX]


def test_deliver_logs_sink_failures() -> None:
    stream = io.StringIO()
    logger.remove()
    logger.add(stream, format="{level}|{message}", colorize=False, backtrace=False)
    logger.enable("sorbet")

    deliver(_failing_sink, _ORPHAN)

    output = stream.getvalue()
    assert output.startswith("ERROR|diagnostic sink ")
    assert "failed on kind=SyntaxException" in output
    assert "RuntimeError: sink offline for SyntaxException" in output
